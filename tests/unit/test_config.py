import dataclasses

import pytest

from config import Config
from utils.constants import MODEL_NAME, SYSTEM_PROMPT


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("OLLAMA_API_KEY", "OLLAMA_HOST", "UPSTREAM_TIMEOUT", "APPEND_MESSAGE_TO_HISTORY", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_defaults(clean_env):
    """Given no environment, from_env should fall back to defaults."""
    config = Config.from_env()

    assert config.api_key == ""
    assert config.api_key_configured is False
    assert config.upstream_host == "https://ollama.com"
    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.upstream_timeout is None
    assert config.append_message_to_history is False
    assert config.model == MODEL_NAME
    assert config.max_tokens == 2048
    assert config.history_window == 10
    assert config.system_prompt == SYSTEM_PROMPT


def test_from_env_reads_overrides(clean_env):
    clean_env.setenv("OLLAMA_API_KEY", "secret")
    clean_env.setenv("OLLAMA_HOST", "http://localhost:11434")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("UPSTREAM_TIMEOUT", "30")
    clean_env.setenv("APPEND_MESSAGE_TO_HISTORY", "true")

    config = Config.from_env()

    assert config.api_key == "secret"
    assert config.api_key_configured is True
    assert config.upstream_host == "http://localhost:11434"
    assert config.port == 8080
    assert config.upstream_timeout == 30.0
    assert config.append_message_to_history is True


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_from_env_rejects_non_positive_timeout(clean_env, raw):
    clean_env.setenv("UPSTREAM_TIMEOUT", raw)

    with pytest.raises(ValueError, match="UPSTREAM_TIMEOUT"):
        Config.from_env()


def test_config_is_immutable():
    """Given a built config, assigning to it should fail."""
    config = Config(api_key="k")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"


def test_validate_warns_when_key_missing(mocker):
    warning = mocker.patch("config.app_logger.warning")

    Config(api_key="").validate()

    assert warning.called
    assert "OLLAMA_API_KEY" in warning.call_args_list[0].args[0]


def test_validate_is_silent_when_key_present(mocker):
    warning = mocker.patch("config.app_logger.warning")

    Config(api_key="k").validate()

    warning.assert_not_called()
