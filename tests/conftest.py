import pytest
from fastapi.testclient import TestClient

from tests.fixtures.mock_clients import FakeUpstream


@pytest.fixture
def anyio_backend():
    """Async tests are written against asyncio."""
    return "asyncio"


@pytest.fixture
def config():
    """Configuration with a dummy key and default generation settings."""
    from config import Config
    return Config(api_key="test-key", upstream_host="http://upstream.test")


@pytest.fixture
def fake_upstream():
    """Upstream client returning a fixed reply."""
    return FakeUpstream(responses=["Try **Sodium** for performance ⚡"])


@pytest.fixture
def app_factory(config):
    """Build an app around a given upstream client."""
    from main import create_app

    def _build(upstream, app_config=None):
        return create_app(app_config or config, upstream)

    return _build


@pytest.fixture
def configured_app(app_factory, fake_upstream):
    """Pre-configured app client with the standard fake upstream."""
    app = app_factory(fake_upstream)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def chat_request():
    """Standard ChatRequest for testing."""
    from models.api_models import ChatRequest
    return ChatRequest(
        message="Best performance mods?",
        history=[
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"}
        ]
    )
