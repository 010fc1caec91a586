"""
Configuration module for the Minecraft AI backend.
Reads environment variables once at startup into an immutable settings value.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from utils.constants import MODEL_NAME, MAX_OUTPUT_TOKENS, HISTORY_WINDOW_SIZE, SYSTEM_PROMPT
from utils.logger import app_logger

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError(f"UPSTREAM_TIMEOUT must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class Config:
    """Application configuration, built once and never mutated."""

    # Upstream API
    api_key: str = ""
    upstream_host: str = "https://ollama.com"
    upstream_timeout: Optional[float] = None

    # Generation
    model: str = MODEL_NAME
    max_tokens: int = MAX_OUTPUT_TOKENS
    system_prompt: str = SYSTEM_PROMPT
    history_window: int = HISTORY_WINDOW_SIZE
    append_message_to_history: bool = False

    # Server
    app_title: str = "Minecraft AI Backend"
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Config":
        """Build configuration from environment variables (and .env)."""
        return cls(
            api_key=os.getenv("OLLAMA_API_KEY", ""),
            upstream_host=os.getenv("OLLAMA_HOST") or cls.upstream_host,
            upstream_timeout=_parse_timeout(os.getenv("UPSTREAM_TIMEOUT")),
            append_message_to_history=os.getenv("APPEND_MESSAGE_TO_HISTORY", "").strip().lower() in TRUTHY,
            host=os.getenv("HOST") or cls.host,
            port=int(os.getenv("PORT") or cls.port),
        )

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> None:
        """Log warnings for missing settings."""
        if not self.api_key_configured:
            app_logger.warning("OLLAMA_API_KEY not found in environment or .env file")
            app_logger.warning("Chat requests will fail until an upstream API key is configured")
