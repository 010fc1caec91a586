"""
Upstream generation API client.
Wraps the Ollama SDK behind a small interface so the relay's error mapping
can be exercised without network calls.
"""
from typing import Protocol, Sequence

import httpx
import ollama

from config import Config
from models.chat_models import HistoryTurn
from utils.logger import app_logger


class UpstreamError(Exception):
    """Failure reported by (or while reaching) the generation API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UpstreamRateLimitError(UpstreamError):
    """The generation API rejected the call with HTTP 429."""


class UpstreamAuthError(UpstreamError):
    """The generation API rejected the configured API key (HTTP 401)."""


class UpstreamClient(Protocol):
    """Anything that can turn a system prompt and history into reply text."""

    async def generate_reply(self, system_prompt: str, history: Sequence[HistoryTurn]) -> str:
        ...

    async def close(self) -> None:
        ...


def translate_response_error(e: ollama.ResponseError) -> UpstreamError:
    """Map an SDK error onto the relay's upstream error types."""
    if e.status_code == 429:
        return UpstreamRateLimitError(e.error, status_code=429)
    if e.status_code == 401:
        return UpstreamAuthError(e.error, status_code=401)
    return UpstreamError(e.error, status_code=e.status_code)


class OllamaUpstream:
    """UpstreamClient backed by ollama.AsyncClient."""

    def __init__(self, config: Config):
        self.config = config
        self.client = ollama.AsyncClient(**self._client_kwargs())

    def _client_kwargs(self) -> dict:
        kwargs = {"host": self.config.upstream_host}
        if self.config.api_key:
            kwargs["headers"] = {"Authorization": f"Bearer {self.config.api_key}"}
        if self.config.upstream_timeout is not None:
            kwargs["timeout"] = self.config.upstream_timeout
        return kwargs

    def build_messages(self, system_prompt: str, history: Sequence[HistoryTurn]) -> list[dict]:
        """System instruction first, then prior turns verbatim."""
        return [{"role": "system", "content": system_prompt}] + [turn.to_dict() for turn in history]

    async def generate_reply(self, system_prompt: str, history: Sequence[HistoryTurn]) -> str:
        messages = self.build_messages(system_prompt, history)

        try:
            response = await self.client.chat(
                model=self.config.model,
                messages=messages,
                options={"num_predict": self.config.max_tokens}
            )
        except ollama.ResponseError as e:
            app_logger.error(f"Upstream error ({e.status_code}): {e.error}")
            raise translate_response_error(e) from e
        except (ConnectionError, httpx.HTTPError) as e:
            app_logger.error(f"Upstream unreachable: {e}")
            raise UpstreamError(str(e) or e.__class__.__name__) from e

        content = response['message']['content']
        if not content:
            raise UpstreamError("Upstream returned no text content")
        return content

    async def close(self) -> None:
        """Release the SDK's connection pool."""
        await self.client.close()
