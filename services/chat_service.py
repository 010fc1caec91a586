"""
Chat service containing core chat processing logic.
Handles history windowing, upstream request shaping and response building.
"""
from datetime import datetime, timezone
from typing import Sequence

from config import Config
from models.api_models import ChatRequest, ChatResponse, Message
from models.chat_models import ChatContext, HistoryTurn, UpstreamRequest
from services.upstream import UpstreamClient
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    @staticmethod
    def trim_history(history: Sequence[Message], window: int) -> list[HistoryTurn]:
        """Keep the last `window` turns in their original order."""
        if window <= 0:
            return []
        return [HistoryTurn(role=msg.role, content=msg.content) for msg in history[-window:]]

    @staticmethod
    def build_upstream_request(request: ChatRequest, config: Config) -> UpstreamRequest:
        """
        Compose the upstream call for a validated request.

        The current message is only added as a final user turn when
        `append_message_to_history` is enabled; by default the history window
        is forwarded as-is.
        """
        turns = ChatService.trim_history(request.history, config.history_window)
        if config.append_message_to_history:
            turns.append(HistoryTurn(role="user", content=request.message))

        return UpstreamRequest(
            model=config.model,
            max_tokens=config.max_tokens,
            system_prompt=config.system_prompt,
            messages=turns
        )

    @staticmethod
    def timestamp() -> str:
        """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-01-01T12:00:00.000Z"""
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def build_response(reply: str, model: str) -> ChatResponse:
        return ChatResponse(response=reply, model=model, timestamp=ChatService.timestamp())

    @staticmethod
    async def relay(request: ChatRequest, config: Config, upstream: UpstreamClient) -> ChatResponse:
        """Run one chat exchange against the upstream API. Upstream errors propagate."""
        context = ChatContext(
            request=request,
            upstream_request=ChatService.build_upstream_request(request, config)
        )

        app_logger.info(f'Processing: "{context.message}"')

        reply = await upstream.generate_reply(
            context.upstream_request.system_prompt,
            context.upstream_request.messages
        )

        app_logger.info(f"Response generated ({len(reply)} chars)")
        return ChatService.build_response(reply, context.upstream_request.model)
