"""
Data models for chat processing.
Request-scoped values passed between the route and the upstream client.
"""
from dataclasses import dataclass, field
from typing import List

from models.api_models import ChatRequest


@dataclass(frozen=True)
class HistoryTurn:
    """A single prior turn forwarded upstream."""
    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class UpstreamRequest:
    """
    Everything sent to the generation API for one chat request.
    Built fresh per request and discarded after the response is sent.
    """
    model: str
    max_tokens: int
    system_prompt: str
    messages: List[HistoryTurn] = field(default_factory=list)


@dataclass
class ChatContext:
    """Context object for a single chat exchange."""
    request: ChatRequest
    upstream_request: UpstreamRequest

    @property
    def message(self) -> str:
        """Get user message from request."""
        return self.request.message
