"""
Pydantic data models for API requests and responses.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator


class Message(BaseModel):
    """Chat message model."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Chat request model with conversation history."""
    message: str = Field(..., min_length=1)
    history: List[Message] = Field(default_factory=list)

    @field_validator("history", mode="before")
    @classmethod
    def null_history_is_empty(cls, value):
        return [] if value is None else value


class ChatResponse(BaseModel):
    """Successful chat reply."""
    response: str
    model: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error body returned for failed requests."""
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    message: str
