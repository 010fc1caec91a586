"""
Models package exports.
"""
from models.api_models import Message, ChatRequest, ChatResponse, ErrorResponse, HealthResponse
from models.chat_models import HistoryTurn, UpstreamRequest, ChatContext

__all__ = [
    'Message',
    'ChatRequest',
    'ChatResponse',
    'ErrorResponse',
    'HealthResponse',
    'HistoryTurn',
    'UpstreamRequest',
    'ChatContext'
]
