"""
Route handlers for chat operations.
Handles the /chat endpoint (non-streaming).
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from config import Config
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from services.chat_service import ChatService
from services.upstream import UpstreamClient, UpstreamRateLimitError, UpstreamAuthError
from utils.constants import ErrorMessages
from utils.dependencies import get_config, get_upstream
from utils.logger import app_logger

router = APIRouter()


def send_error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Build a JSON error body, omitting `details` when there are none."""
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat(
    request: ChatRequest,
    config: Config = Depends(get_config),
    upstream: UpstreamClient = Depends(get_upstream),
):
    """
    Relay a message and its recent history to the generation API.
    """
    try:
        return await ChatService.relay(request, config, upstream)

    except UpstreamRateLimitError as e:
        app_logger.error(f"Rate limited by upstream: {e.message}")
        return send_error(status.HTTP_429_TOO_MANY_REQUESTS, ErrorMessages.RATE_LIMITED)
    except UpstreamAuthError as e:
        app_logger.error(f"Upstream rejected API key: {e.message}")
        return send_error(status.HTTP_401_UNAUTHORIZED, ErrorMessages.INVALID_API_KEY)
    except Exception as e:
        app_logger.error(f"Error calling upstream API: {str(e)}")
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.UPSTREAM_FAILED, str(e))
