"""
Route handlers for service health.
"""
from fastapi import APIRouter

from models.api_models import HealthResponse
from utils.constants import HEALTH_MESSAGE

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check. Does not touch the upstream API."""
    return HealthResponse(status="ok", message=HEALTH_MESSAGE)
