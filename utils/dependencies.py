"""
FastAPI dependencies exposing the objects attached to the app at startup.
"""
from fastapi import Request

from config import Config
from services.upstream import UpstreamClient


def get_config(request: Request) -> Config:
    """Get the immutable configuration the app was created with."""
    return request.app.state.config


def get_upstream(request: Request) -> UpstreamClient:
    """Get the upstream generation client the app was created with."""
    return request.app.state.upstream
