"""
Minecraft AI Backend - FastAPI application relaying chat messages to a hosted LLM
with a fixed Minecraft-expert system prompt.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from routes import chat, health
from services.upstream import OllamaUpstream, UpstreamClient
from utils.constants import ErrorMessages
from utils.logger import app_logger


def is_message_error(error: dict) -> bool:
    """True when a validation error concerns the `message` field or a missing/non-object body."""
    loc = tuple(error.get('loc', ()))
    if error.get('type') == 'json_invalid':
        return False
    return loc == ('body',) or loc[:2] == ('body', 'message')


def log_startup(config: Config) -> None:
    app_logger.info(f"{config.app_title} started")
    app_logger.info(f"Server running on http://{config.host}:{config.port}")
    app_logger.info(f"Upstream API ({config.upstream_host}): {'configured' if config.api_key_configured else 'NOT CONFIGURED'}")
    app_logger.info("Endpoints: GET /health - check server status, POST /chat - send messages to AI")


def create_app(config: Optional[Config] = None, upstream: Optional[UpstreamClient] = None) -> FastAPI:
    """
    Build the application around an immutable config and an upstream client.

    Args:
        config: Settings to serve with; read from the environment when omitted
        upstream: Generation client; an OllamaUpstream for `config` when omitted

    Returns:
        Configured FastAPI application
    """
    config = config or Config.from_env()
    upstream = upstream or OllamaUpstream(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        config.validate()
        log_startup(config)
        yield
        await upstream.close()
        app_logger.info("Shutting down")

    app = FastAPI(title=config.app_title, lifespan=lifespan)
    app.state.config = config
    app.state.upstream = upstream

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Turn body validation failures into the relay's 400 error shape."""
        errors = exc.errors()
        app_logger.warning(f"Validation error for {request.url}: {errors}")

        if not errors or any(is_message_error(error) for error in errors):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": ErrorMessages.MESSAGE_REQUIRED},
            )

        first_error = errors[0]
        field = first_error.get('loc', [])[-1] if first_error.get('loc') else 'field'
        message = f"{field}: {first_error.get('msg', 'Validation error')}"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": ErrorMessages.INVALID_REQUEST, "details": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Last-resort handler so unexpected failures still answer with JSON.

        Runs outside CORSMiddleware, so the CORS header is set here.
        """
        app_logger.exception(f"Unexpected error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ErrorMessages.INTERNAL_ERROR, "message": str(exc)},
            headers={"Access-Control-Allow-Origin": "*"},
        )

    app.include_router(health.router, tags=["health"])
    app.include_router(chat.router, tags=["chat"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
