"""
FastAPI Application Setup.

Application factory for the Lexer Core REST API. Serve with an ASGI
server in factory mode, e.g. ``uvicorn --factory lexer_core.api.app:create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lexer_core import __version__
from lexer_core.api.middleware.logging import RequestLoggingMiddleware
from lexer_core.api.routes import health, profiles, resource_types
from lexer_core.api.schemas.exceptions import APIException
from lexer_core.config import LexerSettings
from lexer_core.contract import LexerCore
from lexer_core.core.models import ErrorCode

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the registry host."""
    core: LexerCore = app.state.core
    status = core.status()
    logger.info("Lexer Core API starting up...")
    logger.info(f"Version: {__version__}")
    logger.info(
        f"Administrator: {status['administrator']}, height: {status['block_height']}, "
        f"persistent: {status['persistent']}"
    )

    yield

    logger.info("Lexer Core API shutting down...")


def create_app(
    core: LexerCore | None = None,
    settings: LexerSettings | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        core: Registry to serve; loaded from settings when omitted
        settings: Settings to load from; read from the environment when omitted

    Returns:
        Configured FastAPI application instance
    """
    if core is None:
        settings = settings or LexerSettings.from_env()
        logging.basicConfig(
            level=settings.logging_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        core = LexerCore.load(settings)

    app = FastAPI(
        title="Lexer Core API",
        description="Participant profile and resource-type registry",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.core = core

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )
    app.include_router(
        profiles.router,
        prefix="/api/v1/profiles",
        tags=["Profiles"],
    )
    app.include_router(
        resource_types.router,
        prefix="/api/v1/resource-types",
        tags=["Resource Types"],
    )

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        """Handle API exceptions with the shared error envelope."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors with per-field messages."""
        fields: dict[str, str] = {}
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            fields[".".join(loc) or "body"] = error.get("msg", "invalid")

        content: dict[str, object] = {
            "type": "validation_error",
            "message": "Request validation failed",
            "detail": None,
            "fields": fields,
        }
        if "confidentiality-level" in fields:
            content["code"] = int(ErrorCode.INVALID_CONFIDENTIALITY_LEVEL)
        return JSONResponse(status_code=400, content={"error": content})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "internal_error",
                    "message": "An unexpected error occurred",
                    "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
                }
            },
        )

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, object]:
        """Root endpoint with API information."""
        return {
            "name": "Lexer Core API",
            "version": __version__,
            "status": "operational",
            "docs": "/docs",
            "health": "/health",
        }

    return app
