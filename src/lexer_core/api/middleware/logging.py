"""
Request logging middleware.

Logs each HTTP call with its caller identity and timing.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from lexer_core.api.dependencies import CALLER_HEADER

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with method, path, caller, status and duration.

    Adds X-Process-Time and X-Request-ID response headers.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        skip_paths: set[str] | None = None,
    ) -> None:
        super().__init__(app)
        self._skip_paths = skip_paths or {"/health"}

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in self._skip_paths:
            return await call_next(request)

        start_time = time.time()
        caller = request.headers.get(CALLER_HEADER, "anonymous")
        request_id = request.headers.get("x-request-id", "unknown")
        context = {
            "method": request.method,
            "path": request.url.path,
            "caller": caller,
            "request_id": request_id,
        }

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "Request failed",
                extra={**context, "error": str(e), "duration_ms": round(duration_ms, 2)},
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} by {caller} -> {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers["X-Request-ID"] = request_id
        return response
