"""
Middleware configuration for the application.
Includes Correlation ID setup and request logging middleware.
"""

import time
import structlog
from typing import Callable
from fastapi import Request, Response
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status and elapsed time."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        log = logger.bind(method=request.method, path=request.url.path)

        log.debug("Request started", client_ip=request.client.host if request.client else "unknown")

        try:
            response = await call_next(request)
        except Exception:
            log.exception("Request failed", process_time_ms=_elapsed_ms(started))
            raise

        # Mutations are the interesting part of a ledger; reads stay at debug
        level = log.info if request.method in ("POST", "PUT", "PATCH", "DELETE") else log.debug
        level(
            "Request completed",
            status_code=response.status_code,
            process_time_ms=_elapsed_ms(started),
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def setup_middleware(app):
    """Setup all middleware for the application."""

    # Starlette runs the last added middleware first, so the request id is set
    # before the logging middleware sees the request.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
