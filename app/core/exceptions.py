"""
Global exception handling for the application.
Every error reaches the client as `{"success": false, "message": ..., "errors": ...}`.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppError):
    """Malformed or out-of-range input; the caller must correct and resubmit."""
    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Uniqueness violation (company, product code, invoice number...)."""
    def __init__(self, message: str = "Duplicate entry", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class InsufficientStockException(AppError):
    """A sale line asks for more feet than the store holds, tolerance included."""
    def __init__(self, product_code: str, available_feet: float, requested_feet: float):
        super().__init__(
            f"Insufficient stock for {product_code}",
            status.HTTP_400_BAD_REQUEST,
            {
                "product_code": product_code,
                "available_feet": round(available_feet, 4),
                "requested_feet": round(requested_feet, 4),
            },
        )
        self.product_code = product_code


class ServerException(AppError):
    """Storage or transport failure not attributable to the caller."""
    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def _error_response(status_code: int, message: str, errors: Any = None) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render a known application error."""
    if exc.status_code >= 500:
        logger.error("Application error", path=request.url.path, error=exc.message)
    return _error_response(exc.status_code, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Pydantic/FastAPI request validation failures become a 400 with a readable message list."""
    error_messages = []
    for error in exc.errors():
        field = " -> ".join(str(x) for x in error["loc"] if x != "body")
        error_messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    logger.info("Request validation failed", path=request.url.path, errors=error_messages)
    return _error_response(status.HTTP_400_BAD_REQUEST, ", ".join(error_messages), error_messages)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Duplicate-key storage errors map to 409."""
    logger.warning("Integrity error", path=request.url.path, error=str(exc.orig))
    return _error_response(status.HTTP_409_CONFLICT, "Duplicate entry")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
