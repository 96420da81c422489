"""Custom exception classes and handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class BusinessLogicError(Exception):
    """Raised for domain-specific validation errors."""

    def __init__(self, detail: str, status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY):
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class NotFoundError(BusinessLogicError):
    """The referenced entity does not exist or has been soft-deleted."""

    def __init__(self, detail: str):
        super().__init__(detail, status_code=status.HTTP_404_NOT_FOUND)


class ConflictError(BusinessLogicError):
    """An invariant would be violated by the requested write."""

    def __init__(self, detail: str):
        super().__init__(detail, status_code=status.HTTP_409_CONFLICT)


_UNIQUE_VIOLATION_MARKERS = (
    "unique constraint",  # sqlite, postgres message text
    "uniqueviolation",  # asyncpg exception class name
    "duplicate key",  # postgres
    "duplicate entry",  # mysql
)


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when the storage error was raised by a uniqueness constraint."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == "23505" or getattr(orig, "pgcode", None) == "23505":
        return True
    text = f"{type(orig).__name__} {orig}".lower()
    return any(marker in text for marker in _UNIQUE_VIOLATION_MARKERS)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach shared exception handlers to the FastAPI app."""

    @app.exception_handler(BusinessLogicError)
    async def _business_error_handler(_: Request, exc: BusinessLogicError):
        return JSONResponse(
            {"success": False, "message": exc.detail},
            status_code=exc.status_code,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
        message = "; ".join(str(error.get("msg")) for error in errors) or "Invalid request"
        return JSONResponse(
            {"success": False, "message": message, "errors": errors},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
