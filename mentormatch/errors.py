# mentormatch/errors.py
"""
Domain errors and the API boundary that renders them.

Services raise these; routers let them propagate. Every error leaves the API
as ``{"status": "fail" | "error", "message": ...}`` with the matching HTTP code.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class MentorshipError(Exception):
    """Base class for every rule violation raised by the services."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MentorshipError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class RoleNotPermittedError(MentorshipError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Your role cannot perform this action"


class NotFoundOrUnauthorizedError(MentorshipError):
    """Row is absent or the caller has no claim on it; never says which."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found or unauthorized"


class ConflictError(MentorshipError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflicts with existing data"


class StorageError(MentorshipError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error occurred"


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    return {
        "status": "fail" if 400 <= status_code < 500 else "error",
        "message": message,
    }


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location) or "request"
    return f"{field}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MentorshipError)
    async def mentorship_error_handler(request: Request, exc: MentorshipError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info(
                "%s %s rejected (%s): %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.message,
            )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _first_validation_message(exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body(status.HTTP_422_UNPROCESSABLE_ENTITY, message),
        )

    # Starlette's own 404/405 and FastAPI's HTTPException (a subclass) both land here.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, StorageError.default_message),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
        )
