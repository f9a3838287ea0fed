"""
Error Handlers - convert failures into plain-text HTTP responses.

TrackerException subclasses map to their own status code. Request
validation failures map to 400. Anything else becomes an opaque
``500 Server error``; details only go to the server log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tracker.utils.errors import TrackerException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers and the catch-all middleware."""
    _register_tracker_error_handler(app)
    _register_validation_error_handler(app)
    app.add_middleware(ServerErrorMiddleware)


def _register_tracker_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TrackerException)
    async def tracker_error_handler(request: Request, exc: TrackerException):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
            return PlainTextResponse(
                SERVER_ERROR_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
        return PlainTextResponse(exc.message, status_code=exc.status_code)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return PlainTextResponse(
            "Invalid request",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class ServerErrorMiddleware(BaseHTTPMiddleware):
    """Catch-all: never leaks internal details."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
            )
            return PlainTextResponse(
                SERVER_ERROR_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
