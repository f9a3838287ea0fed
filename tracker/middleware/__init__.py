"""Exercise Tracker API - Middleware Package."""

from tracker.middleware.db_middleware import LazyDatabaseMiddleware
from tracker.middleware.errors import ServerErrorMiddleware, register_error_handlers

__all__ = [
    "LazyDatabaseMiddleware",
    "ServerErrorMiddleware",
    "register_error_handlers",
]
