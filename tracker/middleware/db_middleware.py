"""
Lazy Database Connection Middleware.

Ensures the store is connected before processing requests.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging

logger = logging.getLogger(__name__)

# Paths that must answer without touching the store
SKIP_PATHS = {"/health", "/health/detailed"}


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure store connection before handling requests."""

    async def dispatch(self, request: Request, call_next):
        """
        Connect the store if startup did not manage to.

        A failed attempt is logged and the request proceeds; the store
        call in the route then fails and is reported as a server error.
        """
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        store = request.app.state.store
        if not store.connected:
            try:
                logger.info("Lazy initializing store connection...")
                await store.connect()
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")

        return await call_next(request)
