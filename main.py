# main.py
"""
Exercise Tracker API - Main Application.

FastAPI app with MongoDB backend.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from database import MongoStore
from settings import settings
from tracker.middleware import LazyDatabaseMiddleware, register_error_handlers
from tracker.routes import users
from tracker.store import ExerciseStore

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")

BASE_DIR = Path(__file__).resolve().parent
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Exercise Tracker API...")
    store = app.state.store
    # If this fails the first request retries via LazyDatabaseMiddleware
    try:
        await store.connect()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.warning(f"Failed to initialize database at startup: {e}")
        logger.warning("Database will be initialized lazily on first request")

    yield

    await store.close()
    logger.info("Exercise Tracker API shutdown complete")


def create_app(store: Optional[ExerciseStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Data store handle. Defaults to a MongoStore built from
            settings; tests pass an in-memory store instead.
    """
    app = FastAPI(
        title="Exercise Tracker API",
        version=VERSION,
        description="Create users, log exercises and query exercise logs",
        lifespan=lifespan
    )
    app.state.store = store or MongoStore(settings.MONGO_URI, settings.DATABASE_NAME)

    app.add_middleware(LazyDatabaseMiddleware)
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    views_dir = BASE_DIR / settings.VIEWS_DIR
    static_dir = BASE_DIR / settings.STATIC_DIR

    @app.get("/", include_in_schema=False)
    async def index():
        """Landing page."""
        return FileResponse(views_dir / "index.html", media_type="text/html")

    @app.get("/health")
    async def health_check():
        """Health check endpoint - fast response without database dependency."""
        return {
            "status": "ok",
            "environment": settings.ENV,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": VERSION
        }

    @app.get("/health/detailed")
    async def health_check_detailed():
        """Detailed health check with MongoDB connectivity test."""
        store_ok = await app.state.store.ping()
        return {
            "status": "ok" if store_ok else "degraded",
            "database": "mongodb",
            "database_connected": store_ok,
            "environment": settings.ENV,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": VERSION
        }

    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    # Static assets are served from the site root, after all API routes
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
