"""
Exercise Tracker API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # MongoDB - REQUIRED from environment
    MONGO_URI: str = Field(..., description="MongoDB connection string (required)")
    DATABASE_NAME: str = Field(default="exercise_tracker")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "*"

    # Landing page
    STATIC_DIR: str = "public"
    VIEWS_DIR: str = "views"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if not self.MONGO_URI:
            raise ValueError("MONGO_URI must be set")
        if not self.MONGO_URI.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URI must be a mongodb:// or mongodb+srv:// URI")


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
