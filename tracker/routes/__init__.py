"""Exercise Tracker API - Routes Package."""

from tracker.routes import users

__all__ = [
    "users",
]
