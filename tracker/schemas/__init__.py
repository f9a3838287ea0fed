"""Exercise Tracker API - Pydantic Schemas Package."""

from tracker.schemas.user import (
    UserCreate,
    UserResponse,
)
from tracker.schemas.exercise import (
    ExerciseCreate,
    ExerciseResponse,
    LogQuery,
    LogEntry,
    LogResponse,
)

__all__ = [
    # User
    "UserCreate",
    "UserResponse",
    # Exercise
    "ExerciseCreate",
    "ExerciseResponse",
    # Logs
    "LogQuery",
    "LogEntry",
    "LogResponse",
]
