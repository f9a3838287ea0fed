"""Exercise Tracker API - Services Package."""

from tracker.services.user_service import UserService
from tracker.services.exercise_service import ExerciseService
from tracker.services.log_service import LogService

__all__ = [
    "UserService",
    "ExerciseService",
    "LogService",
]
