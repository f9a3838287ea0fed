"""
Exercise Tracker API - Exercise Service.

Logs exercises against an existing user.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Union

from tracker.store import ExerciseStore
from tracker.utils.dates import format_date, utc_now
from tracker.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class ExerciseService:
    """Service for creating exercise records."""

    def __init__(self, store: ExerciseStore):
        self.store = store

    async def create_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Log an exercise for a user.

        The owning user is resolved before anything is written, so an
        unknown ``user_id`` leaves the store untouched.

        Args:
            user_id: Owning user's id.
            description: What was done.
            duration: Minutes.
            date: When it was done; defaults to now.

        Returns:
            Dict with id, username, date, duration and description, where
            ``id`` is the user's id and ``date`` is a calendar-date string.

        Raises:
            NotFoundError: If no user has this id.
            PersistenceError: If the store fails.
        """
        user = await self.store.get_user(user_id)
        if not user:
            logger.warning(f"Exercise rejected, unknown user {user_id}")
            raise NotFoundError("Unknown userId", detail=f"No user with id {user_id}")

        exercise = await self.store.insert_exercise(
            user_id=user.id,
            description=description,
            duration=duration,
            date=date if date is not None else utc_now(),
        )
        logger.info(f"Logged exercise {exercise.id} for user {user.id}")

        return {
            "id": user.id,
            "username": user.username,
            "date": format_date(exercise.date),
            "duration": exercise.duration,
            "description": exercise.description,
        }
