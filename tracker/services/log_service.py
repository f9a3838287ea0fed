"""
Exercise Tracker API - Log Query Service.

Builds a user's exercise log, filtered by an inclusive date range and
capped by a result limit.

Entries are ordered by exercise date, oldest first, with insertion order
breaking ties. A limit keeps the first ``limit`` entries of that order.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from tracker.store import ExerciseStore
from tracker.utils.dates import format_date
from tracker.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class LogService:
    """Service for querying exercise logs."""

    def __init__(self, store: ExerciseStore):
        self.store = store

    async def get_logs(
        self,
        user_id: str,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Get a user's exercise log.

        Args:
            user_id: User whose exercises to return.
            from_: Inclusive lower bound on exercise date.
            to: Inclusive upper bound on exercise date.
            limit: Maximum number of entries; 0 yields an empty log.

        Returns:
            Dict with id, username, count and log. ``count`` is the length
            of the returned log, not the number of matches before limiting.

        Raises:
            ValidationError: If ``limit`` is negative.
            NotFoundError: If no user has this id.
            PersistenceError: If the store fails.
        """
        if limit is not None and limit < 0:
            raise ValidationError("limit must be a non-negative integer")

        user = await self.store.get_user(user_id)
        if not user:
            logger.warning(f"Log query for unknown user {user_id}")
            raise NotFoundError("Unknown userId", detail=f"No user with id {user_id}")

        # An inverted range matches nothing
        if from_ is not None and to is not None and from_ > to:
            exercises = []
        else:
            exercises = await self.store.find_exercises(
                user.id,
                date_from=from_,
                date_to=to,
                limit=limit,
            )

        log = [
            {
                "description": ex.description,
                "duration": ex.duration,
                "date": format_date(ex.date),
            }
            for ex in exercises
        ]

        return {
            "id": user.id,
            "username": user.username,
            "count": len(log),
            "log": log,
        }
