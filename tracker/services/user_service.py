"""
Exercise Tracker API - User Service.

Creates and lists users.
"""

import logging
from typing import List

from tracker.store import ExerciseStore, UserRecord

logger = logging.getLogger(__name__)


class UserService:
    """Service for user records."""

    def __init__(self, store: ExerciseStore):
        self.store = store

    async def create_user(self, username: str) -> UserRecord:
        """
        Persist a new user.

        Args:
            username: Display name; uniqueness is not enforced.

        Returns:
            The stored user with its generated id.

        Raises:
            PersistenceError: If the store write fails.
        """
        user = await self.store.insert_user(username)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    async def list_users(self) -> List[UserRecord]:
        """Return every stored user in insertion order."""
        return await self.store.list_users()
