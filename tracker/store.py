"""
Exercise Tracker API - Data Store Interface.

Services talk to persistence through an ``ExerciseStore`` handle that is
built once at startup and passed in explicitly. The production
implementation lives in ``database.MongoStore``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union


@dataclass(frozen=True)
class UserRecord:
    """A stored user."""
    id: str
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A stored exercise."""
    id: str
    user_id: str
    description: str
    duration: Union[int, float]
    date: datetime


class ExerciseStore(ABC):
    """
    Persistence operations used by the services.

    Implementations raise ``PersistenceError`` when the backing store
    fails. Lookups by an id that cannot exist (malformed, unknown) return
    None rather than raising.
    """

    connected: bool = False

    async def connect(self) -> None:
        """Open the underlying connection."""
        self.connected = True

    async def close(self) -> None:
        """Release the underlying connection."""
        self.connected = False

    async def ping(self) -> bool:
        """Return True if the store is reachable."""
        return self.connected

    @abstractmethod
    async def insert_user(self, username: str) -> UserRecord:
        ...

    @abstractmethod
    async def list_users(self) -> List[UserRecord]:
        """All users in insertion order."""

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> ExerciseRecord:
        ...

    @abstractmethod
    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ExerciseRecord]:
        """
        Exercises for ``user_id`` within ``[date_from, date_to]``.

        Results are ordered by date, then insertion order, and truncated to
        ``limit`` when one is given. A limit of 0 returns nothing.
        """
