"""Root conftest — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryStore; no MongoDB is needed
    - The app is built with create_app(store=...), the same seam production uses
    - Settings never read a real connection string
"""

import os

# Settings are read at import time; keep tests off any real database
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("DATABASE_NAME", "exercise_tracker_test")

from datetime import datetime
from itertools import count
from typing import List, Optional, Union

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from main import create_app
from tracker.store import ExerciseRecord, ExerciseStore, UserRecord
from tracker.utils.errors import PersistenceError


class InMemoryStore(ExerciseStore):
    """Dict-backed store with the same ordering rules as MongoStore."""

    def __init__(self):
        self.users: dict[str, UserRecord] = {}
        self.exercises: List[tuple[int, ExerciseRecord]] = []
        self._seq = count()
        self.connected = False

    async def insert_user(self, username: str) -> UserRecord:
        user = UserRecord(id=str(ObjectId()), username=username)
        self.users[user.id] = user
        return user

    async def list_users(self) -> List[UserRecord]:
        return list(self.users.values())

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=str(ObjectId()),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self.exercises.append((next(self._seq), exercise))
        return exercise

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ExerciseRecord]:
        matches = [
            (seq, ex) for seq, ex in self.exercises
            if ex.user_id == user_id
            and (date_from is None or ex.date >= date_from)
            and (date_to is None or ex.date <= date_to)
        ]
        matches.sort(key=lambda item: (item[1].date, item[0]))
        results = [ex for _, ex in matches]
        if limit is not None:
            results = results[:limit]
        return results


class BrokenStore(InMemoryStore):
    """Store whose every read and write fails like an unreachable MongoDB."""

    async def insert_user(self, username: str) -> UserRecord:
        raise PersistenceError(detail="connection refused")

    async def list_users(self) -> List[UserRecord]:
        raise PersistenceError(detail="connection refused")

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        raise PersistenceError(detail="connection refused")


class ExerciseOutageStore(InMemoryStore):
    """Users resolve, but exercise reads and writes fail."""

    async def insert_exercise(self, *args, **kwargs) -> ExerciseRecord:
        raise PersistenceError(detail="write concern timeout")

    async def find_exercises(self, *args, **kwargs) -> List[ExerciseRecord]:
        raise PersistenceError(detail="cursor killed")


class CrashingStore(InMemoryStore):
    """Store that fails with an exception outside the app's hierarchy."""

    async def list_users(self) -> List[UserRecord]:
        raise RuntimeError("boom: internal detail")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
async def client(store):
    """FastAPI test client backed by the in-memory store."""
    app = create_app(store=store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def make_client():
    """Build a client around an arbitrary store."""

    def _make(custom_store: ExerciseStore) -> AsyncClient:
        app = create_app(store=custom_store)
        return AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )

    return _make


@pytest.fixture
async def user(client):
    """A user created through the API."""
    res = await client.post("/api/users", json={"username": "fcc_test"})
    assert res.status_code == 200
    return res.json()
