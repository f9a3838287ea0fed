"""Services — user creation, exercise logging and log queries against the store.

Invariants:
    - create_user echoes the username with a fresh, unique id
    - create_exercise resolves the user first; unknown users write nothing
    - get_logs filters by inclusive [from, to], orders by date then insertion,
      and reports count as the length of the returned log
"""

from datetime import datetime

import pytest

from tracker.services import ExerciseService, LogService, UserService
from tracker.utils.dates import utc_now
from tracker.utils.errors import NotFoundError, ValidationError


@pytest.fixture
def users(store):
    return UserService(store)


@pytest.fixture
def exercises(store):
    return ExerciseService(store)


@pytest.fixture
def logs(store):
    return LogService(store)


@pytest.fixture
async def owner(users):
    return await users.create_user("runner")


async def test_create_user_returns_username_and_unique_id(users):
    first = await users.create_user("alice")
    second = await users.create_user("alice")

    assert first.username == "alice"
    assert first.id
    assert first.id != second.id


async def test_list_users_in_insertion_order(users):
    created = [await users.create_user(name) for name in ("a", "b", "c")]

    listed = await users.list_users()

    assert [u.id for u in listed] == [u.id for u in created]


async def test_create_exercise_returns_combined_record(exercises, owner):
    result = await exercises.create_exercise(
        owner.id, "test run", 30, datetime(2023, 1, 15),
    )

    assert result == {
        "id": owner.id,
        "username": "runner",
        "date": "Sun Jan 15 2023",
        "duration": 30,
        "description": "test run",
    }


async def test_create_exercise_defaults_date_to_now(exercises, owner, store):
    before = utc_now().replace(microsecond=0)

    await exercises.create_exercise(owner.id, "swim", 45)

    stored = store.exercises[-1][1]
    assert stored.date >= before


async def test_create_exercise_unknown_user_writes_nothing(exercises, store):
    with pytest.raises(NotFoundError):
        await exercises.create_exercise("65a4f0c2e13b7d0012345678", "run", 10)

    assert store.exercises == []


async def test_get_logs_returns_all_without_filters(exercises, logs, owner):
    for day in (3, 1, 2):
        await exercises.create_exercise(owner.id, f"day {day}", day, datetime(2023, 1, day))

    result = await logs.get_logs(owner.id)

    assert result["id"] == owner.id
    assert result["username"] == "runner"
    assert result["count"] == 3
    assert [e["description"] for e in result["log"]] == ["day 1", "day 2", "day 3"]


async def test_get_logs_excludes_other_users(exercises, logs, users, owner):
    other = await users.create_user("other")
    await exercises.create_exercise(owner.id, "mine", 10, datetime(2023, 1, 1))
    await exercises.create_exercise(other.id, "theirs", 10, datetime(2023, 1, 1))

    result = await logs.get_logs(owner.id)

    assert [e["description"] for e in result["log"]] == ["mine"]


async def test_get_logs_date_bounds_are_inclusive(exercises, logs, owner):
    for day in range(1, 6):
        await exercises.create_exercise(owner.id, f"day {day}", 10, datetime(2023, 1, day))

    result = await logs.get_logs(
        owner.id, from_=datetime(2023, 1, 2), to=datetime(2023, 1, 4),
    )

    assert [e["date"] for e in result["log"]] == [
        "Mon Jan 02 2023", "Tue Jan 03 2023", "Wed Jan 04 2023",
    ]


async def test_get_logs_limit_keeps_earliest(exercises, logs, owner):
    for day in (4, 2, 3, 1):
        await exercises.create_exercise(owner.id, f"day {day}", 10, datetime(2023, 1, day))

    result = await logs.get_logs(owner.id, limit=2)

    assert result["count"] == 2
    assert [e["description"] for e in result["log"]] == ["day 1", "day 2"]


async def test_get_logs_ties_keep_insertion_order(exercises, logs, owner):
    for name in ("first", "second", "third"):
        await exercises.create_exercise(owner.id, name, 5, datetime(2023, 1, 1))

    result = await logs.get_logs(owner.id, limit=2)

    assert [e["description"] for e in result["log"]] == ["first", "second"]


async def test_get_logs_limit_zero_is_empty(exercises, logs, owner):
    await exercises.create_exercise(owner.id, "run", 5, datetime(2023, 1, 1))

    result = await logs.get_logs(owner.id, limit=0)

    assert result["count"] == 0
    assert result["log"] == []


async def test_get_logs_negative_limit_rejected(logs, owner):
    with pytest.raises(ValidationError):
        await logs.get_logs(owner.id, limit=-1)


async def test_get_logs_inverted_range_is_empty(exercises, logs, owner):
    await exercises.create_exercise(owner.id, "run", 5, datetime(2023, 1, 3))

    result = await logs.get_logs(
        owner.id, from_=datetime(2023, 1, 5), to=datetime(2023, 1, 1),
    )

    assert result["count"] == 0


async def test_get_logs_unknown_user(logs):
    with pytest.raises(NotFoundError):
        await logs.get_logs("no-such-user")
