"""
Exercise Tracker API - Exercise and Log Schemas.

Pydantic schemas for logging exercises and querying exercise logs.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from tracker.utils import errors
from tracker.utils.dates import parse_date, parse_upper_bound

# Largest limit MongoDB accepts as a 32-bit cursor limit
MAX_LOG_LIMIT = 2**31 - 1


def _parse_or_raise(parser, value, field: str):
    try:
        return parser(value, field)
    except errors.ValidationError as e:
        raise PydanticCustomError(
            "invalid_date",
            "unrecognized date {value}",
            {"value": str(value).strip()},
        ) from e


class ExerciseCreate(BaseModel):
    """
    Schema for logging an exercise.

    Attributes:
        description: What was done.
        duration: Duration in minutes. Must be a finite number.
        date: When it was done. Defaults to now when absent or blank.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "description": "test run",
                "duration": 30,
                "date": "2023-01-15"
            }
        }
    )

    description: str = Field(..., min_length=1, description="Exercise description")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: Optional[datetime] = Field(None, description="Exercise date (YYYY-MM-DD)")

    @field_validator("duration", mode="before")
    @classmethod
    def reject_bool_duration(cls, value):
        # bool is an int subclass; true/false are not durations
        if isinstance(value, bool):
            raise PydanticCustomError("number_type", "Input should be a number")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_exercise_date(cls, value):
        return _parse_or_raise(parse_date, value, "date")


class LogQuery(BaseModel):
    """
    Schema for log query parameters.

    Attributes:
        from_: Inclusive lower date bound (query key ``from``).
        to: Inclusive upper date bound. A bare date covers the whole day.
        limit: Maximum number of entries to return.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None
    limit: Optional[int] = Field(None, ge=0, le=MAX_LOG_LIMIT)

    @field_validator("from_", mode="before")
    @classmethod
    def parse_from(cls, value):
        return _parse_or_raise(parse_date, value, "from")

    @field_validator("to", mode="before")
    @classmethod
    def parse_to(cls, value):
        return _parse_or_raise(parse_upper_bound, value, "to")

    @field_validator("limit", mode="before")
    @classmethod
    def blank_limit(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ExerciseResponse(BaseModel):
    """
    Schema for a logged exercise, combined with its owner.

    Attributes:
        id: Owning user's ID.
        username: Owning user's name.
        date: Calendar-date string, e.g. ``Sun Jan 15 2023``.
        duration: Duration in minutes.
        description: Exercise description.
    """

    id: str
    username: str
    date: str
    duration: Union[int, float]
    description: str


class LogEntry(BaseModel):
    """One exercise in a log."""

    description: str
    duration: Union[int, float]
    date: str


class LogResponse(BaseModel):
    """
    Schema for a user's exercise log.

    Attributes:
        id: User ID.
        username: User's name.
        count: Number of entries in ``log``.
        log: Matching exercises.
    """

    id: str
    username: str
    count: int
    log: List[LogEntry] = Field(default_factory=list)
