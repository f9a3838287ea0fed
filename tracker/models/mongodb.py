"""
Exercise Tracker MongoDB Document Models.

Beanie ODM models for MongoDB.
"""

from datetime import datetime
from typing import Union

from beanie import Document, Indexed
from pydantic import ConfigDict, Field

from tracker.utils.dates import utc_now


class UserDocument(Document):
    """User model for MongoDB."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "fcc_test",
            }
        }
    )

    username: str

    class Settings:
        name = "users"  # Collection name in MongoDB


class ExerciseDocument(Document):
    """Exercise log entry for MongoDB."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "65a4f0c2e13b7d0012345678",
                "description": "test run",
                "duration": 30,
                "date": "2023-01-15T00:00:00",
            }
        }
    )

    user_id: Indexed(str)  # Owning user's id, not a foreign key
    description: str
    duration: Union[int, float]  # minutes
    date: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "exercises"
        indexes = [
            "date",
        ]
