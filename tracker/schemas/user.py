"""
Exercise Tracker API - User Schemas.

Pydantic schemas for user operations.
"""

from pydantic import BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    Attributes:
        username: Display name. Not required to be unique.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "username": "fcc_test"
            }
        }
    )

    username: str = Field(..., min_length=1, description="Username")


class UserResponse(BaseModel):
    """
    Schema for user response.

    Attributes:
        username: User's name.
        id: Generated user ID.
    """

    username: str = Field(..., description="Username")
    id: str = Field(..., description="User unique ID")
