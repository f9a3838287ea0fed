"""
Exercise Tracker API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Depends, Query, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tracker.schemas import LogQuery
from tracker.services import ExerciseService, LogService, UserService
from tracker.store import ExerciseStore
from tracker.utils.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_store(request: Request) -> ExerciseStore:
    """Return the store handle attached to the application at startup."""
    return request.app.state.store


def get_user_service(store: ExerciseStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(store: ExerciseStore = Depends(get_store)) -> ExerciseService:
    return ExerciseService(store)


def get_log_service(store: ExerciseStore = Depends(get_store)) -> LogService:
    return LogService(store)


def validate_payload(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """
    Validate raw input against a schema.

    Raises:
        ValidationError: With the first failing field in the message.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        # Union members append their type to loc; report the field itself
        field = str(first["loc"][0]) if first["loc"] else "body"
        message = first["msg"].removeprefix("Value error, ")
        raise ValidationError(f"Invalid {field}: {message}", detail=str(e)) from e


async def read_body(request: Request) -> Dict[str, Any]:
    """
    Read a request body sent either as JSON or as an HTML form.

    Raises:
        ValidationError: If the body is not a JSON object.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return dict(form.items())

    try:
        data = await request.json()
    except ValueError as e:
        raise ValidationError("Request body must be JSON or form data") from e
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")
    return data


def get_log_query(
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
) -> LogQuery:
    """Collect and validate log query parameters."""
    params = {"from": from_, "to": to, "limit": limit}
    return validate_payload(LogQuery, {k: v for k, v in params.items() if v is not None})
