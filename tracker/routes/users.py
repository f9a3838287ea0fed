"""
Exercise Tracker API - User, Exercise and Log Routes.

Mounted under ``/api/users``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from tracker.dependencies import (
    get_exercise_service,
    get_log_query,
    get_log_service,
    get_user_service,
    read_body,
    validate_payload,
)
from tracker.schemas import (
    ExerciseCreate,
    ExerciseResponse,
    LogQuery,
    LogResponse,
    UserCreate,
    UserResponse,
)
from tracker.services import ExerciseService, LogService, UserService

router = APIRouter()


@router.post("", response_model=UserResponse)
async def create_user(
    body: Dict[str, Any] = Depends(read_body),
    service: UserService = Depends(get_user_service),
):
    """Create a user."""
    request = validate_payload(UserCreate, body)
    user = await service.create_user(request.username)
    return {"username": user.username, "id": user.id}


@router.get("", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await service.list_users()
    return [{"username": u.username, "id": u.id} for u in users]


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def create_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(read_body),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Log an exercise for a user."""
    request = validate_payload(ExerciseCreate, body)
    return await service.create_exercise(
        user_id,
        description=request.description,
        duration=request.duration,
        date=request.date,
    )


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    query: LogQuery = Depends(get_log_query),
    service: LogService = Depends(get_log_service),
):
    """Get a user's exercise log, optionally filtered by date and limited."""
    return await service.get_logs(
        user_id,
        from_=query.from_,
        to=query.to,
        limit=query.limit,
    )
