"""
User endpoints.

Register users and list them.  There is no authentication; any client
may register a username or read the full list.
"""

from typing import List

from fastapi import APIRouter, Depends

from exercise_tracker_api.app.api.deps import get_user_service
from exercise_tracker_api.app.api.forms import body_as
from exercise_tracker_api.app.schemas.user import UserCreate, UserRead
from exercise_tracker_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead)
async def register_user(
    user: UserCreate = Depends(body_as(UserCreate)),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.

    Returns ``{"username", "_id"}``.  An empty username is rejected
    with 400 and a taken one with 409.
    """
    return await service.create_user(user.username)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """List every registered user as ``{"_id", "username"}``."""
    return await service.list_users()
