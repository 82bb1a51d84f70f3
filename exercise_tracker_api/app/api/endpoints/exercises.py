"""
Exercise endpoints.

Both routes live under ``/users/{user_id}`` because exercises only
exist in the context of the user that logged them.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from exercise_tracker_api.app.api.deps import get_exercise_service
from exercise_tracker_api.app.api.forms import parse_body
from exercise_tracker_api.app.schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseRead
from exercise_tracker_api.app.services.exercise_service import ExerciseService


router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(
    user_id: str,
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
) -> ExerciseRead:
    """Log an exercise for a user.

    ``date`` is optional and defaults to today.  The response echoes
    the user together with the stored date string and the parsed
    integer duration.  An unknown user is reported as 404 even when
    the body is invalid, so the body is only parsed after the lookup.
    """
    # Same steps as ExerciseService.add_exercise, split so the body is
    # read between the user lookup and the insert.
    user = await service.users.get_user(user_id)
    exercise = await parse_body(request, ExerciseCreate)
    return await service.log_exercise(
        user,
        description=exercise.description,
        duration=exercise.duration,
        date_value=exercise.date,
    )


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_log(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: ExerciseService = Depends(get_exercise_service),
) -> ExerciseLog:
    """Return a user's exercise log.

    - **from**, **to** — inclusive date bounds (``yyyy-mm-dd``).
    - **limit** — maximum number of entries, a positive integer.
    """
    return await service.get_log(user_id, from_=from_, to=to, limit=limit)
