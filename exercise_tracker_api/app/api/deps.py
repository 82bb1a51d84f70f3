"""
Dependency providers wiring the shared ``Database`` into services.
"""

from fastapi import Depends, Request

from ..core.db import Database, get_db
from ..services.exercise_service import ExerciseService
from ..services.user_service import UserService


def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)


def get_exercise_service(request: Request, db: Database = Depends(get_db)) -> ExerciseService:
    return ExerciseService(db, date_filter_mode=request.app.state.settings.date_filter_mode)
