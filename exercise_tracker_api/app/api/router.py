"""
Top‑level API router.

Aggregates the endpoint routers; ``create_app`` mounts the result
under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
