"""
Business logic for users.

The ``UserService`` is the user registry: it registers usernames and
lists them.  Users are never updated or deleted.  Username uniqueness
is enforced by the ``UNIQUE`` constraint on ``users.username`` and
reported as ``DuplicateError``.
"""

import logging
import sqlite3
import uuid
from typing import List, Optional

from ..core.db import Database
from ..core.errors import DuplicateError, NotFoundError, StorageError, ValidationError
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_user(self, username: Optional[str]) -> UserRead:
        """Register ``username`` under a freshly generated identifier.

        Raises ``ValidationError`` for an empty username and
        ``DuplicateError`` if the name is taken.  Nothing is written in
        either case.
        """
        if not username or not username.strip():
            raise ValidationError("Username is required")
        user_id = str(uuid.uuid4())
        try:
            self.db.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (user_id, username),
            )
        except sqlite3.IntegrityError as e:
            if "users.username" in str(e):
                raise DuplicateError("Username already exists") from e
            logger.exception("Error inserting user %s", username)
            raise StorageError("Error creating user") from e
        except sqlite3.Error as e:
            logger.exception("Error inserting user %s", username)
            raise StorageError("Error creating user") from e
        logger.info("Registered user %s (%s)", username, user_id)
        return UserRead(id=user_id, username=username)

    async def list_users(self) -> List[UserRead]:
        """Return all users in registration order."""
        try:
            rows = self.db.fetchall("SELECT id, username FROM users ORDER BY rowid")
        except sqlite3.Error as e:
            logger.exception("Error fetching users")
            raise StorageError("Error fetching users") from e
        return [UserRead(id=row["id"], username=row["username"]) for row in rows]

    async def get_user(self, user_id: str) -> UserRead:
        """Retrieve a user by ID or raise ``NotFoundError``."""
        try:
            row = self.db.fetchone(
                "SELECT id, username FROM users WHERE id = ?",
                (user_id,),
            )
        except sqlite3.Error as e:
            logger.exception("Error checking user existence for %s", user_id)
            raise StorageError("Database error") from e
        if not row:
            raise NotFoundError("User not found")
        return UserRead(id=row["id"], username=row["username"])
