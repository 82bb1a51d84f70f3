"""
Business logic for exercises.

The ``ExerciseService`` logs exercises against existing users and
returns filtered logs.  Every operation first looks the user up via
``UserService.get_user``; ``exercises.user_id`` carries no foreign key
so that lookup is the only thing keeping the log consistent.

Dates are stored as calendar-date strings (``Sun Jan 15 2023``).  In
``lexicographic`` mode the ``from``/``to`` bounds are compared against
those strings in SQL, which is not chronological order: ``Fri`` sorts
before ``Mon`` whatever the year.  Existing clients depend on that
behaviour, so it stays the default.  ``chronological`` mode parses the
stored strings and compares real dates instead.
"""

import logging
import re
import sqlite3
import uuid
from datetime import date
from typing import List, Optional, Union

from ..core.db import Database
from ..core.dates import (
    format_calendar_date,
    normalize_calendar_date,
    parse_calendar_date,
    today_calendar_date,
)
from ..core.errors import StorageError, ValidationError
from ..schemas.exercise import ExerciseLog, ExerciseRead, LogEntry
from ..schemas.user import UserRead
from .user_service import UserService

logger = logging.getLogger(__name__)

# SQLite stores integers as signed 64-bit values.
SQLITE_MAX_INTEGER = 2**63 - 1

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(value: Union[int, str, None]) -> Optional[int]:
    """Return ``value`` as an int, or ``None`` if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def parse_duration(value: Union[int, str, None]) -> int:
    if value is None or value == "":
        raise ValidationError("Description and duration are required")
    duration = _parse_int(value)
    if duration is None:
        raise ValidationError("Duration must be a number")
    if duration <= 0:
        raise ValidationError("Duration must be a positive integer")
    if duration > SQLITE_MAX_INTEGER:
        raise ValidationError("Duration is too large")
    return duration


def parse_limit(value: Union[int, str, None]) -> Optional[int]:
    if value is None or value == "":
        return None
    limit = _parse_int(value)
    if limit is None or limit <= 0:
        raise ValidationError("Limit must be a positive integer")
    # Anything past the largest storable integer cannot cap fewer rows.
    return min(limit, SQLITE_MAX_INTEGER)


class ExerciseService:
    """Exercise log bound to one ``Database``."""

    def __init__(self, db: Database, date_filter_mode: str = "lexicographic") -> None:
        self.db = db
        self.date_filter_mode = date_filter_mode
        self.users = UserService(db)

    async def add_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Union[int, str, None],
        date_value: Optional[str] = None,
    ) -> ExerciseRead:
        """Log an exercise for ``user_id`` and return it.

        The user is checked before the payload so an unknown user
        always yields ``NotFoundError``.  A missing or empty
        ``date_value`` means today.
        """
        user = await self.users.get_user(user_id)
        return await self.log_exercise(user, description, duration, date_value)

    async def log_exercise(
        self,
        user: UserRead,
        description: Optional[str],
        duration: Union[int, str, None],
        date_value: Optional[str] = None,
    ) -> ExerciseRead:
        """Validate and insert an exercise for a user already looked up."""
        if not description or not description.strip():
            raise ValidationError("Description and duration are required")
        parsed_duration = parse_duration(duration)
        if date_value:
            formatted_date = normalize_calendar_date(date_value, "date")
        else:
            formatted_date = today_calendar_date()

        exercise_id = str(uuid.uuid4())
        try:
            self.db.execute(
                "INSERT INTO exercises (id, user_id, description, duration, date) "
                "VALUES (?, ?, ?, ?, ?)",
                (exercise_id, user.id, description, parsed_duration, formatted_date),
            )
        except (sqlite3.Error, OverflowError) as e:
            logger.exception("Error inserting exercise for user %s", user.id)
            raise StorageError("Error adding exercise") from e
        logger.info(
            "Logged exercise %s for user %s (%s min on %s)",
            exercise_id, user.id, parsed_duration, formatted_date,
        )
        return ExerciseRead(
            id=user.id,
            username=user.username,
            date=formatted_date,
            duration=parsed_duration,
            description=description,
        )

    async def get_log(
        self,
        user_id: str,
        from_: Optional[str] = None,
        to: Optional[str] = None,
        limit: Union[int, str, None] = None,
    ) -> ExerciseLog:
        """Return the user's exercises, bounded by date and capped at ``limit``.

        Bounds are inclusive.  Entries keep insertion order.
        """
        user = await self.users.get_user(user_id)

        from_date = parse_calendar_date(from_, "from") if from_ else None
        to_date = parse_calendar_date(to, "to") if to else None
        parsed_limit = parse_limit(limit)

        try:
            if self.date_filter_mode == "chronological":
                entries = self._query_chronological(user.id, from_date, to_date, parsed_limit)
            else:
                entries = self._query_lexicographic(user.id, from_date, to_date, parsed_limit)
        except (sqlite3.Error, OverflowError) as e:
            logger.exception("Error fetching exercise log for user %s", user.id)
            raise StorageError("Error fetching exercise log") from e

        return ExerciseLog(id=user.id, username=user.username, count=len(entries), log=entries)

    def _query_lexicographic(
        self,
        user_id: str,
        from_date: Optional[date],
        to_date: Optional[date],
        limit: Optional[int],
    ) -> List[LogEntry]:
        query = "SELECT description, duration, date FROM exercises WHERE user_id = ?"
        params: list = [user_id]
        if from_date is not None:
            query += " AND date >= ?"
            params.append(format_calendar_date(from_date))
        if to_date is not None:
            query += " AND date <= ?"
            params.append(format_calendar_date(to_date))
        query += " ORDER BY rowid"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)
        rows = self.db.fetchall(query, params)
        return [
            LogEntry(description=row["description"], duration=row["duration"], date=row["date"])
            for row in rows
        ]

    def _query_chronological(
        self,
        user_id: str,
        from_date: Optional[date],
        to_date: Optional[date],
        limit: Optional[int],
    ) -> List[LogEntry]:
        rows = self.db.fetchall(
            "SELECT description, duration, date FROM exercises WHERE user_id = ? ORDER BY rowid",
            (user_id,),
        )
        entries: List[LogEntry] = []
        for row in rows:
            logged_on = parse_calendar_date(row["date"])
            if from_date is not None and logged_on < from_date:
                continue
            if to_date is not None and logged_on > to_date:
                continue
            entries.append(
                LogEntry(description=row["description"], duration=row["duration"], date=row["date"])
            )
            if limit is not None and len(entries) >= limit:
                break
        return entries
