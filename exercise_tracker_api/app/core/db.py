"""
SQLite database integration.

A single ``Database`` object owns the one SQLite connection shared by
every request.  It is opened by the application lifespan at startup,
published on ``app.state.db`` and closed at shutdown; handlers reach
it through the ``get_db`` dependency rather than a module global.

The schema is created on startup if absent.  There is deliberately no
migration table: the two tables never change shape.
"""

import logging
import os
import sqlite3
import threading
from pathlib import Path
from typing import Any, Iterable, List, Optional

from fastapi import Request

from .config import settings
from .errors import StorageError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    description TEXT NOT NULL,
    duration INTEGER NOT NULL,
    date TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exercises_user_id ON exercises(user_id);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is.  Relative paths
    are resolved against the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class Database:
    """Shared SQLite handle with an explicit open/close lifecycle.

    SQLite allows a single writer per connection, so every statement
    runs under one re-entrant lock.  Statements are committed
    immediately; there are no multi-statement transactions.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def open(self) -> None:
        if self._conn is not None:
            return
        logger.info("Opening database %s", self.path)
        # Requests may be served from worker threads; the lock below
        # serializes access instead.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self.init_db()

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            logger.info("Closing database %s", self.path)
            self._conn.close()
            self._conn = None

    def init_db(self) -> None:
        """Create the ``users`` and ``exercises`` tables if missing."""
        with self._lock:
            self._connection().executescript(SCHEMA)
            self._connection().commit()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Database is not open")
        return self._conn

    def execute(self, sql: str, params: Iterable[Any] = ()) -> int:
        """Run a write statement, commit it and return the row count."""
        with self._lock:
            conn = self._connection()
            try:
                cursor = conn.execute(sql, tuple(params))
                conn.commit()
            except sqlite3.Error:
                conn.rollback()
                raise
            return cursor.rowcount

    def fetchone(self, sql: str, params: Iterable[Any] = ()) -> Optional[sqlite3.Row]:
        with self._lock:
            return self._connection().execute(sql, tuple(params)).fetchone()

    def fetchall(self, sql: str, params: Iterable[Any] = ()) -> List[sqlite3.Row]:
        with self._lock:
            return self._connection().execute(sql, tuple(params)).fetchall()


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's ``Database``."""
    return request.app.state.db
