"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  A
``.env`` file in the working directory, if present, is loaded first
so local overrides do not have to be exported by hand.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


DATE_FILTER_MODES = ("lexicographic", "chronological")


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module; ``:memory:`` keeps
    # everything in RAM for the lifetime of the process.
    database_url: str = os.getenv("DATABASE_URL", "exercise_tracker.db")

    # How ``from``/``to`` bounds are compared against stored dates.
    # ``lexicographic`` compares the calendar-date strings directly in
    # SQL, which is what existing clients of this API observe.
    # ``chronological`` compares real dates.
    date_filter_mode: str = os.getenv("DATE_FILTER_MODE", "lexicographic").lower()

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    def __post_init__(self) -> None:
        if self.date_filter_mode not in DATE_FILTER_MODES:
            raise ValueError(
                f"DATE_FILTER_MODE must be one of {', '.join(DATE_FILTER_MODES)}, "
                f"got {self.date_filter_mode!r}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
