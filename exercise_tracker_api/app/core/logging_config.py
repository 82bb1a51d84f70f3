"""
Logging setup shared by the application and the uvicorn server.

``setup_logging`` attaches one console handler (and optionally a file
handler) to the root logger and routes uvicorn's own loggers through
it, so request logs and application logs share one format and one
level.  Calling it again replaces the level and reuses the handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "exercise_tracker.console"
FILE_HANDLER = "exercise_tracker.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _attach(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    if any(existing.get_name() == name for existing in root.handlers):
        return
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure the root and uvicorn loggers and return the numeric level.

    Unknown level names fall back to ``INFO``.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    _attach(root, logging.StreamHandler(), CONSOLE_HANDLER)
    if logfile:
        _attach(root, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"), FILE_HANDLER)

    # uvicorn installs its own handlers unless told otherwise; drop them
    # and let records propagate to the root handlers above.
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)

    return numeric_level
