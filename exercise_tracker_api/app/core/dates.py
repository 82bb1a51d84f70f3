"""
Calendar-date helpers.

Exercise dates are stored and returned as ``"Weekday Month DD YYYY"``
strings (``Sun Jan 15 2023``).  Weekday and month names are always
English regardless of the process locale, so ``strftime("%a")`` is
not used.
"""

from datetime import date, datetime
from typing import Optional

from .errors import ValidationError

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_calendar_date(value: date) -> str:
    """Render ``value`` as ``Sun Jan 15 2023``."""
    return "%s %s %02d %04d" % (
        WEEKDAYS[value.weekday()],
        MONTHS[value.month - 1],
        value.day,
        value.year,
    )


def _parse_calendar_string(text: str) -> Optional[date]:
    parts = text.split()
    if len(parts) != 4:
        return None
    weekday, month, day, year = parts
    if weekday.title() not in WEEKDAYS or month.title() not in MONTHS:
        return None
    if not (day.isdigit() and year.isdigit()):
        return None
    try:
        return date(int(year), MONTHS.index(month.title()) + 1, int(day))
    except ValueError:
        return None


def parse_calendar_date(text: str, field: str = "date") -> date:
    """Parse a client-supplied date.

    Accepts ``YYYY-MM-DD``, ISO-8601 date-times (the time part is
    dropped) and the calendar-date format itself.  Raises
    ``ValidationError`` naming ``field`` for anything else.
    """
    value = (text or "").strip()
    if value:
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        iso = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            return datetime.fromisoformat(iso).date()
        except ValueError:
            pass
        parsed = _parse_calendar_string(value)
        if parsed is not None:
            return parsed
    raise ValidationError(f"Invalid '{field}' date format. Use yyyy-mm-dd.")


def normalize_calendar_date(text: str, field: str = "date") -> str:
    """Parse ``text`` and return its calendar-date string."""
    return format_calendar_date(parse_calendar_date(text, field))


def today_calendar_date() -> str:
    return format_calendar_date(date.today())
