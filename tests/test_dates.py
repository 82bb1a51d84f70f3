from datetime import date

import pytest

from exercise_tracker_api.app.core.dates import (
    format_calendar_date,
    normalize_calendar_date,
    parse_calendar_date,
)
from exercise_tracker_api.app.core.errors import ValidationError


def test_format_calendar_date():
    assert format_calendar_date(date(2023, 1, 15)) == "Sun Jan 15 2023"
    assert format_calendar_date(date(2024, 3, 5)) == "Tue Mar 05 2024"


@pytest.mark.parametrize(
    "text",
    [
        "2023-01-15",
        " 2023-01-15 ",
        "2023-01-15T10:30:00",
        "2023-01-15T23:59:59Z",
        "Sun Jan 15 2023",
    ],
)
def test_parse_calendar_date_accepted_formats(text):
    assert parse_calendar_date(text) == date(2023, 1, 15)


@pytest.mark.parametrize("text", ["", "not-a-date", "2023-13-01", "2023-02-30", "Sun Foo 15 2023"])
def test_parse_calendar_date_rejects_garbage(text):
    with pytest.raises(ValidationError) as excinfo:
        parse_calendar_date(text, "from")
    assert "'from'" in excinfo.value.message


def test_normalize_calendar_date():
    assert normalize_calendar_date("2099-01-01") == "Thu Jan 01 2099"
