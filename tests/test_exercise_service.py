from datetime import date

import pytest
import pytest_asyncio

from exercise_tracker_api.app.core.dates import format_calendar_date
from exercise_tracker_api.app.core.errors import NotFoundError, ValidationError
from exercise_tracker_api.app.services.exercise_service import (
    SQLITE_MAX_INTEGER,
    ExerciseService,
    parse_duration,
    parse_limit,
)
from exercise_tracker_api.app.services.user_service import UserService


@pytest.fixture
def exercise_service(db):
    return ExerciseService(db)


@pytest.fixture
def chronological_service(db):
    return ExerciseService(db, date_filter_mode="chronological")


@pytest_asyncio.fixture
async def user(db):
    return await UserService(db).create_user("alice")


def exercise_count(db):
    return db.fetchone("SELECT COUNT(*) AS count FROM exercises")["count"]


@pytest.mark.parametrize("value, expected", [("30", 30), (30, 30), (" 12 ", 12)])
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize(
    "value", [None, "", "abc", "3.5", "0", "-4", True, "3_0", "\u0663\u0660", 2**63]
)
def test_parse_duration_invalid(value):
    with pytest.raises(ValidationError):
        parse_duration(value)


def test_parse_limit():
    assert parse_limit(None) is None
    assert parse_limit("") is None
    assert parse_limit("2") == 2
    assert parse_limit("99999999999999999999") == SQLITE_MAX_INTEGER
    for value in ("0", "-1", "abc"):
        with pytest.raises(ValidationError):
            parse_limit(value)


@pytest.mark.asyncio
async def test_add_exercise_round_trip(exercise_service, user):
    created = await exercise_service.add_exercise(user.id, "run", "30", "2023-01-15")

    assert created.id == user.id
    assert created.username == "alice"
    assert created.duration == 30
    assert created.date == "Sun Jan 15 2023"

    log = await exercise_service.get_log(user.id)
    assert log.count == 1
    entry = log.log[0]
    assert (entry.description, entry.duration, entry.date) == ("run", 30, "Sun Jan 15 2023")


@pytest.mark.asyncio
async def test_add_exercise_defaults_to_today(exercise_service, user):
    created = await exercise_service.add_exercise(user.id, "swim", 45)

    assert created.date == format_calendar_date(date.today())


@pytest.mark.asyncio
async def test_add_exercise_non_numeric_duration(exercise_service, user, db):
    with pytest.raises(ValidationError):
        await exercise_service.add_exercise(user.id, "run", "thirty")

    assert exercise_count(db) == 0


@pytest.mark.asyncio
async def test_add_exercise_unknown_user_wins_over_bad_body(exercise_service, db):
    with pytest.raises(NotFoundError):
        await exercise_service.add_exercise("missing", "", "not-a-number", "garbage")

    assert exercise_count(db) == 0


@pytest.mark.asyncio
async def test_add_exercise_invalid_date(exercise_service, user, db):
    with pytest.raises(ValidationError):
        await exercise_service.add_exercise(user.id, "run", "30", "someday")

    assert exercise_count(db) == 0


@pytest.mark.asyncio
async def test_get_log_limit(exercise_service, user):
    for day in (1, 2, 3):
        await exercise_service.add_exercise(user.id, f"run {day}", "10", f"2023-01-0{day}")

    log = await exercise_service.get_log(user.id, limit="1")
    assert log.count == 1
    assert log.log[0].description == "run 1"


@pytest.mark.asyncio
async def test_get_log_future_from_is_empty(exercise_service, user):
    await exercise_service.add_exercise(user.id, "run", "30", "2023-01-15")

    log = await exercise_service.get_log(user.id, from_="2099-01-01")
    assert log.count == 0
    assert log.log == []


@pytest.mark.asyncio
async def test_get_log_lexicographic_bounds_compare_strings(exercise_service, user):
    # "Wed Jan 18 2023" sorts after "Thu Jan 01 2099".
    await exercise_service.add_exercise(user.id, "run", "30", "2023-01-18")

    log = await exercise_service.get_log(user.id, from_="2099-01-01")
    assert log.count == 1


@pytest.mark.asyncio
async def test_get_log_chronological_bounds(chronological_service, user):
    await chronological_service.add_exercise(user.id, "january", "30", "2023-01-15")
    await chronological_service.add_exercise(user.id, "february", "20", "2023-02-01")
    await chronological_service.add_exercise(user.id, "wednesday", "10", "2023-01-18")

    log = await chronological_service.get_log(user.id, from_="2023-01-16")
    assert [e.description for e in log.log] == ["february", "wednesday"]

    log = await chronological_service.get_log(user.id, from_="2099-01-01")
    assert log.count == 0

    log = await chronological_service.get_log(user.id, to="2023-01-15")
    assert [e.description for e in log.log] == ["january"]

    log = await chronological_service.get_log(user.id, from_="2023-01-01", to="2023-12-31", limit=2)
    assert [e.description for e in log.log] == ["january", "february"]


@pytest.mark.asyncio
async def test_get_log_only_returns_own_exercises(exercise_service, user, db):
    other = await UserService(db).create_user("bob")
    await exercise_service.add_exercise(user.id, "run", "30")
    await exercise_service.add_exercise(other.id, "lift", "15")

    log = await exercise_service.get_log(other.id)
    assert log.username == "bob"
    assert [e.description for e in log.log] == ["lift"]


@pytest.mark.asyncio
async def test_get_log_unknown_user(exercise_service):
    with pytest.raises(NotFoundError):
        await exercise_service.get_log("missing")


@pytest.mark.asyncio
@pytest.mark.parametrize("kwargs", [{"from_": "nope"}, {"to": "2023-99-01"}, {"limit": "0"}, {"limit": "many"}])
async def test_get_log_invalid_query(exercise_service, user, kwargs):
    with pytest.raises(ValidationError):
        await exercise_service.get_log(user.id, **kwargs)
