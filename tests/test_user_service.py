import pytest

from exercise_tracker_api.app.core.errors import DuplicateError, NotFoundError, StorageError, ValidationError
from exercise_tracker_api.app.services.user_service import UserService


@pytest.fixture
def user_service(db):
    return UserService(db)


@pytest.mark.asyncio
async def test_create_user_success(user_service):
    user = await user_service.create_user("alice")

    assert user.username == "alice"
    assert isinstance(user.id, str) and user.id
    assert await user_service.get_user(user.id) == user


@pytest.mark.asyncio
@pytest.mark.parametrize("username", [None, "", "   "])
async def test_create_user_empty_username(user_service, db, username):
    with pytest.raises(ValidationError):
        await user_service.create_user(username)

    assert db.fetchone("SELECT COUNT(*) AS count FROM users")["count"] == 0


@pytest.mark.asyncio
async def test_create_user_duplicate(user_service):
    await user_service.create_user("alice")

    with pytest.raises(DuplicateError):
        await user_service.create_user("alice")

    users = await user_service.list_users()
    assert [u.username for u in users] == ["alice"]


@pytest.mark.asyncio
async def test_list_users_in_registration_order(user_service):
    for name in ("carol", "alice", "bob"):
        await user_service.create_user(name)

    users = await user_service.list_users()
    assert [u.username for u in users] == ["carol", "alice", "bob"]
    assert len({u.id for u in users}) == 3


@pytest.mark.asyncio
async def test_get_user_not_found(user_service):
    with pytest.raises(NotFoundError):
        await user_service.get_user("missing")


@pytest.mark.asyncio
async def test_closed_database_raises_storage_error(user_service, db):
    db.close()

    with pytest.raises(StorageError):
        await user_service.list_users()
