"""User repository integration tests on SQLite (aiosqlite)."""

import pytest

from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import ConflictException
from taskdeck.infrastructure.persistence.repositories import UserRepository


async def test_create_and_lookup_by_email_case_insensitive(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("Alice Example", "Alice@Example.com", "secret1")
    assert created.id
    assert created.email == "alice@example.com"
    assert created.role == "user"
    assert created.is_active is True

    found = await repo.get_by_email("ALICE@example.com")
    assert found is not None
    assert found.id == created.id


async def test_duplicate_email_conflicts(db_session) -> None:
    repo = UserRepository(db_session)
    await repo.create_user("Alice Example", "alice@example.com", "secret1")
    with pytest.raises(ConflictException):
        await repo.create_user("Other Alice", "alice@example.com", "secret2")


async def test_authenticate(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("Alice Example", "alice@example.com", "secret1")
    assert (await repo.authenticate("alice@example.com", "secret1")).id == created.id
    assert await repo.authenticate("alice@example.com", "wrong") is None
    assert await repo.authenticate("nobody@example.com", "secret1") is None


async def test_inactive_user_cannot_authenticate(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("Alice Example", "alice@example.com", "secret1")
    updated = await repo.update_profile(created.id, {"is_active": False})
    assert updated.is_active is False
    assert await repo.authenticate("alice@example.com", "secret1") is None


async def test_update_password(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("Alice Example", "alice@example.com", "secret1")
    await repo.update_password(created.id, "new-secret")
    assert await repo.authenticate("alice@example.com", "secret1") is None
    assert await repo.authenticate("alice@example.com", "new-secret") is not None


async def test_update_missing_user_returns_none(db_session) -> None:
    repo = UserRepository(db_session)
    assert await repo.update_profile("missing", {"name": "Nobody Here"}) is None


async def test_list_users_filters_active(db_session) -> None:
    repo = UserRepository(db_session)
    alice = await repo.create_user("Alice Example", "alice@example.com", "secret1")
    await repo.create_user("Ada Admin", "ada@example.com", "secret1", role=UserRole.ADMIN)
    await repo.update_profile(alice.id, {"is_active": False})

    items, total = await repo.list_users(is_active=True)
    assert total == 1
    assert items[0].email == "ada@example.com"
    assert items[0].role == "admin"

    _, all_total = await repo.list_users()
    assert all_total == 2
