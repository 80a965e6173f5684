"""JWT and password hashing tests."""

from datetime import timedelta

import pytest

from taskdeck.infrastructure.security.jwt import create_access_token, verify_token
from taskdeck.infrastructure.security.password import (
    check_password,
    get_password_hash,
    hash_password,
    verify_password,
)


def test_token_round_trip_keeps_claims() -> None:
    token = create_access_token({"sub": "u1", "role": "admin"})
    payload = verify_token(token)
    assert payload["sub"] == "u1"
    assert payload["role"] == "admin"
    assert "exp" in payload


def test_expired_token_rejected() -> None:
    token = create_access_token({"sub": "u1"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_token_without_sub_rejected() -> None:
    token = create_access_token({"role": "user"})
    with pytest.raises(ValueError):
        verify_token(token)


def test_garbage_token_rejected() -> None:
    with pytest.raises(ValueError):
        verify_token("not.a.jwt")


def test_password_hash_verifies() -> None:
    hashed = get_password_hash("correct-horse")
    assert hashed != "correct-horse"
    assert verify_password("correct-horse", hashed)
    assert not verify_password("wrong-horse", hashed)


def test_long_passwords_are_not_truncated() -> None:
    base = "p" * 80
    hashed = get_password_hash(base + "a")
    assert not verify_password(base + "b", hashed)


def test_hash_uses_configured_cost() -> None:
    # conftest sets BCRYPT_ROUNDS=4
    assert get_password_hash("correct-horse").startswith("$2b$04$")


def test_malformed_stored_hash_never_matches() -> None:
    assert not verify_password("correct-horse", "not-a-bcrypt-hash")


async def test_async_helpers_round_trip() -> None:
    hashed = await hash_password("correct-horse")
    assert await check_password("correct-horse", hashed)
    assert not await check_password("wrong-horse", hashed)


async def test_unknown_user_check_always_fails() -> None:
    assert await check_password("taskdeck-unknown-user", None) is False
