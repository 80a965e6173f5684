"""Security: JWT and password hashing."""

from taskdeck.infrastructure.security.jwt import create_access_token, verify_token
from taskdeck.infrastructure.security.password import (
    check_password,
    get_password_hash,
    hash_password,
    verify_password,
)

__all__ = [
    "check_password",
    "create_access_token",
    "get_password_hash",
    "hash_password",
    "verify_password",
    "verify_token",
]
