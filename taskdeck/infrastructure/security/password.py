"""Account password hashing for taskdeck users.

Passwords are SHA-256 digested and base64 encoded before bcrypt so that the
72-byte bcrypt input limit never truncates a long passphrase. The bcrypt cost
is settings.bcrypt_rounds. bcrypt is CPU-bound, so the async helpers used by
UserRepository run it in a worker thread.
"""

import asyncio
import base64
import hashlib

import bcrypt

from taskdeck.core.config import get_settings

# Checked against when the email is unknown so failed logins take the same time.
_UNKNOWN_USER_SECRET = "taskdeck-unknown-user"
_unknown_user_hash: str | None = None


def _bcrypt_input(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return the bcrypt hash stored in app_user.hashed_password."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches; malformed hashes never match."""
    try:
        return bcrypt.checkpw(
            _bcrypt_input(plain_password), hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False


async def hash_password(password: str) -> str:
    return await asyncio.to_thread(get_password_hash, password)


async def check_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify off the event loop. hashed_password=None (unknown user) always fails."""
    global _unknown_user_hash
    if hashed_password is None:
        if _unknown_user_hash is None:
            _unknown_user_hash = await hash_password(_UNKNOWN_USER_SECRET)
        await asyncio.to_thread(verify_password, plain_password, _unknown_user_hash)
        return False
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)
