"""Reset a user's password (Postgres).

Usage:
    uv run python -m scripts.reset_password <user_id> <new_password>
"""

import asyncio
import sys

from taskdeck.application.services.user_service import PASSWORD_MIN_LENGTH
from taskdeck.core.config import get_settings
from taskdeck.infrastructure.persistence.database import _ensure_engine
from taskdeck.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    """Reset password for user_id."""
    if len(sys.argv) < 3:
        print(
            "Usage: uv run python -m scripts.reset_password <user_id> <new_password>",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    new_password = sys.argv[2]
    if len(new_password) < PASSWORD_MIN_LENGTH:
        print(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            file=sys.stderr,
        )
        sys.exit(1)

    get_settings()
    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            user = await user_repo.update_password(user_id, new_password)
            if not user:
                print(f"User not found: {user_id}", file=sys.stderr)
                sys.exit(1)
            print(f"Password reset for user {user.id} ({user.email})")


if __name__ == "__main__":
    asyncio.run(main())
