"""Create an admin user (Postgres).

Usage:
    uv run python -m scripts.create_admin <email> <name> [password]
If password is omitted, a random one is printed.
Run with a DB role that may write app_user (RLS applies to task only).
"""

import asyncio
import secrets
import sys

from taskdeck.core.config import get_settings
from taskdeck.domain.entities.user import UserEntity
from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import ConflictException, ValidationException
from taskdeck.infrastructure.persistence.database import _ensure_engine
from taskdeck.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    """Create an admin; email must be unused."""
    if len(sys.argv) < 3:
        print(
            "Usage: uv run python -m scripts.create_admin <email> <name> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)

    get_settings()
    try:
        entity = UserEntity(name=sys.argv[2], email=sys.argv[1], role=UserRole.ADMIN)
    except ValidationException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            try:
                user = await user_repo.create_user(
                    name=entity.name,
                    email=entity.email,
                    password=password,
                    role=UserRole.ADMIN,
                )
            except ConflictException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
    print(f"Created admin: {user.id} ({user.email})")
    if len(sys.argv) <= 3:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
