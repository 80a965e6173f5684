"""User repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskdeck.application.dtos.user import UserResult
from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import ConflictException
from taskdeck.infrastructure.persistence.models.user import User
from taskdeck.infrastructure.persistence.repositories.base import BaseRepository
from taskdeck.infrastructure.security.password import check_password, hash_password
from taskdeck.shared.utils.datetime import ensure_utc, utc_now


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        name=u.name,
        email=u.email,
        role=u.role,
        is_active=u.is_active,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_orm_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User)
            .where(User.email == email.lower())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> UserResult | None:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def get_by_email(self, email: str) -> UserResult | None:
        user = await self._get_orm_by_email(email)
        return _user_to_result(user) if user else None

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        user = await self._get_orm_by_email(email)
        if not await check_password(password, user.hashed_password if user else None):
            return None
        if user is None or not user.is_active:
            return None
        return _user_to_result(user)

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        """Create user; raise ConflictException on unique constraint violation."""
        hashed = await hash_password(password)
        now = utc_now()
        user = User(
            name=name,
            email=email.lower(),
            hashed_password=hashed,
            role=UserRole(role).value,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        try:
            created = await self.create(user)
        except IntegrityError:
            raise ConflictException("email") from None
        return _user_to_result(created)

    async def update_profile(
        self, user_id: str, values: dict[str, Any]
    ) -> UserResult | None:
        """Apply values in one UPDATE (updated_at stamped); ConflictException on duplicate email."""
        try:
            result = await self.db.execute(
                update(User)
                .where(User.id == user_id)
                .values({"updated_at": utc_now(), **values})
                .execution_options(synchronize_session=False)
            )
        except IntegrityError:
            raise ConflictException("email") from None
        if result.rowcount == 0:
            return None
        return await self.get_by_id(user_id)

    async def update_password(self, user_id: str, new_password: str) -> UserResult | None:
        hashed = await hash_password(new_password)
        return await self.update_profile(user_id, {"hashed_password": hashed})

    async def list_users(
        self,
        *,
        is_active: bool | None = None,
        offset: int = 0,
        limit: int = 25,
    ) -> tuple[list[UserResult], int]:
        conditions = [] if is_active is None else [User.is_active.is_(is_active)]
        total = await self._count(*conditions)
        result = await self.db.execute(
            select(User)
            .where(*conditions)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return [_user_to_result(u) for u in result.scalars().all()], total
