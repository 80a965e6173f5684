"""User application service: registration, login, and profile management."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from taskdeck.application.dtos.user import (
    AccessToken,
    UserPage,
    UserProfileUpdate,
    UserResult,
)
from taskdeck.application.interfaces.repositories import IUserRepository
from taskdeck.application.use_cases.pagination import page_offset
from taskdeck.domain.entities.user import UserEntity, normalize_email, validate_name
from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6


class TokenIssuer(Protocol):
    """Creates signed access tokens from claims."""

    def create_access_token(self, data: dict[str, Any]) -> str: ...


class UserService:
    """Register and authenticate users; read and update profiles."""

    def __init__(
        self,
        user_repo: IUserRepository,
        token_issuer: TokenIssuer,
        token_ttl_seconds: int = 480 * 60,
    ) -> None:
        self._user_repo = user_repo
        self._token_issuer = token_issuer
        self._token_ttl_seconds = token_ttl_seconds

    async def _ensure_email_free(self, email: str, user_id: str | None = None) -> None:
        existing = await self._user_repo.get_by_email(email)
        if existing is not None and existing.id != user_id:
            raise ConflictException("email")

    async def register(self, name: str, email: str, password: str) -> UserResult:
        """Create a user with role 'user'. Raises ConflictException if the email is taken."""
        entity = UserEntity(name=name, email=email)
        if not password or len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationException(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                field="password",
            )
        await self._ensure_email_free(entity.email)
        user = await self._user_repo.create_user(
            name=entity.name,
            email=entity.email,
            password=password,
            role=UserRole.USER,
        )
        logger.info("User registered: id=%s", user.id)
        return user

    async def login(self, email: str, password: str) -> AccessToken:
        """Return a bearer token. Unknown email, bad password, and inactive users fail alike."""
        try:
            normalized = normalize_email(email)
        except ValidationException:
            raise AuthenticationException("Invalid credentials") from None
        user = await self._user_repo.authenticate(normalized, password)
        if user is None:
            logger.info("Login failed")
            raise AuthenticationException("Invalid credentials")
        token = self._token_issuer.create_access_token(
            {"sub": user.id, "role": user.role}
        )
        return AccessToken(
            access_token=token,
            expires_in=self._token_ttl_seconds,
            user=user,
        )

    async def get_profile(self, user_id: str) -> UserResult:
        """Return user by id; raise ResourceNotFoundException if missing."""
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def update_me(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
    ) -> UserResult:
        """Update the caller's name and/or email."""
        return await self._apply_update(user_id, UserProfileUpdate(name=name, email=email))

    async def deactivate_me(self, user_id: str) -> UserResult:
        """Deactivate the caller's account (users are never hard-deleted)."""
        user = await self._apply_update(user_id, UserProfileUpdate(is_active=False))
        logger.info("User deactivated: id=%s", user_id)
        return user

    async def admin_update_profile(
        self, user_id: str, changes: UserProfileUpdate
    ) -> UserResult:
        """Update name, email, role, and/or is_active of any user."""
        return await self._apply_update(user_id, changes)

    async def _apply_update(
        self, user_id: str, changes: UserProfileUpdate
    ) -> UserResult:
        values: dict[str, Any] = {}
        if changes.name is not None:
            values["name"] = validate_name(changes.name)
        if changes.email is not None:
            values["email"] = normalize_email(changes.email)
            await self._ensure_email_free(values["email"], user_id)
        if changes.role is not None:
            try:
                values["role"] = UserRole(changes.role).value
            except ValueError:
                raise ValidationException(
                    "Role must be user or admin", field="role"
                ) from None
        if changes.is_active is not None:
            values["is_active"] = changes.is_active
        if not values:
            raise ValidationException("No profile fields to update")
        user = await self._user_repo.update_profile(user_id, values)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def list_profiles(
        self,
        *,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 25,
    ) -> UserPage:
        """Return users newest first with an optional is_active filter."""
        offset = page_offset(page, limit)
        items, total = await self._user_repo.list_users(
            is_active=is_active, offset=offset, limit=limit
        )
        return UserPage(items=items, total=total, page=page, limit=limit)
