"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, services, and the
current user. Routes depend only on these, never on infrastructure directly.
Read routes use get_db; write routes use get_db_transactional so that each
request's writes share one transaction.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskdeck.application.dtos.user import UserResult
from taskdeck.application.services.user_service import UserService
from taskdeck.application.use_cases.tasks import (
    TaskLifecycleService,
    TaskQueryService,
    TaskStatisticsService,
)
from taskdeck.core.config import get_settings
from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import AuthenticationException, AuthorizationException
from taskdeck.infrastructure.persistence.database import get_db, get_db_transactional
from taskdeck.infrastructure.persistence.repositories import (
    TaskRepository,
    UserRepository,
)
from taskdeck.infrastructure.security.jwt import create_access_token, verify_token

_http_bearer = HTTPBearer(auto_error=False)


class AuthSecurity:
    """Token issuing provided via DI (no direct infra imports in services)."""

    def create_access_token(self, data: dict) -> str:
        return create_access_token(data)


def get_auth_security() -> AuthSecurity:
    return AuthSecurity()


# ---- Repositories ----


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository for read operations."""
    return TaskRepository(db)


async def get_task_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskRepository:
    """Task repository for writes (transactional)."""
    return TaskRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations."""
    return UserRepository(db)


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    """User repository for writes (transactional)."""
    return UserRepository(db)


# ---- Services ----


def get_task_query_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskQueryService:
    return TaskQueryService(
        task_repo=task_repo, max_page_size=get_settings().max_page_size
    )


def get_task_statistics_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskStatisticsService:
    return TaskStatisticsService(task_repo=task_repo)


def get_task_lifecycle_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo_for_write)],
) -> TaskLifecycleService:
    """Lifecycle service on a transactional session (bulk verify + update share it)."""
    return TaskLifecycleService(task_repo=task_repo)


def get_task_reader_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskLifecycleService:
    """Lifecycle service on a read session (get_task only)."""
    return TaskLifecycleService(task_repo=task_repo)


def _user_service(user_repo: UserRepository, auth_security: AuthSecurity) -> UserService:
    return UserService(
        user_repo=user_repo,
        token_issuer=auth_security,
        token_ttl_seconds=get_settings().access_token_expire_minutes * 60,
    )


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> UserService:
    """User service for reads and login."""
    return _user_service(user_repo, auth_security)


def get_user_service_for_write(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> UserService:
    """User service for registration and profile updates (transactional)."""
    return _user_service(user_repo, auth_security)


# ---- Current user ----


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and active; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id(payload["sub"])
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise AuthenticationException (401) if missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authorized, token missing or invalid")
    return current_user


async def require_admin(
    current_user: Annotated[UserResult, Depends(get_current_user)],
) -> UserResult:
    """Return current user if admin; else raise AuthorizationException (403)."""
    if current_user.role != UserRole.ADMIN.value:
        raise AuthorizationException(
            message="Access denied. Admin privileges required."
        )
    return current_user


CurrentUser = Annotated[UserResult, Depends(get_current_user)]
AdminUser = Annotated[UserResult, Depends(require_admin)]
