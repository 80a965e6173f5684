"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations. Engine and session factory are
created lazily on first use (get_db / get_db_transactional) so import does not
trigger Settings validation.

get_db and get_db_transactional set app.current_user_id from the owner context
(set by OwnerContextMiddleware) and app.current_user_role from that user's
app_user row, so row-level security policies restrict task rows to their
owner unless the caller is currently an admin.
"""

import logging
import re
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from taskdeck.core.config import get_settings
from taskdeck.core.owner_context import get_owner_id

logger = logging.getLogger(__name__)

# Strict format for values interpolated into SET LOCAL (CUID-style ids, role names).
_SET_VALUE_MAX_LENGTH = 64
_SET_VALUE_RE = re.compile(r"^[a-zA-Z0-9_-]{1," + str(_SET_VALUE_MAX_LENGTH) + r"}$")

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    connect_args: dict[str, Any] = {}
    if "postgresql" in settings.database_url:
        connect_args["command_timeout"] = (
            settings.db_command_timeout
            if settings.db_command_timeout is not None
            else 60
        )
        if settings.db_disable_jit:
            connect_args["server_settings"] = {"jit": "off"}
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
        max_overflow=(
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        ),
        pool_recycle=3600,
        connect_args=connect_args,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    return AsyncSessionLocal


def get_engine() -> AsyncEngine:
    """Return the application engine, creating it if needed."""
    _ensure_engine()
    if engine is None:
        raise RuntimeError("Database engine was not created")
    return engine


async def dispose_engine() -> None:
    """Dispose the engine (if created) and reset the session factory."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _quote_set_value(value: str) -> str:
    """Escape a value for use in PostgreSQL SET (single-quoted literal)."""
    return value.replace("'", "''")


def _is_valid_set_value(value: str) -> bool:
    """Return True if value is safe to interpolate into SET LOCAL (format + length)."""
    if not value or len(value) > _SET_VALUE_MAX_LENGTH:
        return False
    return bool(_SET_VALUE_RE.fullmatch(value))


async def _load_owner_role(session: AsyncSession, user_id: str) -> str | None:
    """Return the stored role of an active user, or None if unknown or deactivated."""
    result = await session.execute(
        text("SELECT role FROM app_user WHERE id = :user_id AND is_active"),
        {"user_id": user_id},
    )
    return result.scalar_one_or_none()


async def _set_owner_context(session: AsyncSession) -> None:
    """Set app.current_user_id / app.current_user_role on the session for RLS.

    The role comes from app_user, not from the token. Unknown or deactivated
    users get no settings, so the task policy matches no rows.

    SET LOCAL does not support bound parameters in PostgreSQL; the value must be
    interpolated. Values are validated (CUID-style, max length) and single
    quotes escaped. Invalid values are skipped and logged. No-op on other
    dialects (e.g. SQLite in tests).
    """
    if session.bind is None or session.bind.dialect.name != "postgresql":
        return
    user_id = get_owner_id()
    if not user_id:
        return
    if not _is_valid_set_value(user_id):
        logger.warning(
            "Skipping owner context: user id failed format validation (length=%d, max=%d)",
            len(user_id),
            _SET_VALUE_MAX_LENGTH,
        )
        return
    role = await _load_owner_role(session, user_id)
    if role is None or not _is_valid_set_value(role):
        logger.debug("Skipping owner context: no active user %s", user_id)
        return
    for setting, value in (
        ("app.current_user_id", user_id),
        ("app.current_user_role", role),
    ):
        await session.execute(
            text(f"SET LOCAL {setting} = '{_quote_set_value(value)}'")
        )


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Runs SET LOCAL for the owner context (RLS) when set.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        await _set_owner_context(session)
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, PATCH, DELETE endpoints.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            await _set_owner_context(session)
            yield session
