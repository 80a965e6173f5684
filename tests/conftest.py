"""Pytest configuration and fixtures for taskdeck.

HTTP tests run taskdeck.main:app through httpx ASGITransport. The database is
a per-test SQLite file (aiosqlite) created from Base.metadata; get_db and
get_db_transactional are overridden to use it. Rate limiting is disabled.
Environment is set before taskdeck is imported so Settings validate.
"""

import os
from collections.abc import AsyncIterator, Awaitable, Callable

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool  # noqa: E402

from taskdeck.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from taskdeck.core.limiter import limiter  # noqa: E402
from taskdeck.domain.enums import UserRole  # noqa: E402
from taskdeck.infrastructure.persistence import models  # noqa: E402,F401
from taskdeck.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from taskdeck.infrastructure.persistence.repositories import UserRepository  # noqa: E402
from taskdeck.main import app  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Fresh SQLite database per test; one connection per session (NullPool)."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'taskdeck.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests. Rolled back after the test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) backed by the test database."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def register_and_login(
    client: AsyncClient,
) -> Callable[..., Awaitable[dict[str, str]]]:
    """Register a user through the API and return Authorization headers."""

    async def _register_and_login(
        email: str = "alice@example.com",
        name: str = "Alice Example",
        password: str = TEST_PASSWORD,
    ) -> dict[str, str]:
        reg = await client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert reg.status_code == 201, reg.text
        login = await client.post(
            "/api/v1/auth/login", json={"email": email, "password": password}
        )
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['access_token']}"}

    return _register_and_login


@pytest.fixture
async def auth_headers(register_and_login) -> dict[str, str]:
    """Headers for a freshly registered regular user."""
    return await register_and_login()


@pytest.fixture
async def admin_headers(
    client: AsyncClient,
    session_factory: async_sessionmaker[AsyncSession],
) -> dict[str, str]:
    """Create an admin directly in the database, log in, and return headers."""
    async with session_factory() as session:
        async with session.begin():
            await UserRepository(session).create_user(
                name="Ada Admin",
                email="admin@example.com",
                password=TEST_PASSWORD,
                role=UserRole.ADMIN,
            )
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@example.com", "password": TEST_PASSWORD},
    )
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['access_token']}"}
