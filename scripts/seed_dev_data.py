"""Seed a demo user with a spread of tasks into Postgres.

Creates the user if the email is unused, then adds tasks through
TaskLifecycleService so validation and completion stamping match the API.

Usage:
    uv run python -m scripts.seed_dev_data [email] [password]

Defaults: demo@taskdeck.local / demo-password. Requires DATABASE_URL and
SECRET_KEY (read from .env in the project root) and a migrated database;
run with a DB role that has BYPASSRLS (task rows are owner-isolated).
"""

from __future__ import annotations

import asyncio
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from taskdeck.application.dtos.task import TaskCreate
from taskdeck.application.use_cases.tasks import TaskLifecycleService
from taskdeck.core.config import get_settings
from taskdeck.domain.enums import TaskPriority, TaskStatus, UserRole
from taskdeck.infrastructure.persistence.database import _ensure_engine
from taskdeck.infrastructure.persistence.repositories import (
    TaskRepository,
    UserRepository,
)
from taskdeck.shared.utils.datetime import utc_now

DEFAULT_EMAIL = "demo@taskdeck.local"
DEFAULT_PASSWORD = "demo-password"

# (title, days until deadline, status, priority, tags)
SEED_TASKS = [
    ("Write quarterly report", 3, TaskStatus.IN_PROGRESS, TaskPriority.HIGH, ["work"]),
    ("Book dentist appointment", 10, TaskStatus.PENDING, TaskPriority.LOW, ["health"]),
    ("Renew passport", 30, TaskStatus.PENDING, TaskPriority.MEDIUM, ["admin"]),
    ("Plan team offsite", 14, TaskStatus.COMPLETED, TaskPriority.MEDIUM, ["work", "team"]),
    ("Fix garden fence", 5, TaskStatus.PENDING, TaskPriority.HIGH, ["home"]),
    ("Read onboarding docs", 2, TaskStatus.COMPLETED, TaskPriority.LOW, ["work"]),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def seed(email: str, password: str) -> int:
    """Create (or reuse) the user and add SEED_TASKS; return tasks created."""
    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            user = await user_repo.get_by_email(email)
            if user is None:
                user = await user_repo.create_user(
                    name="Demo User", email=email, password=password, role=UserRole.USER
                )
                print(f"Created user: {user.id} ({user.email}) password={password}")
            else:
                print(f"Using existing user: {user.id} ({user.email})")

            lifecycle = TaskLifecycleService(TaskRepository(session))
            now = utc_now()
            for title, days, status, priority, tags in SEED_TASKS:
                await lifecycle.create_task(
                    user.id,
                    TaskCreate(
                        title=title,
                        description=f"{title} (seeded)",
                        deadline=now + timedelta(days=days),
                        status=status.value,
                        priority=priority.value,
                        tags=tags,
                    ),
                )
    return len(SEED_TASKS)


async def main() -> None:
    _load_env()
    get_settings.cache_clear()
    get_settings()
    email = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_EMAIL
    password = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_PASSWORD
    count = await seed(email, password)
    print(f"Seeded {count} tasks for {email}")


if __name__ == "__main__":
    asyncio.run(main())
