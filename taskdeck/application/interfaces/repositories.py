"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from taskdeck.domain.enums import TaskStatus, UserRole

if TYPE_CHECKING:
    from taskdeck.application.dtos.stats import StatusCounts
    from taskdeck.application.dtos.task import TaskCriteria, TaskResult
    from taskdeck.application.dtos.user import UserResult
    from taskdeck.domain.entities.task import TaskEntity


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP). Owner-scoped unless noted."""

    async def create_task(
        self, owner_id: str, task: TaskEntity, now: datetime
    ) -> TaskResult:
        """Persist a validated task; created_at and updated_at are set to now."""

    async def get_for_owner(self, task_id: str, owner_id: str) -> TaskResult | None:
        """Return the task if it exists and belongs to owner_id."""

    async def update_fields(
        self, task_id: str, owner_id: str, values: dict[str, Any]
    ) -> TaskResult | None:
        """Apply column values in one UPDATE; return the updated task or None."""

    async def delete_for_owner(self, task_id: str, owner_id: str) -> bool:
        """Hard-delete the task; return False if not found or not owned."""

    async def count_owned(self, owner_id: str, task_ids: list[str]) -> int:
        """Return how many of task_ids exist and belong to owner_id."""

    async def bulk_set_status(
        self,
        owner_id: str,
        task_ids: list[str],
        status: TaskStatus,
        now: datetime,
    ) -> int:
        """Set status on owned tasks in one UPDATE; return rows actually changed."""

    async def find_page(
        self,
        criteria: TaskCriteria,
        *,
        offset: int,
        limit: int,
        newest_first: bool = False,
    ) -> tuple[list[TaskResult], int]:
        """Return (page items, total matching) for criteria."""

    async def count_by_status(self, owner_id: str) -> StatusCounts:
        """Return total and per-status counts for owner."""

    async def count_overdue(self, owner_id: str, now: datetime) -> int:
        """Count tasks with deadline before now that are not Completed."""

    async def count_due_between(
        self, owner_id: str, start: datetime, end: datetime
    ) -> int:
        """Count non-Completed tasks with start <= deadline <= end."""

    async def count_created_since(self, owner_id: str, since: datetime) -> int:
        """Count tasks with created_at >= since."""

    async def count_completed_since(self, owner_id: str, since: datetime) -> int:
        """Count Completed tasks with completed_at >= since."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by (lowercased) email."""

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        """Create user; raise ConflictException when the email is taken."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return the active user when the password matches, else None."""

    async def update_profile(
        self, user_id: str, values: dict[str, Any]
    ) -> UserResult | None:
        """Apply profile values; raise ConflictException when the email is taken."""

    async def list_users(
        self,
        *,
        is_active: bool | None = None,
        offset: int = 0,
        limit: int = 25,
    ) -> tuple[list[UserResult], int]:
        """Return (users newest first, total matching)."""
