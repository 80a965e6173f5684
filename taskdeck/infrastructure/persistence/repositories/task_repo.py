"""Task repository. Returns application DTOs; every query is owner-scoped unless the criteria are unscoped (admin)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, func, literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskdeck.application.dtos.stats import StatusCounts
from taskdeck.application.dtos.task import TaskCriteria, TaskResult
from taskdeck.domain.entities.task import TaskEntity
from taskdeck.domain.enums import TaskStatus
from taskdeck.infrastructure.persistence.models.task import Task
from taskdeck.infrastructure.persistence.repositories.base import BaseRepository
from taskdeck.shared.utils.datetime import ensure_utc


def _task_to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO (datetimes normalized to UTC)."""
    return TaskResult(
        id=t.id,
        user_id=t.user_id,
        title=t.title,
        description=t.description,
        status=t.status,
        deadline=ensure_utc(t.deadline),
        priority=t.priority,
        tags=list(t.tags or []),
        completed_at=ensure_utc(t.completed_at),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _criteria_conditions(criteria: TaskCriteria) -> list[Any]:
    """Translate listing criteria into WHERE conditions (ANDed)."""
    conditions: list[Any] = []
    if criteria.owner_id is not None:
        conditions.append(Task.user_id == criteria.owner_id)
    if criteria.status is not None:
        conditions.append(Task.status == criteria.status.value)
    if criteria.priority is not None:
        conditions.append(Task.priority == criteria.priority.value)
    if criteria.overdue_as_of is not None:
        conditions.append(Task.deadline < criteria.overdue_as_of)
        conditions.append(Task.status != TaskStatus.COMPLETED.value)
    if criteria.search:
        conditions.append(
            or_(
                Task.title.icontains(criteria.search, autoescape=True),
                Task.description.icontains(criteria.search, autoescape=True),
            )
        )
    return conditions


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(
        self, owner_id: str, task: TaskEntity, now: datetime
    ) -> TaskResult:
        """Insert a validated task and return the result DTO."""
        created = await self.create(
            Task(user_id=owner_id, created_at=now, updated_at=now, **task.to_fields())
        )
        return _task_to_result(created)

    async def get_for_owner(self, task_id: str, owner_id: str) -> TaskResult | None:
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task_id, Task.user_id == owner_id)
            .execution_options(populate_existing=True)
        )
        task = result.scalar_one_or_none()
        return _task_to_result(task) if task else None

    async def update_fields(
        self, task_id: str, owner_id: str, values: dict[str, Any]
    ) -> TaskResult | None:
        """Write all values in a single UPDATE, then read the row back."""
        result = await self.db.execute(
            update(Task)
            .where(Task.id == task_id, Task.user_id == owner_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        return await self.get_for_owner(task_id, owner_id)

    async def delete_for_owner(self, task_id: str, owner_id: str) -> bool:
        result = await self.db.execute(
            select(Task).where(Task.id == task_id, Task.user_id == owner_id)
        )
        task = result.scalar_one_or_none()
        if task is None:
            return False
        await self.delete(task)
        return True

    async def count_owned(self, owner_id: str, task_ids: list[str]) -> int:
        if not task_ids:
            return 0
        return await self._count(Task.user_id == owner_id, Task.id.in_(task_ids))

    async def bulk_set_status(
        self,
        owner_id: str,
        task_ids: list[str],
        status: TaskStatus,
        now: datetime,
    ) -> int:
        """Set status (and completed_at) on owned tasks whose status differs; return rowcount."""
        if status == TaskStatus.COMPLETED:
            completed_at: Any = func.coalesce(
                Task.completed_at, literal(now, DateTime(timezone=True))
            )
        else:
            completed_at = None
        result = await self.db.execute(
            update(Task)
            .where(
                Task.user_id == owner_id,
                Task.id.in_(task_ids),
                Task.status != status.value,
            )
            .values(status=status.value, completed_at=completed_at, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def find_page(
        self,
        criteria: TaskCriteria,
        *,
        offset: int,
        limit: int,
        newest_first: bool = False,
    ) -> tuple[list[TaskResult], int]:
        conditions = _criteria_conditions(criteria)
        total = await self._count(*conditions)
        if newest_first:
            ordering = (Task.created_at.desc(), Task.id.desc())
        else:
            ordering = (Task.deadline.asc(), Task.created_at.desc(), Task.id.desc())
        result = await self.db.execute(
            select(Task)
            .where(*conditions)
            .order_by(*ordering)
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return [_task_to_result(t) for t in result.scalars().all()], total

    async def count_by_status(self, owner_id: str) -> StatusCounts:
        result = await self.db.execute(
            select(Task.status, func.count(Task.id))
            .where(Task.user_id == owner_id)
            .group_by(Task.status)
        )
        by_status: dict[str, int] = dict(result.all())  # type: ignore[arg-type]
        return StatusCounts(
            total=sum(by_status.values()),
            pending=by_status.get(TaskStatus.PENDING.value, 0),
            in_progress=by_status.get(TaskStatus.IN_PROGRESS.value, 0),
            completed=by_status.get(TaskStatus.COMPLETED.value, 0),
        )

    async def count_overdue(self, owner_id: str, now: datetime) -> int:
        return await self._count(
            Task.user_id == owner_id,
            Task.deadline < now,
            Task.status != TaskStatus.COMPLETED.value,
        )

    async def count_due_between(
        self, owner_id: str, start: datetime, end: datetime
    ) -> int:
        return await self._count(
            Task.user_id == owner_id,
            Task.deadline >= start,
            Task.deadline <= end,
            Task.status != TaskStatus.COMPLETED.value,
        )

    async def count_created_since(self, owner_id: str, since: datetime) -> int:
        return await self._count(Task.user_id == owner_id, Task.created_at >= since)

    async def count_completed_since(self, owner_id: str, since: datetime) -> int:
        return await self._count(
            Task.user_id == owner_id,
            Task.status == TaskStatus.COMPLETED.value,
            Task.completed_at >= since,
        )
