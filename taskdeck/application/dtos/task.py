"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskdeck.domain.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task read-model returned by repositories and services."""

    id: str
    user_id: str
    title: str
    description: str
    status: str
    deadline: datetime
    priority: str
    tags: list[str]
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskCreate:
    """Input for creating a task. None means use the default."""

    title: str
    description: str
    deadline: datetime
    status: str | None = None
    priority: str | None = None
    tags: list[str] | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Partial update for a task. None means leave the field unchanged."""

    title: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    status: str | None = None
    priority: str | None = None
    tags: list[str] | None = None


@dataclass(frozen=True)
class TaskListFilter:
    """Request-scoped listing criteria. overdue=False applies no constraint."""

    status: str | None = None
    priority: str | None = None
    overdue: bool | None = None
    search: str | None = None
    page: int = 1
    limit: int = 25


@dataclass(frozen=True)
class TaskCriteria:
    """Validated store-level criteria built from a TaskListFilter.

    owner_id None means unscoped (admin). overdue_as_of set means
    deadline < overdue_as_of AND status != Completed.
    """

    owner_id: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    overdue_as_of: datetime | None = None
    search: str | None = None


@dataclass(frozen=True)
class PageRef:
    """Reference to an adjacent page."""

    page: int
    limit: int


@dataclass(frozen=True)
class TaskPage:
    """One page of tasks plus pagination metadata."""

    items: list[TaskResult]
    total: int
    page: int
    limit: int
    next: PageRef | None = None
    prev: PageRef | None = None

    @property
    def count(self) -> int:
        return len(self.items)
