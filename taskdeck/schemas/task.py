"""Task API schemas.

Request schemas check JSON types only; field rules (lengths, enum values,
future deadline) are enforced by the domain and reported as 400 errors.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from taskdeck.application.dtos.stats import TaskStats
from taskdeck.application.dtos.task import (
    PageRef,
    TaskCreate,
    TaskPage,
    TaskResult,
    TaskUpdate,
)
from taskdeck.domain.entities.task import days_until_deadline, is_overdue


class TaskCreateRequest(BaseModel):
    """Request body for creating a task."""

    title: str
    description: str
    deadline: datetime
    status: str | None = Field(default=None, description="Pending, In Progress, or Completed")
    priority: str | None = Field(default=None, description="Low, Medium, or High")
    tags: list[str] | None = None

    def to_dto(self) -> TaskCreate:
        return TaskCreate(**self.model_dump())


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task (partial)."""

    title: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    status: str | None = None
    priority: str | None = None
    tags: list[str] | None = None

    def to_dto(self) -> TaskUpdate:
        return TaskUpdate(**self.model_dump())


class BulkStatusUpdateRequest(BaseModel):
    """Request body for PATCH /tasks/bulk/status."""

    task_ids: list[str] = Field(..., description="IDs of tasks owned by the caller")
    status: str


class TaskResponse(BaseModel):
    """Task with derived is_overdue and days_until_deadline."""

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
    is_overdue: bool
    days_until_deadline: int

    @classmethod
    def from_result(cls, task: TaskResult, now: datetime) -> "TaskResponse":
        return cls(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            status=task.status,
            deadline=task.deadline,
            priority=task.priority,
            tags=list(task.tags),
            completed_at=task.completed_at,
            created_at=task.created_at,
            updated_at=task.updated_at,
            is_overdue=is_overdue(task.deadline, task.status, now),
            days_until_deadline=days_until_deadline(task.deadline, now),
        )


class TaskEnvelope(BaseModel):
    success: bool = True
    task: TaskResponse


class PageRefResponse(BaseModel):
    page: int
    limit: int


class PaginationResponse(BaseModel):
    """Adjacent pages; absent keys mean there is no such page."""

    next: PageRefResponse | None = None
    prev: PageRefResponse | None = None


def _page_ref(ref: PageRef | None) -> PageRefResponse | None:
    return PageRefResponse(page=ref.page, limit=ref.limit) if ref else None


class TaskListResponse(BaseModel):
    """Response for GET /tasks and GET /tasks/admin/all."""

    success: bool = True
    count: int
    total: int
    pagination: PaginationResponse
    tasks: list[TaskResponse]

    @classmethod
    def from_page(cls, page: TaskPage, now: datetime) -> "TaskListResponse":
        return cls(
            count=page.count,
            total=page.total,
            pagination=PaginationResponse(
                next=_page_ref(page.next), prev=_page_ref(page.prev)
            ),
            tasks=[TaskResponse.from_result(t, now) for t in page.items],
        )


class TaskStatsResponse(BaseModel):
    total: int
    pending: int
    in_progress: int
    completed: int
    overdue: int
    due_this_week: int
    completion_rate: int = Field(..., ge=0, le=100)

    @classmethod
    def from_stats(cls, stats: TaskStats) -> "TaskStatsResponse":
        return cls(
            total=stats.total,
            pending=stats.pending,
            in_progress=stats.in_progress,
            completed=stats.completed,
            overdue=stats.overdue,
            due_this_week=stats.due_this_week,
            completion_rate=stats.completion_rate,
        )


class TaskStatsEnvelope(BaseModel):
    success: bool = True
    stats: TaskStatsResponse


class BulkStatusUpdateResponse(BaseModel):
    success: bool = True
    message: str
    modified_count: int
