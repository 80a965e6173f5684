"""Task API: owner-scoped CRUD, listing, statistics, and bulk status updates.

Static paths (/stats/overview, /bulk/status, /admin/all) are declared before
/{task_id} so they are not captured as task ids.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taskdeck.api.v1.dependencies import (
    AdminUser,
    CurrentUser,
    get_task_lifecycle_service,
    get_task_query_service,
    get_task_reader_service,
    get_task_statistics_service,
)
from taskdeck.application.dtos.task import TaskListFilter
from taskdeck.application.use_cases.tasks import (
    TaskLifecycleService,
    TaskQueryService,
    TaskStatisticsService,
)
from taskdeck.core.config import get_settings
from taskdeck.core.limiter import limit_writes
from taskdeck.schemas.common import MessageResponse
from taskdeck.schemas.task import (
    BulkStatusUpdateRequest,
    BulkStatusUpdateResponse,
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskStatsEnvelope,
    TaskStatsResponse,
    TaskUpdateRequest,
)
from taskdeck.shared.utils.datetime import utc_now

router = APIRouter()


def _list_filter(
    status: str | None = Query(None, description="Pending, In Progress, or Completed"),
    priority: str | None = Query(None, description="Low, Medium, or High"),
    overdue: bool | None = Query(None, description="Only tasks past deadline and not Completed"),
    search: str | None = Query(None, description="Substring of title or description"),
    page: int = Query(1, description="1-indexed page number"),
    limit: int | None = Query(None, description="Page size (1-100)"),
) -> TaskListFilter:
    """Request-scoped listing filter; range checks happen in TaskQueryService."""
    return TaskListFilter(
        status=status,
        priority=priority,
        overdue=overdue,
        search=search,
        page=page,
        limit=limit if limit is not None else get_settings().default_page_size,
    )


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    current_user: CurrentUser,
    filters: Annotated[TaskListFilter, Depends(_list_filter)],
    query_service: Annotated[TaskQueryService, Depends(get_task_query_service)],
):
    """List the caller's tasks, soonest deadline first."""
    page = await query_service.list_tasks(current_user.id, filters)
    return TaskListResponse.from_page(page, utc_now())


@router.post("", response_model=TaskEnvelope, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    current_user: CurrentUser,
    lifecycle: Annotated[TaskLifecycleService, Depends(get_task_lifecycle_service)],
):
    """Create a task owned by the caller. Deadline must be in the future."""
    task = await lifecycle.create_task(current_user.id, body.to_dto())
    return TaskEnvelope(task=TaskResponse.from_result(task, utc_now()))


@router.get("/stats/overview", response_model=TaskStatsEnvelope)
async def get_task_stats(
    current_user: CurrentUser,
    stats_service: Annotated[
        TaskStatisticsService, Depends(get_task_statistics_service)
    ],
):
    """Counts by status, overdue, due this week, and 30-day completion rate."""
    stats = await stats_service.get_stats(current_user.id)
    return TaskStatsEnvelope(stats=TaskStatsResponse.from_stats(stats))


@router.patch("/bulk/status", response_model=BulkStatusUpdateResponse)
@limit_writes
async def bulk_update_status(
    request: Request,
    body: BulkStatusUpdateRequest,
    current_user: CurrentUser,
    lifecycle: Annotated[TaskLifecycleService, Depends(get_task_lifecycle_service)],
):
    """Set one status on many tasks; all ids must belong to the caller."""
    modified = await lifecycle.bulk_update_status(
        current_user.id, body.task_ids, body.status
    )
    return BulkStatusUpdateResponse(
        message=f"{modified} tasks updated", modified_count=modified
    )


@router.get("/admin/all", response_model=TaskListResponse)
async def list_all_tasks(
    admin: AdminUser,
    filters: Annotated[TaskListFilter, Depends(_list_filter)],
    query_service: Annotated[TaskQueryService, Depends(get_task_query_service)],
):
    """List every user's tasks, newest first (admin only)."""
    page = await query_service.list_all_tasks(filters)
    return TaskListResponse.from_page(page, utc_now())


@router.get("/{task_id}", response_model=TaskEnvelope)
async def get_task(
    task_id: str,
    current_user: CurrentUser,
    reader: Annotated[TaskLifecycleService, Depends(get_task_reader_service)],
):
    """Get one of the caller's tasks."""
    task = await reader.get_task(current_user.id, task_id)
    return TaskEnvelope(task=TaskResponse.from_result(task, utc_now()))


@router.put("/{task_id}", response_model=TaskEnvelope)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    current_user: CurrentUser,
    lifecycle: Annotated[TaskLifecycleService, Depends(get_task_lifecycle_service)],
):
    """Partially update one of the caller's tasks."""
    task = await lifecycle.update_task(current_user.id, task_id, body.to_dto())
    return TaskEnvelope(task=TaskResponse.from_result(task, utc_now()))


@router.delete("/{task_id}", response_model=MessageResponse)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    current_user: CurrentUser,
    lifecycle: Annotated[TaskLifecycleService, Depends(get_task_lifecycle_service)],
):
    """Permanently delete one of the caller's tasks."""
    await lifecycle.delete_task(current_user.id, task_id)
    return MessageResponse(message="Task deleted successfully")
