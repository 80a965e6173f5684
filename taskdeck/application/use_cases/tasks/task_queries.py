"""Task listing: filters, ordering, and pagination metadata."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from taskdeck.application.dtos.task import (
    PageRef,
    TaskCriteria,
    TaskListFilter,
    TaskPage,
)
from taskdeck.application.interfaces.repositories import ITaskRepository
from taskdeck.application.use_cases.pagination import MAX_PAGE_SIZE, page_offset
from taskdeck.domain.entities.task import parse_priority, parse_status
from taskdeck.shared.telemetry.tracing import traced
from taskdeck.shared.utils.datetime import utc_now


class TaskQueryService:
    """List tasks for one owner (deadline soonest first) or for all owners (newest first)."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.task_repo = task_repo
        self.clock = clock
        self.max_page_size = max_page_size

    def _criteria(self, owner_id: str | None, filters: TaskListFilter) -> TaskCriteria:
        """Validate enum filters into store criteria. Raises ValidationException."""
        search = filters.search.strip() if filters.search else None
        return TaskCriteria(
            owner_id=owner_id,
            status=parse_status(filters.status) if filters.status else None,
            priority=parse_priority(filters.priority) if filters.priority else None,
            overdue_as_of=self.clock() if filters.overdue else None,
            search=search or None,
        )

    async def _page(
        self, owner_id: str | None, filters: TaskListFilter, *, newest_first: bool
    ) -> TaskPage:
        offset = page_offset(filters.page, filters.limit, self.max_page_size)
        criteria = self._criteria(owner_id, filters)
        items, total = await self.task_repo.find_page(
            criteria,
            offset=offset,
            limit=filters.limit,
            newest_first=newest_first,
        )
        return TaskPage(
            items=items,
            total=total,
            page=filters.page,
            limit=filters.limit,
            next=(
                PageRef(page=filters.page + 1, limit=filters.limit)
                if offset + filters.limit < total
                else None
            ),
            prev=(
                PageRef(page=filters.page - 1, limit=filters.limit)
                if offset > 0
                else None
            ),
        )

    @traced("task.list")
    async def list_tasks(self, owner_id: str, filters: TaskListFilter) -> TaskPage:
        """Return the owner's tasks matching filters, ordered by deadline then newest."""
        return await self._page(owner_id, filters, newest_first=False)

    @traced("task.list_all")
    async def list_all_tasks(self, filters: TaskListFilter) -> TaskPage:
        """Return tasks of every owner matching filters, newest first (admin only)."""
        return await self._page(None, filters, newest_first=True)
