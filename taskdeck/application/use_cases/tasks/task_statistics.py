"""Task statistics: status counts, overdue, due this week, and completion metrics.

All windows are measured back (or forward) from a single clock reading per
request.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime

from taskdeck.application.dtos.stats import ProfileStats, TaskStats
from taskdeck.application.interfaces.repositories import ITaskRepository
from taskdeck.shared.telemetry.tracing import traced
from taskdeck.shared.utils.datetime import days_ago, days_ahead, utc_now

DUE_SOON_DAYS = 7
COMPLETION_RATE_WINDOW_DAYS = 30
RECENT_COMPLETIONS_DAYS = 7


def completion_rate(completed: int, created: int) -> int:
    """Return 100 * completed / created rounded half up; 0 when created is 0."""
    if created <= 0:
        return 0
    return math.floor(100 * completed / created + 0.5)


class TaskStatisticsService:
    """Aggregate task statistics for one owner."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.clock = clock

    @traced("task.stats")
    async def get_stats(self, owner_id: str) -> TaskStats:
        """Counts per status, overdue, due within 7 days, and the 30-day completion rate."""
        now = self.clock()
        counts = await self.task_repo.count_by_status(owner_id)
        overdue = await self.task_repo.count_overdue(owner_id, now)
        due_this_week = await self.task_repo.count_due_between(
            owner_id, now, days_ahead(now, DUE_SOON_DAYS)
        )
        window_start = days_ago(now, COMPLETION_RATE_WINDOW_DAYS)
        created = await self.task_repo.count_created_since(owner_id, window_start)
        completed = await self.task_repo.count_completed_since(owner_id, window_start)
        return TaskStats(
            total=counts.total,
            pending=counts.pending,
            in_progress=counts.in_progress,
            completed=counts.completed,
            overdue=overdue,
            due_this_week=due_this_week,
            completion_rate=completion_rate(completed, created),
        )

    @traced("task.profile_stats")
    async def get_profile_stats(self, owner_id: str) -> ProfileStats:
        """Same counts as get_stats plus tasks completed in the last 7 days."""
        now = self.clock()
        counts = await self.task_repo.count_by_status(owner_id)
        overdue = await self.task_repo.count_overdue(owner_id, now)
        due_this_week = await self.task_repo.count_due_between(
            owner_id, now, days_ahead(now, DUE_SOON_DAYS)
        )
        recent = await self.task_repo.count_completed_since(
            owner_id, days_ago(now, RECENT_COMPLETIONS_DAYS)
        )
        return ProfileStats(
            total=counts.total,
            pending=counts.pending,
            in_progress=counts.in_progress,
            completed=counts.completed,
            overdue=overdue,
            due_this_week=due_this_week,
            recent_completions=recent,
        )
