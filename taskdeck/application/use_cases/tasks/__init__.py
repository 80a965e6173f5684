"""Task use cases: lifecycle, queries, and statistics."""

from taskdeck.application.use_cases.tasks.task_lifecycle import TaskLifecycleService
from taskdeck.application.use_cases.tasks.task_queries import TaskQueryService
from taskdeck.application.use_cases.tasks.task_statistics import (
    TaskStatisticsService,
    completion_rate,
)

__all__ = [
    "TaskLifecycleService",
    "TaskQueryService",
    "TaskStatisticsService",
    "completion_rate",
]
