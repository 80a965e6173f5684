"""Application use cases: one entry point per workflow."""

from taskdeck.application.use_cases.tasks import (
    TaskLifecycleService,
    TaskQueryService,
    TaskStatisticsService,
)

__all__ = [
    "TaskLifecycleService",
    "TaskQueryService",
    "TaskStatisticsService",
]
