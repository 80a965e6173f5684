"""Application DTOs (no ORM dependency)."""

from taskdeck.application.dtos.stats import ProfileStats, StatusCounts, TaskStats
from taskdeck.application.dtos.task import (
    PageRef,
    TaskCreate,
    TaskCriteria,
    TaskListFilter,
    TaskPage,
    TaskResult,
    TaskUpdate,
)
from taskdeck.application.dtos.user import (
    AccessToken,
    UserPage,
    UserProfileUpdate,
    UserResult,
)

__all__ = [
    "AccessToken",
    "PageRef",
    "ProfileStats",
    "StatusCounts",
    "TaskCreate",
    "TaskCriteria",
    "TaskListFilter",
    "TaskPage",
    "TaskResult",
    "TaskStats",
    "TaskUpdate",
    "UserPage",
    "UserProfileUpdate",
    "UserResult",
]
