"""DTOs for task statistics (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusCounts:
    """Task counts per status for one owner."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0


@dataclass(frozen=True)
class TaskStats:
    """Dashboard statistics. completion_rate is a 0-100 integer over the last 30 days."""

    total: int
    pending: int
    in_progress: int
    completed: int
    overdue: int
    due_this_week: int
    completion_rate: int


@dataclass(frozen=True)
class ProfileStats:
    """Profile statistics. recent_completions covers the last 7 days."""

    total: int
    pending: int
    in_progress: int
    completed: int
    overdue: int
    due_this_week: int
    recent_completions: int
