"""TaskStatisticsService unit tests: windows and completion rate."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from taskdeck.application.dtos.stats import StatusCounts
from taskdeck.application.use_cases.tasks import TaskStatisticsService
from taskdeck.application.use_cases.tasks.task_statistics import completion_rate

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def task_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.count_by_status = AsyncMock(
        return_value=StatusCounts(total=10, pending=4, in_progress=2, completed=4)
    )
    repo.count_overdue = AsyncMock(return_value=1)
    repo.count_due_between = AsyncMock(return_value=3)
    repo.count_created_since = AsyncMock(return_value=10)
    repo.count_completed_since = AsyncMock(return_value=4)
    return repo


@pytest.mark.parametrize(
    "completed, created, expected",
    [(4, 10, 40), (0, 0, 0), (5, 0, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 3, 100)],
)
def test_completion_rate(completed: int, created: int, expected: int) -> None:
    assert completion_rate(completed, created) == expected


async def test_get_stats(task_repo) -> None:
    stats = await TaskStatisticsService(task_repo, clock=lambda: NOW).get_stats("owner1")
    assert stats.total == 10
    assert stats.pending == 4
    assert stats.in_progress == 2
    assert stats.completed == 4
    assert stats.overdue == 1
    assert stats.due_this_week == 3
    assert stats.completion_rate == 40
    task_repo.count_overdue.assert_awaited_once_with("owner1", NOW)
    task_repo.count_due_between.assert_awaited_once_with(
        "owner1", NOW, NOW + timedelta(days=7)
    )
    task_repo.count_created_since.assert_awaited_once_with(
        "owner1", NOW - timedelta(days=30)
    )
    task_repo.count_completed_since.assert_awaited_once_with(
        "owner1", NOW - timedelta(days=30)
    )


async def test_profile_stats_use_seven_day_completion_window(task_repo) -> None:
    task_repo.count_completed_since.return_value = 2
    stats = await TaskStatisticsService(task_repo, clock=lambda: NOW).get_profile_stats(
        "owner1"
    )
    assert stats.recent_completions == 2
    task_repo.count_completed_since.assert_awaited_once_with(
        "owner1", NOW - timedelta(days=7)
    )
    task_repo.count_created_since.assert_not_awaited()
