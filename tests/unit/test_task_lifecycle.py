"""TaskLifecycleService unit tests with a mocked task repository and fixed clock."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from taskdeck.application.dtos.task import TaskCreate, TaskResult, TaskUpdate
from taskdeck.application.use_cases.tasks import TaskLifecycleService
from taskdeck.domain.entities import TaskEntity
from taskdeck.domain.enums import TaskStatus
from taskdeck.domain.exceptions import ResourceNotFoundException, ValidationException

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _task_result(
    task_id: str = "task1",
    status: str = "Pending",
    completed_at: datetime | None = None,
) -> TaskResult:
    return TaskResult(
        id=task_id,
        user_id="owner1",
        title="Write report",
        description="Quarterly numbers",
        status=status,
        deadline=NOW + timedelta(days=3),
        priority="Medium",
        tags=[],
        completed_at=completed_at,
        created_at=NOW - timedelta(days=1),
        updated_at=NOW - timedelta(days=1),
    )


@pytest.fixture
def task_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create_task = AsyncMock(return_value=_task_result())
    repo.get_for_owner = AsyncMock(return_value=_task_result())
    repo.update_fields = AsyncMock(return_value=_task_result())
    repo.delete_for_owner = AsyncMock(return_value=True)
    repo.count_owned = AsyncMock(return_value=0)
    repo.bulk_set_status = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def service(task_repo: AsyncMock) -> TaskLifecycleService:
    return TaskLifecycleService(task_repo, clock=lambda: NOW)


async def test_create_task_passes_validated_entity(service, task_repo) -> None:
    await service.create_task(
        "owner1",
        TaskCreate(
            title="  Write report ",
            description="Quarterly numbers",
            deadline=NOW + timedelta(days=3),
            tags=["work", " "],
        ),
    )
    owner_id, entity, now = task_repo.create_task.await_args.args
    assert owner_id == "owner1"
    assert isinstance(entity, TaskEntity)
    assert entity.title == "Write report"
    assert entity.tags == ["work"]
    assert entity.status is TaskStatus.PENDING
    assert entity.completed_at is None
    assert now == NOW


async def test_create_task_past_deadline_never_writes(service, task_repo) -> None:
    with pytest.raises(ValidationException, match="future"):
        await service.create_task(
            "owner1",
            TaskCreate(title="T", description="D", deadline=NOW - timedelta(hours=1)),
        )
    task_repo.create_task.assert_not_awaited()


async def test_get_task_not_owned_raises_not_found(service, task_repo) -> None:
    task_repo.get_for_owner.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await service.get_task("owner1", "someone-elses")


async def test_update_to_completed_stamps_completed_at(service, task_repo) -> None:
    await service.update_task("owner1", "task1", TaskUpdate(status="Completed"))
    task_id, owner_id, values = task_repo.update_fields.await_args.args
    assert (task_id, owner_id) == ("task1", "owner1")
    assert values["status"] == "Completed"
    assert values["completed_at"] == NOW
    assert values["updated_at"] == NOW


async def test_update_away_from_completed_clears_completed_at(service, task_repo) -> None:
    task_repo.get_for_owner.return_value = _task_result(
        status="Completed", completed_at=NOW - timedelta(days=1)
    )
    await service.update_task("owner1", "task1", TaskUpdate(status="Pending"))
    values = task_repo.update_fields.await_args.args[2]
    assert values["status"] == "Pending"
    assert values["completed_at"] is None


async def test_update_completed_again_keeps_original_stamp(service, task_repo) -> None:
    stamped = NOW - timedelta(days=1)
    task_repo.get_for_owner.return_value = _task_result(
        status="Completed", completed_at=stamped
    )
    await service.update_task("owner1", "task1", TaskUpdate(status="Completed"))
    assert task_repo.update_fields.await_args.args[2]["completed_at"] == stamped


async def test_update_without_status_leaves_completed_at_alone(service, task_repo) -> None:
    await service.update_task("owner1", "task1", TaskUpdate(priority="High"))
    values = task_repo.update_fields.await_args.args[2]
    assert values["priority"] == "High"
    assert "completed_at" not in values
    assert "status" not in values


async def test_update_past_deadline_rejected(service, task_repo) -> None:
    with pytest.raises(ValidationException, match="future"):
        await service.update_task(
            "owner1", "task1", TaskUpdate(deadline=NOW - timedelta(minutes=1))
        )
    task_repo.update_fields.assert_not_awaited()


async def test_update_invalid_status_rejected(service, task_repo) -> None:
    with pytest.raises(ValidationException, match="Status"):
        await service.update_task("owner1", "task1", TaskUpdate(status="Archived"))
    task_repo.update_fields.assert_not_awaited()


async def test_update_unknown_task_raises_not_found(service, task_repo) -> None:
    task_repo.get_for_owner.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await service.update_task("owner1", "missing", TaskUpdate(title="x"))


async def test_delete_missing_raises_not_found(service, task_repo) -> None:
    task_repo.delete_for_owner.return_value = False
    with pytest.raises(ResourceNotFoundException):
        await service.delete_task("owner1", "missing")


async def test_bulk_update_requires_ids(service, task_repo) -> None:
    with pytest.raises(ValidationException, match="Task IDs array is required"):
        await service.bulk_update_status("owner1", [], "Completed")
    task_repo.count_owned.assert_not_awaited()


async def test_bulk_update_rejects_invalid_status_before_lookup(service, task_repo) -> None:
    with pytest.raises(ValidationException, match="Status"):
        await service.bulk_update_status("owner1", ["a"], "Done")
    task_repo.count_owned.assert_not_awaited()


async def test_bulk_update_with_foreign_id_modifies_nothing(service, task_repo) -> None:
    task_repo.count_owned.return_value = 2
    with pytest.raises(ResourceNotFoundException):
        await service.bulk_update_status("owner1", ["a", "b", "foreign"], "Completed")
    task_repo.bulk_set_status.assert_not_awaited()


async def test_bulk_update_dedupes_ids_and_returns_modified(service, task_repo) -> None:
    task_repo.count_owned.return_value = 2
    task_repo.bulk_set_status.return_value = 1
    modified = await service.bulk_update_status(
        "owner1", ["a", "b", "a"], "In Progress"
    )
    assert modified == 1
    task_repo.count_owned.assert_awaited_once_with("owner1", ["a", "b"])
    task_repo.bulk_set_status.assert_awaited_once_with(
        "owner1", ["a", "b"], TaskStatus.IN_PROGRESS, NOW
    )
