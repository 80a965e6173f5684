"""Task lifecycle: create, get, update, delete, and bulk status update.

Completion stamping is applied in the same write as the status change so a
stored task never has status Completed without completed_at (or the reverse).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from taskdeck.application.dtos.task import TaskCreate, TaskResult, TaskUpdate
from taskdeck.application.interfaces.repositories import ITaskRepository
from taskdeck.domain.entities.task import (
    TaskEntity,
    completed_at_for,
    parse_priority,
    parse_status,
    require_future_deadline,
    validate_description,
    validate_tags,
    validate_title,
)
from taskdeck.domain.exceptions import ResourceNotFoundException, ValidationException
from taskdeck.shared.telemetry.tracing import add_span_attributes, traced
from taskdeck.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class TaskLifecycleService:
    """Owner-scoped task writes. Unknown and foreign task ids both raise ResourceNotFoundException."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.clock = clock

    @traced("task.create")
    async def create_task(self, owner_id: str, data: TaskCreate) -> TaskResult:
        """Validate and persist a new task; deadline must be in the future."""
        now = self.clock()
        entity = TaskEntity.create(
            title=data.title,
            description=data.description,
            deadline=data.deadline,
            now=now,
            status=data.status,
            priority=data.priority,
            tags=data.tags,
        )
        result = await self.task_repo.create_task(owner_id, entity, now)
        logger.info("Task created: id=%s owner=%s", result.id, owner_id)
        return result

    async def get_task(self, owner_id: str, task_id: str) -> TaskResult:
        """Return the task if owned by owner_id; else raise ResourceNotFoundException."""
        task = await self.task_repo.get_for_owner(task_id, owner_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    @traced("task.update")
    async def update_task(
        self, owner_id: str, task_id: str, changes: TaskUpdate
    ) -> TaskResult:
        """Apply a partial update; re-validates deadline and keeps completed_at consistent."""
        current = await self.get_task(owner_id, task_id)
        now = self.clock()
        values = self._changed_values(current, changes, now)
        result = await self.task_repo.update_fields(task_id, owner_id, values)
        if result is None:
            raise ResourceNotFoundException("task", task_id)
        logger.info(
            "Task updated: id=%s fields=%s",
            task_id,
            ",".join(sorted(k for k in values if k != "updated_at")),
        )
        return result

    def _changed_values(
        self, current: TaskResult, changes: TaskUpdate, now: datetime
    ) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if changes.title is not None:
            values["title"] = validate_title(changes.title)
        if changes.description is not None:
            values["description"] = validate_description(changes.description)
        if changes.deadline is not None:
            values["deadline"] = require_future_deadline(changes.deadline, now)
        if changes.priority is not None:
            values["priority"] = parse_priority(changes.priority).value
        if changes.tags is not None:
            values["tags"] = validate_tags(changes.tags)
        if changes.status is not None:
            status = parse_status(changes.status)
            values["status"] = status.value
            values["completed_at"] = completed_at_for(
                status, current.completed_at, now
            )
        values["updated_at"] = now
        return values

    @traced("task.delete")
    async def delete_task(self, owner_id: str, task_id: str) -> None:
        """Hard-delete the task; raise ResourceNotFoundException if not owned."""
        deleted = await self.task_repo.delete_for_owner(task_id, owner_id)
        if not deleted:
            raise ResourceNotFoundException("task", task_id)
        logger.info("Task deleted: id=%s owner=%s", task_id, owner_id)

    @traced("task.bulk_update_status")
    async def bulk_update_status(
        self, owner_id: str, task_ids: list[str], status: str
    ) -> int:
        """Set status on every listed task, or on none.

        Ownership of all ids is verified before any write; a single unknown or
        foreign id rejects the whole request. Returns the number of tasks whose
        status actually changed.
        """
        if not task_ids:
            raise ValidationException("Task IDs array is required", field="task_ids")
        unique_ids = list(dict.fromkeys(task_ids))
        target = parse_status(status)

        owned = await self.task_repo.count_owned(owner_id, unique_ids)
        if owned != len(unique_ids):
            logger.warning(
                "Bulk status update rejected: owner=%s requested=%d owned=%d",
                owner_id,
                len(unique_ids),
                owned,
            )
            raise ResourceNotFoundException("task", ",".join(unique_ids))

        modified = await self.task_repo.bulk_set_status(
            owner_id, unique_ids, target, self.clock()
        )
        add_span_attributes(
            requested_count=len(unique_ids), modified_count=modified
        )
        logger.info(
            "Bulk status update: owner=%s status=%s modified=%d",
            owner_id,
            target.value,
            modified,
        )
        return modified
