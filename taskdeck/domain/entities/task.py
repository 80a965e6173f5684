"""Task domain entity and lifecycle rules.

Represents a to-do item independent of persistence. The completion rule
(completed_at is set exactly while status is Completed) and the future-only
deadline rule live here so that single updates, bulk updates and creation
share one definition.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from taskdeck.domain.enums import TaskPriority, TaskStatus
from taskdeck.domain.exceptions import ValidationException
from taskdeck.domain.value_objects.core import TaskDescription, TaskTags, TaskTitle
from taskdeck.shared.utils.datetime import ensure_utc

_SECONDS_PER_DAY = 24 * 60 * 60


def parse_status(value: TaskStatus | str) -> TaskStatus:
    """Return value as TaskStatus. Raises ValidationException for unknown values."""
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValidationException(
            "Status must be Pending, In Progress, or Completed", field="status"
        ) from None


def parse_priority(value: TaskPriority | str) -> TaskPriority:
    """Return value as TaskPriority. Raises ValidationException for unknown values."""
    try:
        return TaskPriority(value)
    except ValueError:
        raise ValidationException(
            "Priority must be Low, Medium, or High", field="priority"
        ) from None


def validate_title(raw: str) -> str:
    try:
        return TaskTitle.of(raw).value
    except ValueError as e:
        raise ValidationException(str(e), field="title") from e


def validate_description(raw: str) -> str:
    try:
        return TaskDescription.of(raw).value
    except ValueError as e:
        raise ValidationException(str(e), field="description") from e


def validate_tags(raw: list[str] | None) -> list[str]:
    try:
        return TaskTags.of(raw).as_list()
    except ValueError as e:
        raise ValidationException(str(e), field="tags") from e


def require_future_deadline(deadline: datetime, now: datetime) -> datetime:
    """Return deadline as UTC if strictly after now; else raise ValidationException.

    Naive datetimes are treated as UTC.
    """
    if not isinstance(deadline, datetime):
        raise ValidationException("Please provide a valid deadline date", field="deadline")
    normalized = ensure_utc(deadline)
    if normalized <= now:
        raise ValidationException("Deadline must be in the future", field="deadline")
    return normalized


def completed_at_for(
    status: TaskStatus,
    current_completed_at: datetime | None,
    now: datetime,
) -> datetime | None:
    """Return completed_at for a record moving to status.

    Entering (or staying in) Completed keeps an existing stamp or stamps now;
    any other status clears it.
    """
    if status == TaskStatus.COMPLETED:
        return current_completed_at or now
    return None


def is_overdue(deadline: datetime, status: TaskStatus | str, now: datetime) -> bool:
    """Overdue: deadline in the past and not Completed."""
    if TaskStatus(status) == TaskStatus.COMPLETED:
        return False
    return ensure_utc(deadline) < now


def days_until_deadline(deadline: datetime, now: datetime) -> int:
    """Whole days until deadline, rounded up (negative when past)."""
    delta = ensure_utc(deadline) - now
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


@dataclass
class TaskEntity:
    """Domain entity for a new task (SRP: business rules separate from persistence).

    Validation and normalization (trimming, enum coercion) run on construction.
    Use create() to also enforce the future-only deadline and stamp completion.
    """

    title: str
    description: str
    deadline: datetime
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    tags: list[str] = field(default_factory=list)
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate and normalize fields. Raises ValidationException if invalid."""
        self.title = validate_title(self.title)
        self.description = validate_description(self.description)
        self.tags = validate_tags(self.tags)
        self.status = parse_status(self.status)
        self.priority = parse_priority(self.priority)
        if not isinstance(self.deadline, datetime):
            raise ValidationException(
                "Please provide a valid deadline date", field="deadline"
            )
        self.deadline = ensure_utc(self.deadline)

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        deadline: datetime,
        now: datetime,
        status: TaskStatus | str | None = None,
        priority: TaskPriority | str | None = None,
        tags: list[str] | None = None,
    ) -> "TaskEntity":
        """Build a validated new task as of now (deadline must be after now)."""
        entity = cls(
            title=title,
            description=description,
            deadline=require_future_deadline(deadline, now),
            status=status if status is not None else TaskStatus.PENDING,
            priority=priority if priority is not None else TaskPriority.MEDIUM,
            tags=list(tags) if tags is not None else [],
        )
        entity.transition_to(entity.status, now)
        return entity

    def transition_to(self, status: TaskStatus, now: datetime) -> None:
        """Set status and keep completed_at consistent with it."""
        self.status = parse_status(status)
        self.completed_at = completed_at_for(self.status, self.completed_at, now)

    def to_fields(self) -> dict[str, Any]:
        """Return persistable field values (enum values as strings)."""
        return {
            "title": self.title,
            "description": self.description,
            "deadline": self.deadline,
            "status": self.status.value,
            "priority": self.priority.value,
            "tags": list(self.tags),
            "completed_at": self.completed_at,
        }
