"""Domain enumerations for the taskdeck application.

Enums represent fixed sets of domain values (task status, priority, user role).
Values are the wire/storage representation.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status.

    completed_at is set exactly while a task is COMPLETED.
    """

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class UserRole(_ValuesMixin, str, Enum):
    """User role. ADMIN grants the unscoped (all users) task and profile operations."""

    USER = "user"
    ADMIN = "admin"
