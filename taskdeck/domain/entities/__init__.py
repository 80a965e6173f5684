"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from taskdeck.domain.entities.task import TaskEntity
from taskdeck.domain.entities.user import UserEntity

__all__ = [
    "TaskEntity",
    "UserEntity",
]
