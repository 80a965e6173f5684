"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskdeck.domain.entities import TaskEntity, UserEntity
from taskdeck.domain.enums import TaskPriority, TaskStatus, UserRole
from taskdeck.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    TaskdeckException,
    ValidationException,
)
from taskdeck.domain.value_objects import (
    PersonName,
    TaskDescription,
    TaskTags,
    TaskTitle,
)

__all__ = [
    # Entities
    "TaskEntity",
    "UserEntity",
    # Enums
    "TaskPriority",
    "TaskStatus",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "ResourceNotFoundException",
    "TaskdeckException",
    "ValidationException",
    # Value objects
    "PersonName",
    "TaskDescription",
    "TaskTags",
    "TaskTitle",
]
