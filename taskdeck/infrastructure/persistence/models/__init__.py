"""Persistence models: ORM entities and mixins."""

from taskdeck.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OwnedModel,
    OwnerMixin,
    TimestampMixin,
)
from taskdeck.infrastructure.persistence.models.task import Task
from taskdeck.infrastructure.persistence.models.user import User

__all__ = [
    "Task",
    "User",
    "CuidMixin",
    "OwnerMixin",
    "TimestampMixin",
    "OwnedModel",
]
