"""Persistence repositories. Re-exports for dependency injection."""

from taskdeck.infrastructure.persistence.repositories.base import BaseRepository
from taskdeck.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskdeck.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "TaskRepository",
    "UserRepository",
]
