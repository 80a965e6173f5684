"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from taskdeck.application.interfaces import ITaskRepository, IUserRepository
from taskdeck.application.services.user_service import UserService
from taskdeck.application.use_cases.tasks import (
    TaskLifecycleService,
    TaskQueryService,
    TaskStatisticsService,
)

__all__ = [
    "ITaskRepository",
    "IUserRepository",
    "TaskLifecycleService",
    "TaskQueryService",
    "TaskStatisticsService",
    "UserService",
]
