"""Application services (cross-use-case orchestration)."""

from taskdeck.application.services.user_service import UserService

__all__ = ["UserService"]
