"""Pydantic request/response schemas for the API."""

from taskdeck.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from taskdeck.schemas.common import ErrorResponse, MessageResponse
from taskdeck.schemas.health import HealthResponse, ReadinessResponse
from taskdeck.schemas.task import (
    BulkStatusUpdateRequest,
    BulkStatusUpdateResponse,
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskStatsEnvelope,
    TaskUpdateRequest,
)
from taskdeck.schemas.user import (
    AdminProfileUpdateRequest,
    ProfileStatsEnvelope,
    ProfileUpdateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "AdminProfileUpdateRequest",
    "BulkStatusUpdateRequest",
    "BulkStatusUpdateResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProfileStatsEnvelope",
    "ProfileUpdateRequest",
    "ReadinessResponse",
    "RegisterRequest",
    "TaskCreateRequest",
    "TaskEnvelope",
    "TaskListResponse",
    "TaskResponse",
    "TaskStatsEnvelope",
    "TaskUpdateRequest",
    "TokenResponse",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
]
