"""Profile API: the caller's profile and stats, plus admin user management.

/me routes are declared before /{user_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taskdeck.api.v1.dependencies import (
    AdminUser,
    CurrentUser,
    get_task_statistics_service,
    get_user_service,
    get_user_service_for_write,
)
from taskdeck.application.services.user_service import UserService
from taskdeck.application.use_cases.tasks import TaskStatisticsService
from taskdeck.core.config import get_settings
from taskdeck.core.limiter import limit_writes
from taskdeck.schemas.common import MessageResponse
from taskdeck.schemas.user import (
    AdminProfileUpdateRequest,
    ProfileStatsEnvelope,
    ProfileStatsResponse,
    ProfileUpdateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

router = APIRouter()


@router.get("/me", response_model=UserEnvelope)
async def get_my_profile(
    current_user: CurrentUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Return the caller's profile."""
    user = await user_service.get_profile(current_user.id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.put("/me", response_model=UserEnvelope)
@limit_writes
async def update_my_profile(
    request: Request,
    body: ProfileUpdateRequest,
    current_user: CurrentUser,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Update the caller's name and/or email."""
    user = await user_service.update_me(current_user.id, name=body.name, email=body.email)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/me", response_model=MessageResponse)
@limit_writes
async def deactivate_my_profile(
    request: Request,
    current_user: CurrentUser,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Deactivate the caller's account. Existing tokens stop working."""
    await user_service.deactivate_me(current_user.id)
    return MessageResponse(message="Account deactivated successfully")


@router.get("/me/stats", response_model=ProfileStatsEnvelope)
async def get_my_stats(
    current_user: CurrentUser,
    stats_service: Annotated[
        TaskStatisticsService, Depends(get_task_statistics_service)
    ],
):
    """Task counts for the caller, with completions in the last 7 days."""
    stats = await stats_service.get_profile_stats(current_user.id)
    return ProfileStatsEnvelope(stats=ProfileStatsResponse.from_stats(stats))


@router.get("", response_model=UserListResponse)
async def list_profiles(
    admin: AdminUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
    is_active: bool | None = Query(None),
    page: int = Query(1),
    limit: int | None = Query(None),
):
    """List all users, newest first (admin only)."""
    result = await user_service.list_profiles(
        is_active=is_active,
        page=page,
        limit=limit if limit is not None else get_settings().default_page_size,
    )
    return UserListResponse.from_page(result)


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_profile(
    user_id: str,
    admin: AdminUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get any user's profile (admin only)."""
    user = await user_service.get_profile(user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.put("/{user_id}", response_model=UserEnvelope)
@limit_writes
async def update_profile(
    request: Request,
    user_id: str,
    body: AdminProfileUpdateRequest,
    admin: AdminUser,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Update name, email, role, or active flag of any user (admin only)."""
    user = await user_service.admin_update_profile(user_id, body.to_dto())
    return UserEnvelope(user=UserResponse.model_validate(user))
