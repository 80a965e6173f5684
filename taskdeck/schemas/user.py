"""User and profile API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr

from taskdeck.application.dtos.stats import ProfileStats
from taskdeck.application.dtos.user import UserPage, UserProfileUpdate


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime | None = None


class UserEnvelope(BaseModel):
    success: bool = True
    user: UserResponse


class ProfileUpdateRequest(BaseModel):
    """Request body for updating the caller's profile (partial)."""

    name: str | None = None
    email: EmailStr | None = None

    def to_dto(self) -> UserProfileUpdate:
        return UserProfileUpdate(name=self.name, email=self.email)


class AdminProfileUpdateRequest(BaseModel):
    """Request body for an admin updating any profile (partial)."""

    name: str | None = None
    email: EmailStr | None = None
    role: str | None = None
    is_active: bool | None = None

    def to_dto(self) -> UserProfileUpdate:
        return UserProfileUpdate(**self.model_dump())


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    total: int
    page: int
    limit: int
    users: list[UserResponse]

    @classmethod
    def from_page(cls, page: UserPage) -> "UserListResponse":
        return cls(
            count=len(page.items),
            total=page.total,
            page=page.page,
            limit=page.limit,
            users=[UserResponse.model_validate(u) for u in page.items],
        )


class ProfileStatsResponse(BaseModel):
    total: int
    pending: int
    in_progress: int
    completed: int
    overdue: int
    due_this_week: int
    recent_completions: int

    @classmethod
    def from_stats(cls, stats: ProfileStats) -> "ProfileStatsResponse":
        return cls(
            total=stats.total,
            pending=stats.pending,
            in_progress=stats.in_progress,
            completed=stats.completed,
            overdue=stats.overdue,
            due_this_week=stats.due_this_week,
            recent_completions=stats.recent_completions,
        )


class ProfileStatsEnvelope(BaseModel):
    success: bool = True
    stats: ProfileStatsResponse
