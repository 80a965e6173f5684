"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.). No password."""

    id: str
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class UserProfileUpdate:
    """Partial profile update. None means leave the field unchanged.

    role and is_active are honored only for admin updates.
    """

    name: str | None = None
    email: str | None = None
    role: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class UserPage:
    """One page of users (admin listing)."""

    items: list[UserResult]
    total: int
    page: int
    limit: int


@dataclass(frozen=True)
class AccessToken:
    """Issued bearer token and the user it belongs to."""

    access_token: str
    expires_in: int
    user: UserResult
    token_type: str = "bearer"
