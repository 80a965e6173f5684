"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field

from taskdeck.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Request body for public registration."""

    name: str
    email: EmailStr
    password: str = Field(..., description="Password (min 6 characters)")


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response with the authenticated user."""

    success: bool = True
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
