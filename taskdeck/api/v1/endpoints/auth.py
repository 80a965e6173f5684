"""Auth API: register, login, and current user.

Routes delegate to UserService; domain exceptions are mapped to HTTP by the
registered exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from taskdeck.api.v1.dependencies import (
    CurrentUser,
    get_user_service,
    get_user_service_for_write,
)
from taskdeck.application.services.user_service import UserService
from taskdeck.core.limiter import limit_auth
from taskdeck.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from taskdeck.schemas.user import UserEnvelope, UserResponse

router = APIRouter()


@router.post("/register", response_model=UserEnvelope, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Register a new user (public endpoint). Email must be unused."""
    user = await user_service.register(
        name=body.name, email=body.email, password=body.password
    )
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Authenticate with email and password; return a bearer JWT."""
    token = await user_service.login(body.email, body.password)
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        user=UserResponse.model_validate(token.user),
    )


@router.get("/me", response_model=UserEnvelope)
async def get_me(current_user: CurrentUser):
    """Return the currently authenticated user.

    Requires Authorization: Bearer <token>.
    """
    return UserEnvelope(user=UserResponse.model_validate(current_user))
