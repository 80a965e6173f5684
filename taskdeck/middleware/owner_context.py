"""Owner context middleware for RLS.

Decodes the bearer token (when present and valid) and stores the user id in
the owner context. Database sessions resolve the user's current role from
app_user before running SET LOCAL. Authentication itself is enforced by route
dependencies, not here.
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from taskdeck.core.owner_context import set_owner
from taskdeck.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)


def _owner_id_from_request(request: Request) -> str | None:
    """Return the subject of a valid bearer token, else None."""
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        return None
    try:
        payload = verify_token(auth[7:].strip())
    except ValueError:
        logger.debug("Ignoring invalid bearer token for owner context")
        return None
    return payload.get("sub")


class OwnerContextMiddleware(BaseHTTPMiddleware):
    """Set owner context (for RLS) from the JWT subject before the route runs."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_owner(_owner_id_from_request(request))
        try:
            return await call_next(request)
        finally:
            set_owner(None)
