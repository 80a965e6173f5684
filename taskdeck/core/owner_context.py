"""Owner context for RLS (row-level security).

Middleware sets the current user ID from the bearer token. get_db /
get_db_transactional read it, look up that user's role in app_user, and run
SET LOCAL app.current_user_id / app.current_user_role on the session. The
role is never taken from the token, so a demotion applies to the next request.
"""

from contextvars import ContextVar

# Current owner for the request (set by middleware, read by DB session setup).
current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_owner(user_id: str | None) -> None:
    """Set the current owner's user ID for this context (e.g. request)."""
    current_user_id.set(user_id)


def get_owner_id() -> str | None:
    """Return the current owner's user ID if set."""
    return current_user_id.get()
