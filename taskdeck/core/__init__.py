"""Core: config, owner context, and application bootstrap.

Single place for settings and request-scoped context.
"""

from taskdeck.core.config import Settings, get_settings
from taskdeck.core.owner_context import get_owner_id, set_owner

__all__ = [
    "Settings",
    "get_owner_id",
    "get_settings",
    "set_owner",
]
