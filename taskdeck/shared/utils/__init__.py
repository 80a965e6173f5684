"""Shared utilities: datetime and generators."""

from taskdeck.shared.utils.datetime import days_ago, days_ahead, ensure_utc, utc_now
from taskdeck.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "days_ago",
    "days_ahead",
]
