"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskdeck.shared.utils import (
    days_ago,
    days_ahead,
    ensure_utc,
    generate_cuid,
    utc_now,
)

__all__ = [
    "days_ago",
    "days_ahead",
    "ensure_utc",
    "generate_cuid",
    "utc_now",
]
