"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, OwnerMixin, TimestampMixin, and the combined OwnedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from taskdeck.shared.utils.datetime import utc_now
from taskdeck.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class OwnerMixin:
    """Mixin for per-user rows. Provides user_id FK to app_user with CASCADE delete."""

    @declared_attr
    def user_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    Services stamp updated_at explicitly on every write (bulk UPDATE
    statements bypass ORM onupdate).
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )


class OwnedModel(CuidMixin, OwnerMixin, TimestampMixin):
    """Combined mixin: CUID + user_id + created_at/updated_at."""

    __abstract__ = True
