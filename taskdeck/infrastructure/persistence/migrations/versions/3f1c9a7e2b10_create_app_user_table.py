"""create app_user table

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-09-02

Users own tasks. Email is unique and stored lowercased; users are
deactivated (is_active = false), never hard-deleted by the API.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "3f1c9a7e2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="user"),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_app_user_email"),
        sa.CheckConstraint("role IN ('user', 'admin')", name="ck_app_user_role"),
    )


def downgrade() -> None:
    op.drop_table("app_user")
