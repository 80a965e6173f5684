"""create task table

Revision ID: 8b2d4e6f1a3c
Revises: 3f1c9a7e2b10
Create Date: 2026-09-02

Owner index and (user_id, status) compound index back the list and
statistics queries. The completed check keeps completed_at set exactly
when status is Completed.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "8b2d4e6f1a3c"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7e2b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "status", sa.String(length=32), nullable=False, server_default="Pending"
        ),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "priority", sa.String(length=16), nullable=False, server_default="Medium"
        ),
        sa.Column(
            "tags", sa.JSON(), nullable=False, server_default=sa.text("'[]'")
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
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
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "status IN ('Pending', 'In Progress', 'Completed')",
            name="ck_task_status",
        ),
        sa.CheckConstraint(
            "priority IN ('Low', 'Medium', 'High')", name="ck_task_priority"
        ),
        sa.CheckConstraint(
            "(status = 'Completed') = (completed_at IS NOT NULL)",
            name="ck_task_completed_at",
        ),
    )
    op.create_index(op.f("ix_task_user_id"), "task", ["user_id"], unique=False)
    op.create_index(op.f("ix_task_deadline"), "task", ["deadline"], unique=False)
    op.create_index("ix_task_user_status", "task", ["user_id", "status"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_task_user_status", table_name="task")
    op.drop_index(op.f("ix_task_deadline"), table_name="task")
    op.drop_index(op.f("ix_task_user_id"), table_name="task")
    op.drop_table("task")
