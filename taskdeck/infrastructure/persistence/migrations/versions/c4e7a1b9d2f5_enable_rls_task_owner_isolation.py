"""enable RLS for task owner isolation

Revision ID: c4e7a1b9d2f5
Revises: 8b2d4e6f1a3c
Create Date: 2026-09-02

Policy: task rows are visible only when user_id equals
current_setting('app.current_user_id'), unless app.current_user_role is
'admin'. The application sets both with SET LOCAL at the start of each
request session (from the JWT). Migrations and admin scripts should use a DB
role with BYPASSRLS; the app role must not.
"""

from typing import Sequence, Union

from alembic import op

revision: str = "c4e7a1b9d2f5"
down_revision: Union[str, Sequence[str], None] = "8b2d4e6f1a3c"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_OWNER_OR_ADMIN = (
    "(user_id = current_setting('app.current_user_id', true) "
    "OR current_setting('app.current_user_role', true) = 'admin')"
)


def upgrade() -> None:
    op.execute("ALTER TABLE task ENABLE ROW LEVEL SECURITY")
    op.execute(
        "CREATE POLICY task_owner_isolation ON task "
        f"USING {_OWNER_OR_ADMIN} "
        f"WITH CHECK {_OWNER_OR_ADMIN}"
    )


def downgrade() -> None:
    op.execute("DROP POLICY IF EXISTS task_owner_isolation ON task")
    op.execute("ALTER TABLE task DISABLE ROW LEVEL SECURITY")
