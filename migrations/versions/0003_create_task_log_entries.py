"""create task log entries table"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0003_create_task_log_entries"
down_revision = "0002_create_habits"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "task_log_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("task_id", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("completed_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("was_overdue", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("completion_duration", sa.Interval(), nullable=True),
    )
    op.create_index(
        "ix_task_log_entries_completed_at", "task_log_entries", ["completed_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_task_log_entries_completed_at", table_name="task_log_entries")
    op.drop_table("task_log_entries")
