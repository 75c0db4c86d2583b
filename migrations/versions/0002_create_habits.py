"""create habits table"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0002_create_habits"
down_revision = "0001_create_tasks"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("recurrence_rule", sa.String(length=20), nullable=True),
        sa.Column("recurrence_interval", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("last_completed_at", sa.DateTime(), nullable=True),
        sa.Column("last_replenished_at", sa.DateTime(), nullable=True),
        sa.Column("alert_hour", sa.Integer(), nullable=True),
        sa.Column("alert_minute", sa.Integer(), nullable=True),
        sa.Column("notification_fired", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("snoozed_until", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("habits")
