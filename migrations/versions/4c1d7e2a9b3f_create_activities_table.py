"""create_activities_table

Revision ID: 4c1d7e2a9b3f
Revises:
Create Date: 2026-03-14 10:12:41.518203

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1d7e2a9b3f"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create activities table."""
    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("minutes", sa.BigInteger(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("minutes >= 0", name="ck_activities_minutes_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Index for activity lists filtered by day
    op.create_index("ix_activities_date", "activities", ["date"], unique=False)


def downgrade() -> None:
    """Drop activities table."""
    op.drop_index("ix_activities_date", table_name="activities")
    op.drop_table("activities")
