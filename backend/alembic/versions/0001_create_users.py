"""create users

Revision ID: 0001_create_users
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision = "0001_create_users"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
    )
    op.create_index("ix_users_age", "users", ["age"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_users_age", table_name="users")
    op.drop_table("users")
