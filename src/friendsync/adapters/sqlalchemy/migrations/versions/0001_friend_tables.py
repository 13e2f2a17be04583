"""friend tables

Revision ID: 0001
Revises:
Create Date: 2024-05-04 12:00:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "player_summary",
        sa.Column("steam_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("persona_name", sa.String(), nullable=False),
        sa.Column("profile_url", sa.String(), nullable=False),
        sa.Column("friend_since", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_seen_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("removed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("steam_id", name=op.f("pk_player_summary")),
    )
    op.create_table(
        "name_history",
        sa.Column("steam_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("persona_name", sa.String(), nullable=False),
        sa.Column("observed_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("steam_id", "persona_name", name=op.f("pk_name_history")),
    )


def downgrade() -> None:
    op.drop_table("name_history")
    op.drop_table("player_summary")
