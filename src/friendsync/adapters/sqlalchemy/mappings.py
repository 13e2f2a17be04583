"""
SQLAlchemy tables and imperative mappings for persisted friend state.
Timestamps are stored as naive UTC and come back timezone-aware.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import cache

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Dialect,
    String,
    Table,
    TypeDecorator,
    orm,
)

from friendsync.domain.model import NameHistoryEntry, PersistedProfile

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
metadata = mapper_registry.metadata

player_summary_table = Table(
    "player_summary",
    metadata,
    Column("steam_id", BigInteger, primary_key=True, autoincrement=False),
    Column("persona_name", String, nullable=False),
    Column("profile_url", String, nullable=False),
    Column("friend_since", UTCDateTime, nullable=False),
    Column("last_seen_at", UTCDateTime, nullable=False),
    Column("removed_at", UTCDateTime, nullable=True),
)

# one row per distinct name ever seen for a friend
name_history_table = Table(
    "name_history",
    metadata,
    Column("steam_id", BigInteger, primary_key=True, autoincrement=False),
    Column("persona_name", String, primary_key=True),
    Column("observed_at", UTCDateTime, nullable=False),
)


@cache
def start_mappers() -> orm.registry:
    """Map the domain read models onto their tables."""

    log.info("Starting SQLAlchemy mappers")
    mapper_registry.map_imperatively(PersistedProfile, player_summary_table)
    mapper_registry.map_imperatively(NameHistoryEntry, name_history_table)
    return mapper_registry
