"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite

from friendsync.adapters.sqlalchemy.mappings import name_history_table, player_summary_table
from friendsync.domain.errors import StoreFailure
from friendsync.domain.model import NameHistoryEntry, PersistedProfile, SteamId

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Sequence
    from datetime import datetime

    from sqlalchemy import CursorResult, Table
    from sqlalchemy.orm import Session

    from friendsync.domain.model import SnapshotEntry


def _dialect_insert(session: Session) -> Callable[[Table], sqlite.Insert | postgresql.Insert]:
    dialect = session.get_bind().dialect.name
    if dialect == "sqlite":
        return sqlite.insert
    if dialect == "postgresql":
        return postgresql.insert
    raise StoreFailure(f"Upserts are not supported on dialect {dialect!r}")


class SqlAlchemyProfileRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def mark_removed_except(self, present: Collection[SteamId], *, removed_at: datetime) -> int:
        stmt = (
            update(player_summary_table)
            .where(player_summary_table.c.removed_at.is_(None))
            .where(player_summary_table.c.steam_id.not_in(sorted(present)))
            .values(removed_at=removed_at, last_seen_at=removed_at)
        )
        result = cast("CursorResult[tuple[()]]", self.session.execute(stmt))
        return result.rowcount

    def upsert_profiles(self, entries: Sequence[SnapshotEntry], *, seen_at: datetime) -> int:
        if not entries:
            return 0
        stmt = _dialect_insert(self.session)(player_summary_table)
        stmt = stmt.on_conflict_do_update(
            index_elements=[player_summary_table.c.steam_id],
            set_={
                "persona_name": stmt.excluded.persona_name,
                "profile_url": stmt.excluded.profile_url,
                "last_seen_at": stmt.excluded.last_seen_at,
                "removed_at": None,
            },
        )
        rows = [
            {
                "steam_id": entry.steam_id,
                "persona_name": entry.persona_name,
                "profile_url": entry.profile_url,
                "friend_since": entry.friend_since,
                "last_seen_at": seen_at,
                "removed_at": None,
            }
            for entry in entries
        ]
        self.session.execute(stmt, rows)
        return len(rows)

    def record_names(self, entries: Sequence[SnapshotEntry], *, observed_at: datetime) -> int:
        if not entries:
            return 0
        stmt = _dialect_insert(self.session)(name_history_table)
        stmt = stmt.on_conflict_do_update(
            index_elements=[name_history_table.c.steam_id, name_history_table.c.persona_name],
            set_={"observed_at": stmt.excluded.observed_at},
        )
        rows = [
            {
                "steam_id": entry.steam_id,
                "persona_name": entry.persona_name,
                "observed_at": observed_at,
            }
            for entry in entries
        ]
        self.session.execute(stmt, rows)
        return len(rows)

    def current_names(self, steam_ids: Collection[SteamId]) -> dict[SteamId, str]:
        if not steam_ids:
            return {}
        stmt = select(player_summary_table.c.steam_id, player_summary_table.c.persona_name).where(
            player_summary_table.c.steam_id.in_(sorted(steam_ids))
        )
        return {SteamId(steam_id): name for steam_id, name in self.session.execute(stmt)}

    def known_names(self, steam_ids: Collection[SteamId]) -> set[tuple[SteamId, str]]:
        if not steam_ids:
            return set()
        stmt = select(name_history_table.c.steam_id, name_history_table.c.persona_name).where(
            name_history_table.c.steam_id.in_(sorted(steam_ids))
        )
        return {(SteamId(steam_id), name) for steam_id, name in self.session.execute(stmt)}

    def get(self, steam_id: SteamId) -> PersistedProfile | None:
        return self.session.get(PersistedProfile, steam_id)

    def list_profiles(self, *, include_removed: bool = True) -> list[PersistedProfile]:
        stmt = select(PersistedProfile).order_by(player_summary_table.c.steam_id)
        if not include_removed:
            stmt = stmt.where(player_summary_table.c.removed_at.is_(None))
        return list(self.session.execute(stmt).scalars())

    def name_history(self, steam_id: SteamId) -> list[NameHistoryEntry]:
        stmt = (
            select(NameHistoryEntry)
            .where(name_history_table.c.steam_id == steam_id)
            .order_by(name_history_table.c.observed_at, name_history_table.c.persona_name)
        )
        return list(self.session.execute(stmt).scalars())


if TYPE_CHECKING:
    from friendsync.domain.ports.persistence import ProfileRepository

    def _repository_check(session: Session) -> ProfileRepository:
        return SqlAlchemyProfileRepository(session)
