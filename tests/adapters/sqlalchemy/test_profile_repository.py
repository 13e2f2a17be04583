from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect, select, text

from friendsync.adapters.sqlalchemy import name_history_table, player_summary_table
from friendsync.domain.model import SnapshotEntry, SteamId

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine

    from friendsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

T0 = datetime(2024, 2, 1, 8, 30, tzinfo=UTC)
T1 = T0 + timedelta(minutes=5)


def _entry(steam_id: int, name: str) -> SnapshotEntry:
    return SnapshotEntry(
        steam_id=SteamId(steam_id),
        persona_name=name,
        profile_url=f"https://steamcommunity.com/profiles/{steam_id}/",
        friend_since=datetime(2019, 9, 9, tzinfo=UTC),
    )


@pytest.mark.integration
def test_migrated_schema_has_friend_tables(sqlite_engine: Engine) -> None:
    inspector = inspect(sqlite_engine)

    assert {"player_summary", "name_history"} <= set(inspector.get_table_names())
    assert inspector.get_pk_constraint("player_summary")["constrained_columns"] == ["steam_id"]
    assert inspector.get_pk_constraint("name_history")["constrained_columns"] == [
        "steam_id",
        "persona_name",
    ]


@pytest.mark.integration
def test_upsert_profiles_inserts_then_updates(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        assert uow.repositories.profiles.upsert_profiles([_entry(1, "one")], seen_at=T0) == 1
        uow.commit()

    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.upsert_profiles([_entry(1, "uno")], seen_at=T1)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        rows = uow.session.execute(select(player_summary_table)).all()
        profile = uow.repositories.profiles.get(SteamId(1))

    assert len(rows) == 1
    assert profile is not None
    assert profile.persona_name == "uno"
    assert profile.last_seen_at == T1
    assert not profile.is_removed


@pytest.mark.integration
def test_record_names_refreshes_existing_entry(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.record_names([_entry(1, "one")], observed_at=T0)
        uow.repositories.profiles.record_names([_entry(1, "one")], observed_at=T1)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        count = uow.session.execute(
            text("SELECT COUNT(*) FROM name_history WHERE steam_id = 1")
        ).scalar_one()
        history = uow.repositories.profiles.name_history(SteamId(1))
        known = uow.repositories.profiles.known_names([SteamId(1), SteamId(2)])

    assert count == 1
    assert [(entry.persona_name, entry.observed_at) for entry in history] == [("one", T1)]
    assert known == {(SteamId(1), "one")}


@pytest.mark.integration
def test_mark_removed_except_only_touches_active_absent_rows(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.upsert_profiles(
            [_entry(1, "one"), _entry(2, "two"), _entry(3, "three")],
            seen_at=T0,
        )
        uow.commit()

    with sqlite_unit_of_work() as uow:
        first = uow.repositories.profiles.mark_removed_except([SteamId(1)], removed_at=T0)
        second = uow.repositories.profiles.mark_removed_except([SteamId(1)], removed_at=T1)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        active = uow.repositories.profiles.list_profiles(include_removed=False)
        everyone = uow.repositories.profiles.list_profiles()

    assert (first, second) == (2, 0)
    assert [profile.steam_id for profile in active] == [1]
    assert [profile.removed_at for profile in everyone] == [None, T0, T0]


@pytest.mark.integration
def test_mark_removed_except_with_nothing_present_removes_all(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.upsert_profiles([_entry(1, "one"), _entry(2, "two")], seen_at=T0)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        removed = uow.repositories.profiles.mark_removed_except([], removed_at=T1)
        uow.commit()

    assert removed == 2


@pytest.mark.integration
def test_current_names_and_missing_profile(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.upsert_profiles([_entry(7, "seven")], seen_at=T0)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        names = uow.repositories.profiles.current_names([SteamId(7), SteamId(8)])
        missing = uow.repositories.profiles.get(SteamId(8))

    assert names == {SteamId(7): "seven"}
    assert missing is None


@pytest.mark.integration
def test_large_steam_ids_round_trip(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    steam_id = 76561197996714010
    with sqlite_unit_of_work() as uow:
        uow.repositories.profiles.upsert_profiles([_entry(steam_id, "big")], seen_at=T0)
        uow.repositories.profiles.record_names([_entry(steam_id, "big")], observed_at=T0)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        stored = uow.session.execute(select(name_history_table.c.steam_id)).scalar_one()

    assert stored == steam_id
