"""Reconcile a freshly fetched snapshot against the persisted friend list.

A pass runs in two steps that commit independently:

1. Soft-delete: every active row whose SteamID is absent from the snapshot gets
   ``removed_at`` and ``last_seen_at`` set. Rows already removed are left alone,
   so repeating a pass never moves ``removed_at``.
2. Upsert, in one transaction: profiles present in the snapshot are inserted or
   refreshed (``friend_since`` is only written on insert, ``removed_at`` is
   cleared), and each observed name is recorded in the name history.

A crash between the steps leaves removals applied and upserts pending; the next
pass reapplies the upserts. An id cannot be both removed and upserted by one
pass because step 1 only touches ids outside the snapshot.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from operator import attrgetter
from typing import TYPE_CHECKING

from friendsync.domain.model import NameChange

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from friendsync.domain.model import SnapshotEntry
    from friendsync.domain.ports.unit_of_work import ProfileUnitOfWork

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of a reconciliation pass."""

    removed: int
    upserted: int
    names_recorded: int
    renamed: tuple[NameChange, ...] = ()


def reconcile(
    snapshot: Iterable[SnapshotEntry],
    *,
    unit_of_work_factory: Callable[[], ProfileUnitOfWork],
    now: datetime | None = None,
) -> ReconcileResult:
    """Apply ``snapshot`` to the store and return a summary of the changes."""

    entries = sorted(snapshot, key=attrgetter("steam_id"))
    _require_unique(entries)
    timestamp = _as_utc(now) if now is not None else datetime.now(UTC)
    present = [entry.steam_id for entry in entries]

    if not entries:
        log.warning("Empty snapshot: every active friend will be marked removed")

    with unit_of_work_factory() as uow:
        removed = uow.repositories.profiles.mark_removed_except(present, removed_at=timestamp)
        uow.commit()
    if removed:
        log.info("Marked %s friends as removed", removed)

    if not entries:
        return ReconcileResult(removed=removed, upserted=0, names_recorded=0)

    with unit_of_work_factory() as uow:
        profiles = uow.repositories.profiles
        previous_names = profiles.current_names(present)
        known_names = profiles.known_names(present)
        upserted = profiles.upsert_profiles(entries, seen_at=timestamp)
        profiles.record_names(entries, observed_at=timestamp)
        uow.commit()

    renamed = tuple(
        NameChange(
            steam_id=entry.steam_id,
            previous=previous_names[entry.steam_id],
            current=entry.persona_name,
        )
        for entry in entries
        if entry.steam_id in previous_names
        and previous_names[entry.steam_id] != entry.persona_name
    )
    for change in renamed:
        log.info("Name change for %s: %r -> %r", change.steam_id, change.previous, change.current)

    names_recorded = sum(
        1 for entry in entries if (entry.steam_id, entry.persona_name) not in known_names
    )
    return ReconcileResult(
        removed=removed,
        upserted=upserted,
        names_recorded=names_recorded,
        renamed=renamed,
    )


def _require_unique(entries: list[SnapshotEntry]) -> None:
    counts = Counter(entry.steam_id for entry in entries)
    duplicates = sorted(steam_id for steam_id, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"Snapshot contains duplicate SteamIDs: {duplicates}")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
