"""Ports for persisting friend-list state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence
    from datetime import datetime

    from friendsync.domain.model import (
        NameHistoryEntry,
        PersistedProfile,
        SnapshotEntry,
        SteamId,
    )


@runtime_checkable
class ProfileRepository(Protocol):
    """Persistence contract for current profile state and name history."""

    def mark_removed_except(self, present: Collection[SteamId], *, removed_at: datetime) -> int:
        """Soft-delete every active row whose id is not in ``present``."""
        ...

    def upsert_profiles(self, entries: Sequence[SnapshotEntry], *, seen_at: datetime) -> int: ...

    def record_names(self, entries: Sequence[SnapshotEntry], *, observed_at: datetime) -> int: ...

    def current_names(self, steam_ids: Collection[SteamId]) -> dict[SteamId, str]: ...

    def known_names(self, steam_ids: Collection[SteamId]) -> set[tuple[SteamId, str]]: ...

    def get(self, steam_id: SteamId) -> PersistedProfile | None: ...

    def list_profiles(self, *, include_removed: bool = True) -> list[PersistedProfile]: ...

    def name_history(self, steam_id: SteamId) -> list[NameHistoryEntry]: ...
