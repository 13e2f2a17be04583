"""Ports for fetching friend-list snapshots from an external provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from friendsync.domain.model import FriendEdge, ProfileSummary, SnapshotEntry, SteamId


@runtime_checkable
class SnapshotFetcher(Protocol):
    """Retrieves the friend list and profile summaries for a root identity.

    Implementations raise :class:`friendsync.domain.errors.FetchFailure` on any
    transport or decode problem and never retry internally.
    """

    def fetch_friend_edges(self, root_steam_id: SteamId) -> Sequence[FriendEdge]: ...

    def fetch_profiles(self, steam_ids: Sequence[SteamId]) -> Sequence[ProfileSummary]: ...

    def fetch_snapshot(self, root_steam_id: SteamId) -> tuple[SnapshotEntry, ...]: ...


__all__ = ["SnapshotFetcher"]
