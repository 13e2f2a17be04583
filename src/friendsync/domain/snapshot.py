"""Assemble a snapshot from the friend edges and profile summaries of one fetch."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from friendsync.domain.model import SnapshotEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from friendsync.domain.model import FriendEdge, ProfileSummary, SteamId

log = getLogger(__name__)


def build_snapshot(
    edges: Iterable[FriendEdge],
    summaries: Iterable[ProfileSummary],
) -> tuple[SnapshotEntry, ...]:
    """Join edges and summaries on SteamID, one entry per friend, sorted by id.

    The first edge seen for an id wins; the last summary seen for an id wins.
    Ids missing from either side are dropped.
    """

    edges_by_id: dict[SteamId, FriendEdge] = {}
    for edge in edges:
        edges_by_id.setdefault(edge.steam_id, edge)
    summaries_by_id: dict[SteamId, ProfileSummary] = {
        summary.steam_id: summary for summary in summaries
    }

    missing_summaries = edges_by_id.keys() - summaries_by_id.keys()
    if missing_summaries:
        log.warning(
            "Skipping %s friends without a profile summary: %s",
            len(missing_summaries),
            sorted(missing_summaries),
        )
    unexpected = summaries_by_id.keys() - edges_by_id.keys()
    if unexpected:
        log.warning(
            "Ignoring %s profile summaries with no friend edge: %s",
            len(unexpected),
            sorted(unexpected),
        )

    entries: list[SnapshotEntry] = []
    for steam_id in sorted(edges_by_id.keys() & summaries_by_id.keys()):
        edge = edges_by_id[steam_id]
        summary = summaries_by_id[steam_id]
        entries.append(
            SnapshotEntry(
                steam_id=steam_id,
                persona_name=summary.persona_name,
                profile_url=summary.profile_url,
                friend_since=edge.friend_since,
            )
        )
    return tuple(entries)
