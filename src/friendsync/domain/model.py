"""Domain types for friend-list snapshots and their persisted state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from datetime import datetime

# 64-bit SteamIDs are a packed structure; we treat them as opaque integers.
SteamId = NewType("SteamId", int)


class Relationship(StrEnum):
    ALL = "all"
    FRIEND = "friend"


@dataclass(frozen=True, slots=True)
class FriendEdge:
    """A link between the root account and a friend, as reported remotely."""

    steam_id: SteamId
    relationship: Relationship
    friend_since: datetime


@dataclass(frozen=True, slots=True)
class ProfileSummary:
    steam_id: SteamId
    persona_name: str
    profile_url: str


@dataclass(frozen=True, slots=True)
class SnapshotEntry:
    """One friend in a snapshot: profile data joined with its friend edge."""

    steam_id: SteamId
    persona_name: str
    profile_url: str
    friend_since: datetime


@dataclass(eq=False, kw_only=True)
class PersistedProfile:
    """Current stored state of a friend. Never physically deleted."""

    steam_id: SteamId
    persona_name: str
    profile_url: str
    friend_since: datetime
    last_seen_at: datetime
    removed_at: datetime | None = None

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None


@dataclass(eq=False, kw_only=True)
class NameHistoryEntry:
    steam_id: SteamId
    persona_name: str
    observed_at: datetime


@dataclass(frozen=True, slots=True)
class NameChange:
    steam_id: SteamId
    previous: str
    current: str
