"""Domain layer: snapshot types, ports and the reconciliation engine."""

from __future__ import annotations

from .errors import FetchDecodeError, FetchFailure, FetchTransportError, StoreFailure
from .model import (
    FriendEdge,
    NameChange,
    NameHistoryEntry,
    PersistedProfile,
    ProfileSummary,
    Relationship,
    SnapshotEntry,
    SteamId,
)
from .reconciliation import ReconcileResult, reconcile
from .snapshot import build_snapshot

__all__ = [
    "FetchDecodeError",
    "FetchFailure",
    "FetchTransportError",
    "FriendEdge",
    "NameChange",
    "NameHistoryEntry",
    "PersistedProfile",
    "ProfileSummary",
    "ReconcileResult",
    "Relationship",
    "SnapshotEntry",
    "SteamId",
    "StoreFailure",
    "build_snapshot",
    "reconcile",
]
