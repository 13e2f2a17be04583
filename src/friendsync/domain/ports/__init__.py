"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import SnapshotFetcher
from .persistence import ProfileRepository
from .unit_of_work import ProfileRepositories, ProfileUnitOfWork

__all__ = [
    "ProfileRepositories",
    "ProfileRepository",
    "ProfileUnitOfWork",
    "SnapshotFetcher",
]
