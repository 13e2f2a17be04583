"""Public interface for the Steam Web API adapter."""

from __future__ import annotations

from .client import PROFILE_BATCH_SIZE, SteamFetcher
from .schema import (
    FriendListResponse,
    FriendPayload,
    PlayerSummariesResponse,
    PlayerSummaryPayload,
)
from .translator import parse_friend_edge, parse_profile_summary

__all__ = [
    "PROFILE_BATCH_SIZE",
    "FriendListResponse",
    "FriendPayload",
    "PlayerSummariesResponse",
    "PlayerSummaryPayload",
    "SteamFetcher",
    "parse_friend_edge",
    "parse_profile_summary",
]
