"""Translate Steam payloads into domain types."""

from __future__ import annotations

from friendsync.domain.model import FriendEdge, ProfileSummary, SteamId

from .schema import (
    FriendPayload,
    FriendPayloadInput,
    PlayerSummaryPayload,
    PlayerSummaryPayloadInput,
)


def parse_friend_edge(payload: FriendPayloadInput) -> FriendEdge:
    model = payload if isinstance(payload, FriendPayload) else FriendPayload.model_validate(payload)
    return FriendEdge(
        steam_id=SteamId(model.steam_id),
        relationship=model.relationship,
        friend_since=model.friend_since,
    )


def parse_profile_summary(payload: PlayerSummaryPayloadInput) -> ProfileSummary:
    model = (
        payload
        if isinstance(payload, PlayerSummaryPayload)
        else PlayerSummaryPayload.model_validate(payload)
    )
    return ProfileSummary(
        steam_id=SteamId(model.steam_id),
        persona_name=model.persona_name,
        profile_url=model.profile_url,
    )
