"""Pydantic models describing the Steam Web API payloads we consume."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from friendsync.domain.model import Relationship


def _parse_steam_id(value: object) -> object:
    # SteamIDs arrive as decimal strings
    if isinstance(value, str):
        return int(value.strip())
    return value


class SteamBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# https://developer.valvesoftware.com/wiki/Steam_Web_API#GetFriendList_.28v0001.29
class FriendPayload(SteamBaseModel):
    steam_id: int = Field(alias="steamid", gt=0, lt=2**64)
    relationship: Relationship
    friend_since: datetime

    _normalize_steam_id = field_validator("steam_id", mode="before")(_parse_steam_id)

    @field_validator("friend_since", mode="before")
    @classmethod
    def _parse_epoch(cls, value: int | str) -> datetime:
        try:
            return datetime.fromtimestamp(int(value), tz=UTC)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"friend_since out of range: {value}") from exc


class FriendsList(SteamBaseModel):
    friends: list[FriendPayload] = Field(default_factory=list[FriendPayload])


class FriendListResponse(SteamBaseModel):
    friendslist: FriendsList


# There is much more in a summary than this; name and URL are all we track.
# https://developer.valvesoftware.com/wiki/Steam_Web_API#GetPlayerSummaries_.28v0002.29
class PlayerSummaryPayload(SteamBaseModel):
    steam_id: int = Field(alias="steamid", gt=0, lt=2**64)
    persona_name: str = Field(alias="personaname")
    profile_url: str = Field(alias="profileurl")

    _normalize_steam_id = field_validator("steam_id", mode="before")(_parse_steam_id)


class Players(SteamBaseModel):
    players: list[PlayerSummaryPayload] = Field(default_factory=list[PlayerSummaryPayload])


class PlayerSummariesResponse(SteamBaseModel):
    response: Players


FriendPayloadInput = FriendPayload | Mapping[str, object]
PlayerSummaryPayloadInput = PlayerSummaryPayload | Mapping[str, object]
