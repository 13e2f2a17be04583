from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from friendsync.adapters.steam import (
    FriendListResponse,
    PlayerSummariesResponse,
    parse_friend_edge,
    parse_profile_summary,
)
from friendsync.domain.model import Relationship


def test_parse_friend_edge_converts_ids_and_timestamps() -> None:
    edge = parse_friend_edge(
        {"steamid": "76561197960287930", "relationship": "friend", "friend_since": 1577836800}
    )

    assert edge.steam_id == 76561197960287930
    assert edge.relationship is Relationship.FRIEND
    assert edge.friend_since == datetime(2020, 1, 1, tzinfo=UTC)


def test_parse_profile_summary_ignores_extra_fields() -> None:
    summary = parse_profile_summary(
        {
            "steamid": "76561197960287930",
            "personaname": "Robin",
            "profileurl": "https://steamcommunity.com/id/robinwalker/",
            "avatar": "https://example.invalid/avatar.jpg",
            "communityvisibilitystate": 3,
        }
    )

    assert summary.steam_id == 76561197960287930
    assert summary.persona_name == "Robin"
    assert summary.profile_url == "https://steamcommunity.com/id/robinwalker/"


def test_friend_list_without_friends_is_empty() -> None:
    response = FriendListResponse.model_validate({"friendslist": {}})

    assert response.friendslist.friends == []


def test_player_summaries_require_response_envelope() -> None:
    with pytest.raises(ValidationError):
        PlayerSummariesResponse.model_validate({"players": []})


def test_non_numeric_steam_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_friend_edge({"steamid": "robin", "relationship": "friend", "friend_since": 0})


def test_unknown_relationship_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_friend_edge({"steamid": "1", "relationship": "blocked", "friend_since": 0})
