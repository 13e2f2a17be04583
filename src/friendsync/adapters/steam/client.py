"""HTTP client for the Steam Web API friend endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from itertools import batched
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx
from pydantic import BaseModel, ValidationError

from friendsync.adapters.http_resilience import ResilienceConfig, ResilientClient
from friendsync.config import SteamConfig, get_steam_config
from friendsync.config.steam import STEAM_BASE_URL
from friendsync.domain.errors import FetchDecodeError, FetchTransportError
from friendsync.domain.snapshot import build_snapshot

from .schema import FriendListResponse, PlayerSummariesResponse
from .translator import parse_friend_edge, parse_profile_summary

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from friendsync.domain.model import FriendEdge, ProfileSummary, SnapshotEntry, SteamId

log = getLogger(__name__)

FRIEND_LIST_PATH: Final[str] = "GetFriendList/v0001/"
PLAYER_SUMMARIES_PATH: Final[str] = "GetPlayerSummaries/v0002/"
# GetPlayerSummaries accepts at most 100 ids per request
PROFILE_BATCH_SIZE: Final[int] = 100


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class SteamFetcher:
    config: SteamConfig = field(default_factory=get_steam_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def fetch_friend_edges(self, root_steam_id: SteamId) -> list[FriendEdge]:
        return asyncio.run(self._fetch_friend_edges_async(root_steam_id))

    def fetch_profiles(self, steam_ids: Sequence[SteamId]) -> list[ProfileSummary]:
        if not steam_ids:
            return []
        return asyncio.run(self._fetch_profiles_async(steam_ids))

    def fetch_snapshot(self, root_steam_id: SteamId) -> tuple[SnapshotEntry, ...]:
        edges = self.fetch_friend_edges(root_steam_id)
        summaries = self.fetch_profiles([edge.steam_id for edge in edges])
        return build_snapshot(edges, summaries)

    async def _fetch_friend_edges_async(self, root_steam_id: SteamId) -> list[FriendEdge]:
        params = httpx.QueryParams(
            {
                "key": self.config.api_key,
                "steamid": str(root_steam_id),
                "relationship": "friend",
            }
        )
        async with self.client_factory(self.config.resilience) as client:
            response = await self._perform_request(
                client=client,
                path=FRIEND_LIST_PATH,
                params=params,
                model=FriendListResponse,
            )
        edges = [parse_friend_edge(friend) for friend in response.friendslist.friends]
        log.info("Fetched %s friend edges for %s", len(edges), root_steam_id)
        return edges

    async def _fetch_profiles_async(self, steam_ids: Sequence[SteamId]) -> list[ProfileSummary]:
        unique_ids = list(dict.fromkeys(steam_ids))
        summaries: list[ProfileSummary] = []
        async with self.client_factory(self.config.resilience) as client:
            for chunk in batched(unique_ids, PROFILE_BATCH_SIZE):
                params = httpx.QueryParams(
                    {
                        "key": self.config.api_key,
                        "steamids": ",".join(str(steam_id) for steam_id in chunk),
                    }
                )
                response = await self._perform_request(
                    client=client,
                    path=PLAYER_SUMMARIES_PATH,
                    params=params,
                    model=PlayerSummariesResponse,
                )
                summaries.extend(
                    parse_profile_summary(player) for player in response.response.players
                )
        log.info("Fetched %s profile summaries for %s ids", len(summaries), len(unique_ids))
        return summaries

    async def _perform_request[TModel: BaseModel](
        self,
        *,
        client: ResilientClient,
        path: str,
        params: httpx.QueryParams,
        model: type[TModel],
    ) -> TModel:
        base_url = self.config.resilience.base_url or STEAM_BASE_URL
        try:
            response = await client.get(f"{base_url}{path}", params=params)
        except httpx.HTTPError as exc:
            raise FetchTransportError(
                f"Steam API request to {path} failed: {exc.__class__.__name__}: {exc}"
            ) from exc

        if response.is_error:
            log.error(f"Steam API returned HTTP {response.status_code} for {path}")
            # the request URL carries the API key, keep it out of the chained traceback
            raise FetchTransportError(
                f"Steam API returned HTTP {response.status_code} for {path}",
                status_code=response.status_code,
            ) from None

        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise FetchDecodeError(f"Unexpected Steam API payload from {path}: {exc}") from exc


if TYPE_CHECKING:
    from friendsync.domain.ports.fetching import SnapshotFetcher

    def _fetcher_check(fetcher: SteamFetcher) -> SnapshotFetcher:
        return fetcher
