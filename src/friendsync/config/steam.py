"""Steam Web API configuration values."""

from __future__ import annotations

import getpass
from collections.abc import Callable
from dataclasses import dataclass

from .env import optional_env_var, require_env_var
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

STEAM_BASE_URL = "https://api.steampowered.com/ISteamUser/"
STEAM_TIMEOUT_SECONDS = 10.0
STEAM_USER_AGENT = "friendsync/0.1"
API_KEY_PROMPT = "Enter your Steam API key: "

PromptFunc = Callable[[str], str]


@dataclass(frozen=True)
class SteamConfig:
    """Holds Steam Web API configuration values."""

    api_key: str
    root_steam_id: int
    resilience: ResilienceConfig


def default_steam_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="steam",
        base_url=STEAM_BASE_URL,
        timeout_seconds=STEAM_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
        default_headers={"User-Agent": STEAM_USER_AGENT},
    )


def resolve_api_key(*, prompt: PromptFunc = getpass.getpass) -> str:
    """Read the API key from ``STEAM_API_KEY``, falling back to a masked prompt."""

    api_key = optional_env_var("STEAM_API_KEY")
    if api_key is not None:
        return api_key
    entered = prompt(API_KEY_PROMPT).strip()
    if not entered:
        raise MissingConfigurationError("Missing configuration for: STEAM_API_KEY")
    return entered


def parse_steam_id(value: str) -> int:
    try:
        steam_id = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid Steam ID: {value!r}") from exc
    if steam_id <= 0 or steam_id >= 2**64:
        raise ConfigurationError(f"Steam ID out of range: {value!r}")
    return steam_id


def get_steam_config(
    *,
    prompt: PromptFunc = getpass.getpass,
    resilience: ResilienceConfig | None = None,
) -> SteamConfig:
    root_steam_id = parse_steam_id(require_env_var("STEAM_ROOT_ID"))
    return SteamConfig(
        api_key=resolve_api_key(prompt=prompt),
        root_steam_id=root_steam_id,
        resilience=resilience or default_steam_resilience(),
    )
