"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .steam import (
    SteamConfig,
    default_steam_resilience,
    get_steam_config,
    parse_steam_id,
    resolve_api_key,
)
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "SteamConfig",
    "StorageConfig",
    "configure_logging",
    "default_steam_resilience",
    "get_database_config",
    "get_steam_config",
    "get_storage_config",
    "optional_env_var",
    "parse_steam_id",
    "require_env_var",
    "require_env_vars",
    "resolve_api_key",
]
