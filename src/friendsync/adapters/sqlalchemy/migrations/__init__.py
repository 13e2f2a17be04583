"""Utilities for managing Alembic migrations within the SQLAlchemy adapter."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from sqlalchemy.exc import SQLAlchemyError

from friendsync.config import get_database_config
from friendsync.domain.errors import StoreFailure

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = getLogger(__name__)


def _build_config() -> Config:
    """Return an Alembic Config pointing at the packaged migration scripts."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    return config


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Upgrade the database schema to the latest revision."""

    config = _build_config()
    if engine is not None:
        with engine.begin() as connection:
            config.attributes["connection"] = connection
            command.upgrade(config, "head")
        return
    config.set_main_option("sqlalchemy.url", database_uri or get_database_config().uri)
    command.upgrade(config, "head")


def ensure_schema(engine: Engine) -> None:
    """Create or upgrade the friend tables; safe to call on every start."""

    try:
        upgrade_head(engine=engine)
    except (SQLAlchemyError, CommandError) as exc:
        raise StoreFailure(f"Could not prepare database schema: {exc}") from exc
    log.debug("Database schema at head for %s", engine.url)
