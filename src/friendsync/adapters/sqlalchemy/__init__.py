"""SQLAlchemy adapter package: the persisted friend store."""

from __future__ import annotations

from .mappings import (
    mapper_registry,
    metadata,
    name_history_table,
    player_summary_table,
    start_mappers,
)
from .repositories import SqlAlchemyProfileRepository
from .unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup

__all__ = [
    "SqlAlchemyProfileRepository",
    "SqlAlchemyUnitOfWork",
    "mapper_registry",
    "metadata",
    "name_history_table",
    "player_summary_table",
    "shutdown",
    "start_mappers",
    "startup",
]
