"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from friendsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyUnitOfWork,
    is_started,
    shutdown,
    startup,
)
from friendsync.adapters.steam import SteamFetcher
from friendsync.config import SteamConfig, get_steam_config
from friendsync.domain.model import SteamId
from friendsync.domain.ports.unit_of_work import ProfileUnitOfWork
from friendsync.domain.reconciliation import ReconcileResult, reconcile

if TYPE_CHECKING:
    from datetime import datetime

    from friendsync.domain.ports.fetching import SnapshotFetcher

UnitOfWorkFactory = Callable[[], ProfileUnitOfWork]


log = getLogger(__name__)


def sync_steam_friends(
    *,
    config: SteamConfig | None = None,
    fetcher: SnapshotFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    now: datetime | None = None,
) -> ReconcileResult:
    """Run one reconciliation pass: fetch the friend list, then apply it to the store."""

    effective_config = config or get_steam_config()
    effective_fetcher = fetcher or SteamFetcher(config=effective_config)
    root_steam_id = SteamId(effective_config.root_steam_id)

    # a caller-supplied factory owns its store; otherwise this pass opens and closes one
    owns_store = unit_of_work_factory is None and not is_started()
    if owns_store:
        startup()
    try:
        log.info("Starting Steam friend sync for %s", root_steam_id)
        snapshot = effective_fetcher.fetch_snapshot(root_steam_id)
        result = reconcile(
            snapshot,
            unit_of_work_factory=unit_of_work_factory or SqlAlchemyUnitOfWork,
            now=now,
        )
    finally:
        if owns_store:
            shutdown()

    log.info(
        "Finished Steam friend sync: friends=%s, removed=%s, new_names=%s, renamed=%s",
        result.upserted,
        result.removed,
        result.names_recorded,
        len(result.renamed),
    )
    return result
