#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from friendsync.app import sync_steam_friends
from friendsync.config import ConfigurationError, configure_logging, get_steam_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

DESCRIPTION = (
    "Fetch the Steam friend list of STEAM_ROOT_ID and record removed friends and name "
    "changes. Reads STEAM_API_KEY (prompting if unset), FRIENDSYNC_DATA_DIR and DATABASE_URI "
    "from the environment or a .env file."
)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=DESCRIPTION)
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    _parse_args(args_list)

    try:
        config = get_steam_config()
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        sync_steam_friends(config=config)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
