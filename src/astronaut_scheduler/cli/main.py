# src/astronaut_scheduler/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import print_ts_block, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=console_level,
        color=settings.log_color,
    )

    logger.debug("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings, emit=print_ts_block)
    try:
        run_console_loop(state)
    finally:
        logger.debug("Bye.")


if __name__ == "__main__":
    main()
