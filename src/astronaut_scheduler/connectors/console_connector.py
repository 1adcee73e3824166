# src/astronaut_scheduler/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def print_ts_block(text: str) -> None:
    ts = _ts_local()
    lines = text.splitlines() or [""]
    for i, line in enumerate(lines):
        # keep nice alignment for multi-line command output
        prefix = f"[{ts}] " if i == 0 else " " * (len(ts) + 3)
        print(prefix + line, flush=True)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (crew=%d).", len(state.notifiers))
    print_ts_block("[CONSOLE] Manage today's schedule. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.debug("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.debug("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.debug("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, emit=print_ts_block)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."

        print_ts_block(reply)

    logger.debug("Console connector finished.")
