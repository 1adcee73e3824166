# src/astronaut_scheduler/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the one ScheduleManager for this process,
- attaches a console notifier for every configured crew member.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..core.state import AppState
from ..schedule.schedule_manager import ScheduleManager

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, emit: Callable[[str], None] | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, manager=ScheduleManager())
    if emit is not None:
        state.emit = emit

    for name in getattr(settings, "crew", []) or []:
        state.watch(name)

    logger.debug("State ready: crew=%s", ", ".join(n.name for n in state.notifiers.values()))
    return state
