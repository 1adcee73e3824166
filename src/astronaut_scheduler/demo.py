# src/astronaut_scheduler/demo.py

"""
Scripted sample day.

Replays the classic walkthrough: two tasks are added, a third one collides
with "Team Meeting" (Neil is notified), then one valid and one invalid removal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .cli.commands import render_schedule
from .core.state import AppState
from .schedule.results import Err
from .schedule.task_factory import create_task
from .schedule.task_models import Priority

logger = logging.getLogger(__name__)

DEMO_TASKS = [
    ("Morning Exercise", "07:00", "08:00", Priority.HIGH),
    ("Team Meeting", "09:00", "10:00", Priority.MEDIUM),
]
DEMO_CONFLICT = ("Training Session", "09:30", "10:30", Priority.HIGH)


def _schedule(state: AppState, description: str, start: str, end: str, priority: str) -> bool:
    built = create_task(description, start, end, priority)
    if isinstance(built, Err):
        logger.error("%s", built.error.message)
        return False
    added = state.manager.add_task(built.value)
    if isinstance(added, Err):
        logger.error("%s", added.error.message)
        return False
    return True


def _remove(state: AppState, description: str) -> bool:
    removed = state.manager.remove_task(description)
    if isinstance(removed, Err):
        logger.error("%s", removed.error.message)
        return False
    return True


def run_demo(state: AppState, emit: Callable[[str], None] = print) -> None:
    # Neil only watches for the duration of the demo unless he was already watching.
    joined = state.watch("Neil")
    try:
        _run_steps(state, emit)
    finally:
        if joined:
            state.unwatch("Neil")


def _run_steps(state: AppState, emit: Callable[[str], None]) -> None:
    for description, start, end, priority in DEMO_TASKS:
        _schedule(state, description, start, end, priority)

    emit("-- Current Tasks --")
    emit(render_schedule(state))

    _schedule(state, *DEMO_CONFLICT)

    emit("-- Remove Task Example --")
    if _remove(state, "Morning Exercise"):
        emit(render_schedule(state))

    emit("-- Invalid Removal --")
    _remove(state, "Non-existent Task")
