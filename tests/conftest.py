# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from astronaut_scheduler.core.state import AppState
from astronaut_scheduler.schedule.schedule_manager import ScheduleManager
from astronaut_scheduler.schedule.task_factory import create_task
from astronaut_scheduler.schedule.task_models import Task

from .fakes import RecordingLog


def make_task(description: str, start: str, end: str, priority: str = "Medium") -> Task:
    result = create_task(description, start, end, priority)
    assert result.ok, result
    return result.value


@pytest.fixture()
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture()
def manager(log: RecordingLog) -> ScheduleManager:
    return ScheduleManager(log=log)


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="astronaut-scheduler",
        crew=[],
        default_priority="Medium",
    )


@pytest.fixture()
def emitted() -> list[str]:
    return []


@pytest.fixture()
def state(settings: SimpleNamespace, log: RecordingLog, emitted: list[str]) -> AppState:
    return AppState(settings=settings, manager=ScheduleManager(log=log), emit=emitted.append)
