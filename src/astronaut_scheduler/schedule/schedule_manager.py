# src/astronaut_scheduler/schedule/schedule_manager.py

from __future__ import annotations

"""
Schedule manager.

Owns the day's task list and the observer registry:
- tasks are kept sorted by start time,
- a task that strictly overlaps a stored one is rejected (observers are told why),
- add/remove/attach/detach/notify each run under one lock, so the conflict
  check and the insert are a single atomic step.

Observers are referenced weakly; the manager never keeps a listener alive.
"""

import logging
import threading
import weakref
from collections.abc import Iterator

from ..core.ports import LogSink, ObserverSink
from .results import ErrorKind, Ok, Result, err
from .task_models import Task

logger = logging.getLogger(__name__)


class ScheduleManager:
    def __init__(self, log: LogSink | None = None) -> None:
        self._log: LogSink = log if log is not None else logger
        self._tasks: list[Task] = []
        self._observers: list[weakref.ref[ObserverSink]] = []
        self._lock = threading.RLock()

    # ---- observers ----

    def attach(self, observer: ObserverSink) -> None:
        with self._lock:
            self._observers.append(weakref.ref(observer))
        logger.debug("Observer attached: %r", observer)

    def detach(self, observer: ObserverSink) -> None:
        """Remove the first registration of `observer`. No-op if it is not attached."""
        with self._lock:
            for i, ref in enumerate(self._observers):
                if ref() is observer:
                    del self._observers[i]
                    logger.debug("Observer detached: %r", observer)
                    return

    def observers(self) -> list[ObserverSink]:
        with self._lock:
            return self._live_observers()

    def notify(self, message: str) -> None:
        """Deliver `message` to every attached observer, in attachment order."""
        with self._lock:
            for obs in self._live_observers():
                obs.update(message)

    def _live_observers(self) -> list[ObserverSink]:
        live: list[ObserverSink] = []
        alive_refs: list[weakref.ref[ObserverSink]] = []
        for ref in self._observers:
            obs = ref()
            if obs is None:
                continue
            live.append(obs)
            alive_refs.append(ref)
        if len(alive_refs) != len(self._observers):
            logger.debug("Pruned %d dead observer(s).", len(self._observers) - len(alive_refs))
            self._observers = alive_refs
        return live

    # ---- tasks ----

    def find_conflict(self, task: Task) -> Task | None:
        """First stored task (in start order) whose interval strictly overlaps `task`."""
        with self._lock:
            for t in self._tasks:
                if task.overlaps(t):
                    return t
            return None

    def add_task(self, task: Task) -> Result[Task]:
        with self._lock:
            conflict = self.find_conflict(task)
            if conflict is not None:
                self.notify(f'Conflict with task "{conflict.description}"')
                return err(
                    ErrorKind.TASK_CONFLICT,
                    f'Task conflicts with existing task "{conflict.description}"',
                    conflict.description,
                )

            self._tasks.append(task)
            self._tasks.sort(key=lambda t: t.start)

        self._log.info('Task "%s" added successfully.', task.description)
        return Ok(task)

    def remove_task(self, description: str) -> Result[Task]:
        """Remove the first task whose description matches case-insensitively."""
        with self._lock:
            for i, t in enumerate(self._tasks):
                if t.matches(description):
                    removed = self._tasks.pop(i)
                    break
            else:
                return err(ErrorKind.TASK_NOT_FOUND, "Task not found.", description)

        self._log.info('Task "%s" removed successfully.', description)
        return Ok(removed)

    def view_tasks(self) -> list[Task]:
        """Snapshot of all tasks, ascending by start time."""
        with self._lock:
            return list(self._tasks)

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.view_tasks())
