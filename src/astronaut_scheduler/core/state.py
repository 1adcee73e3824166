# src/astronaut_scheduler/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..schedule.notifiers import ConsoleNotifier
from ..schedule.schedule_manager import ScheduleManager


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    manager: ScheduleManager

    # Where console notifiers write; connectors swap in a timestamped printer.
    emit: Callable[[str], None] = print

    # Strong refs for attached notifiers (the manager only holds weak refs).
    notifiers: dict[str, ConsoleNotifier] = field(default_factory=dict)

    def watch(self, name: str) -> bool:
        """Attach a console notifier for `name`. Returns False if already watching."""
        key = name.casefold()
        if key in self.notifiers:
            return False
        notifier = ConsoleNotifier(name, emit=self.emit)
        self.notifiers[key] = notifier
        self.manager.attach(notifier)
        return True

    def unwatch(self, name: str) -> bool:
        notifier = self.notifiers.pop(name.casefold(), None)
        if notifier is None:
            return False
        self.manager.detach(notifier)
        return True
