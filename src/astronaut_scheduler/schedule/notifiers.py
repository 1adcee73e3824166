# src/astronaut_scheduler/schedule/notifiers.py

from __future__ import annotations

from collections.abc import Callable

Emitter = Callable[[str], None]


class ConsoleNotifier:
    """
    Observer for one crew member: prints every schedule event tagged with their name.

    `emit` defaults to print; connectors pass their own timestamped printer.
    """

    def __init__(self, name: str, emit: Emitter | None = None) -> None:
        self.name = name
        self._emit: Emitter = emit if emit is not None else print

    def update(self, message: str) -> None:
        self._emit(f"[NOTIFY {self.name}]: {message}")

    def __repr__(self) -> str:
        return f"ConsoleNotifier(name={self.name!r})"
