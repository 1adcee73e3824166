# src/astronaut_scheduler/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the schedule core.

The core depends on Protocols instead of concrete implementations:
- observers only need update(message),
- the log sink only needs info()/error(), so a plain logging.Logger fits.
"""

from typing import Protocol


class ObserverSink(Protocol):
    """Listener notified of schedule events (currently: conflicts)."""

    def update(self, message: str) -> None: ...


class LogSink(Protocol):
    """Two-channel log sink. The core itself only writes to info()."""

    def info(self, msg: str, *args: object) -> None: ...

    def error(self, msg: str, *args: object) -> None: ...
