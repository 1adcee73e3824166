# src/astronaut_scheduler/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"


class ConsoleFormatter(logging.Formatter):
    """
    Console line format:
        [LOG] 2026-10-19 07:00:00: Task "Morning Exercise" added successfully.
        [ERROR] 2026-10-19 07:00:01: Task not found.

    INFO and below are green, WARNING yellow, ERROR+ red (when color is on).
    """

    def __init__(self, *, color: bool = True) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.ERROR:
            tag, color = "ERROR", _RED
        elif record.levelno >= logging.WARNING:
            tag, color = "WARN", _YELLOW
        else:
            tag, color = "LOG", _GREEN

        line = f"[{tag}] {self.formatTime(record, self.datefmt)}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if not self.color:
            return line
        return f"{color}{line}{_RESET}"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive console readable:
    - allow astronaut_scheduler logs
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress any third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("astronaut_scheduler."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/astro",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    color: bool = True,
) -> None:
    """
    Configure logging with:
    - Console handler: colored [LOG]/[ERROR] lines, filtered for interactive use
    - File handler (when log_dir is set): full logs for debugging

    Call this ONCE, very early (before first logger.info).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(ConsoleFormatter(color=color))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(str(log_dir / "scheduler.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
