# tests/test_logging_setup.py

from __future__ import annotations

import logging

from astronaut_scheduler.logging_setup import ConsoleFormatter


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("astronaut_scheduler.test", level, __file__, 1, msg, None, None)


def test_plain_console_format() -> None:
    fmt = ConsoleFormatter(color=False)

    info = fmt.format(_record(logging.INFO, 'Task "Lunch" added successfully.'))
    error = fmt.format(_record(logging.ERROR, "Task not found."))

    assert info.startswith("[LOG] ")
    assert info.endswith(': Task "Lunch" added successfully.')
    assert error.startswith("[ERROR] ")
    assert error.endswith(": Task not found.")


def test_colored_console_format() -> None:
    fmt = ConsoleFormatter(color=True)

    assert fmt.format(_record(logging.INFO, "x")).startswith("\033[32m[LOG]")
    assert fmt.format(_record(logging.ERROR, "x")).startswith("\033[31m[ERROR]")
    assert fmt.format(_record(logging.WARNING, "x")).endswith("\033[0m")
