# src/astronaut_scheduler/schedule/task_factory.py

from __future__ import annotations

import re
from datetime import timedelta

from .results import ErrorKind, Ok, Result, err
from .task_models import Task

TIME_OF_DAY_REGEX = re.compile(r"^(\d+):([0-5]\d)$")


def parse_time_of_day(text: str) -> timedelta | None:
    """
    Parse "H:MM" / "HH:MM" (24-hour clock) into an offset since midnight.
    Returns None when the text is not a valid time of day.
    """
    m = TIME_OF_DAY_REGEX.match((text or "").strip())
    if not m:
        return None
    try:
        return timedelta(hours=int(m.group(1)), minutes=int(m.group(2)))
    except (OverflowError, ValueError):
        # More hours than a timedelta can hold.
        return None


def create_task(
    description: str,
    start_text: str,
    end_text: str,
    priority: str,
) -> Result[Task]:
    """
    Build a Task from raw user input.

    Errors:
    - INVALID_FORMAT: blank description or a time that is not HH:MM
    - INVALID_RANGE: start is not strictly before end
    """
    desc = (description or "").strip()
    if not desc:
        return err(ErrorKind.INVALID_FORMAT, "Task description must not be empty.")

    start = parse_time_of_day(start_text)
    end = parse_time_of_day(end_text)
    if start is None or end is None:
        return err(ErrorKind.INVALID_FORMAT, "Invalid time format. Use HH:mm", desc)

    if start >= end:
        return err(ErrorKind.INVALID_RANGE, "Start time must be before End time", desc)

    return Ok(Task(description=desc, start=start, end=end, priority=(priority or "").strip()))
