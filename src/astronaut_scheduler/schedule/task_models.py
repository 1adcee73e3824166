# src/astronaut_scheduler/schedule/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum


class Priority(StrEnum):
    """
    Common priority labels.

    Task.priority is free text; these are just the values the CLI suggests.
    The core does not order tasks by priority.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def format_time_of_day(value: timedelta) -> str:
    """Render an offset since midnight as HH:MM."""
    total_minutes = int(value.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


@dataclass(slots=True, frozen=True)
class Task:
    description: str
    start: timedelta
    end: timedelta
    priority: str

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"Task {self.description!r} must start before it ends.")

    def overlaps(self, other: Task) -> bool:
        # Half-open intervals: touching endpoints do not overlap.
        return self.start < other.end and self.end > other.start

    def matches(self, description: str) -> bool:
        return self.description.casefold() == description.casefold()

    def __str__(self) -> str:
        return (
            f"{format_time_of_day(self.start)} - {format_time_of_day(self.end)}: "
            f"{self.description} [{self.priority}]"
        )
