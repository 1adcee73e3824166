# src/astronaut_scheduler/schedule/results.py

"""
Result values returned by the schedule core.

Expected failures (bad input, conflicts, missing tasks) are returned as Err
values instead of being raised, so every call site has to look at the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    INVALID_FORMAT = "invalid_format"
    INVALID_RANGE = "invalid_range"
    TASK_CONFLICT = "task_conflict"
    TASK_NOT_FOUND = "task_not_found"


@dataclass(slots=True, frozen=True)
class ScheduleError:
    """
    kind: what went wrong
    message: human readable text (shown by the CLI)
    description: task description involved; for TASK_CONFLICT this is the
        existing task that blocked the add
    """

    kind: ErrorKind
    message: str
    description: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class Err:
    error: ScheduleError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Result: TypeAlias = Ok[T] | Err


def err(kind: ErrorKind, message: str, description: str | None = None) -> Err:
    return Err(ScheduleError(kind=kind, message=message, description=description))
