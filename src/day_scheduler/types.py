"""Shared types: the task/schedule data model and the engine's errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskType(str, Enum):
    ANCHOR = "Anchor"
    FLOATING = "Floating"
    INTERRUPT = "Interrupt"

    @property
    def is_fixed(self) -> bool:
        """Anchors and Interrupts have caller-specified start times."""
        return self is not TaskType.FLOATING


class TaskStatus(str, Enum):
    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    ROLLOVER = "rollover"


@dataclass(frozen=True)
class Task:
    """A unit of work supplied by the caller. Never mutated by the engine.

    priority: 1 = high, 2 = medium, 3 = low.
    fixed_start_time: "HH:MM", required for Anchor/Interrupt only.
    """

    id: str
    title: str
    type: TaskType
    priority: int
    duration_minutes: int
    is_splittable: bool = False
    status: TaskStatus = TaskStatus.PENDING
    fixed_start_time: str | None = None
    deadline: str | None = None

    @property
    def is_fixed(self) -> bool:
        return self.type.is_fixed


@dataclass(frozen=True)
class Settings:
    """User configuration for one scheduling pass.

    work_start/work_end are advisory and not consulted by the engine.
    Gaps are computed over [window_start, window_end).
    """

    work_start: str = "09:00"
    work_end: str = "17:00"
    buffer_minutes: int = 15
    window_start: str = "06:00"
    window_end: str = "23:00"


@dataclass(frozen=True)
class Interval:
    """Half-open occupied range in minutes since midnight."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ScheduleBlock:
    """One placed (or locked) piece of a task on the day timeline."""

    id: str
    task_id: str
    task_title: str
    task_type: TaskType
    start_time: int
    end_time: int
    is_locked: bool
    priority: int
    status: TaskStatus = TaskStatus.SCHEDULED

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class ScheduleResult:
    """Output of one engine pass.

    Invariants:
        - blocks are in placement order: fixed tasks in input order, then
          floating blocks in processing order (not sorted by time)
        - rollover_tasks are in queue-exhaustion order
        - deferred_tasks holds fixed tasks that had no start time
    """

    blocks: tuple[ScheduleBlock, ...] = ()
    rollover_tasks: tuple[Task, ...] = ()
    deferred_tasks: tuple[Task, ...] = ()

    def chronological(self) -> list[ScheduleBlock]:
        """Blocks sorted by start time (stable for equal starts)."""
        return sorted(self.blocks, key=lambda b: b.start_time)

    def blocks_for(self, task_id: str) -> list[ScheduleBlock]:
        return [b for b in self.blocks if b.task_id == task_id]

    @property
    def scheduled_minutes(self) -> int:
        """Total minutes covered by emitted blocks."""
        return sum(b.duration for b in self.blocks)


class FormatError(ValueError):
    """Raised when a clock-time string is not a well-formed "HH:MM"."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid clock time {value!r}: {reason}")


class InvalidTaskError(ValueError):
    """Raised when a task cannot be fed to the engine."""

    def __init__(self, task_id: str, reason: str) -> None:
        self.task_id = task_id
        self.reason = reason
        super().__init__(f"Invalid task {task_id!r}: {reason}")
