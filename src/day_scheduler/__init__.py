"""day-scheduler: Greedy single-day task placement around fixed commitments."""

from day_scheduler.clock import DAY_END, DAY_START, to_clock, to_minutes
from day_scheduler.engine import reschedule_day
from day_scheduler.fitter import WorkList, fit_tasks
from day_scheduler.gaps import Gap, find_gaps
from day_scheduler.intervals import lock_fixed_tasks, merge_intervals
from day_scheduler.loaders import load_day_json, tasks_from_suggestion
from day_scheduler.selection import select_floating
from day_scheduler.types import (
    FormatError,
    Interval,
    InvalidTaskError,
    ScheduleBlock,
    ScheduleResult,
    Settings,
    Task,
    TaskStatus,
    TaskType,
)

__all__ = [
    "DAY_END",
    "DAY_START",
    "FormatError",
    "Gap",
    "Interval",
    "InvalidTaskError",
    "ScheduleBlock",
    "ScheduleResult",
    "Settings",
    "Task",
    "TaskStatus",
    "TaskType",
    "WorkList",
    "find_gaps",
    "fit_tasks",
    "load_day_json",
    "lock_fixed_tasks",
    "merge_intervals",
    "reschedule_day",
    "select_floating",
    "tasks_from_suggestion",
    "to_clock",
    "to_minutes",
]
