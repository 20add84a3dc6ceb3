"""Input validation for tasks and settings.

The validate_* helpers return a list of error messages (empty = valid) and
never raise. validate_task is the fail-fast form used by the engine.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from day_scheduler.clock import to_minutes
from day_scheduler.types import (
    FormatError,
    InvalidTaskError,
    Settings,
    Task,
    TaskStatus,
    TaskType,
)

PRIORITIES = (1, 2, 3)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def task_errors(task: Task) -> list[str]:
    """Problems that make a task unusable by the engine."""
    errors: list[str] = []
    if not _is_int(task.duration_minutes) or task.duration_minutes <= 0:
        errors.append(
            f"duration_minutes must be a positive integer, "
            f"got {task.duration_minutes!r}"
        )
    if task.priority not in PRIORITIES:
        errors.append(f"priority must be one of {PRIORITIES}, got {task.priority!r}")
    return errors


def validate_task(task: Task) -> None:
    """Raise InvalidTaskError if the task cannot be scheduled."""
    errors = task_errors(task)
    if errors:
        raise InvalidTaskError(task.id, "; ".join(errors))


def validate_tasks(tasks: Iterable[Task]) -> list[str]:
    """Validate a task list. Returns messages prefixed with the task id."""
    errors: list[str] = []
    for task in tasks:
        errors.extend(f"Task {task.id!r}: {e}" for e in task_errors(task))
    return errors


def _check_clock(label: str, value: object, errors: list[str]) -> int | None:
    try:
        return to_minutes(value)  # type: ignore[arg-type]
    except FormatError as e:
        errors.append(f"{label}: {e.reason} ({value!r})")
        return None


def validate_settings(settings: Settings) -> list[str]:
    """Validate settings. Returns list of error messages.

    Checks:
    - buffer_minutes is a non-negative integer
    - all clock fields parse
    - the scheduling window is non-empty
    """
    errors: list[str] = []

    if not _is_int(settings.buffer_minutes) or settings.buffer_minutes < 0:
        errors.append(
            f"buffer_minutes must be a non-negative integer, "
            f"got {settings.buffer_minutes!r}"
        )

    _check_clock("work_start", settings.work_start, errors)
    _check_clock("work_end", settings.work_end, errors)
    start = _check_clock("window_start", settings.window_start, errors)
    end = _check_clock("window_end", settings.window_end, errors)

    if start is not None and end is not None and end <= start:
        errors.append(
            f"window_end {settings.window_end!r} must be after "
            f"window_start {settings.window_start!r}"
        )

    return errors


def validate_task_data(data: Mapping, index: int) -> list[str]:
    """Validate one raw task mapping as found in a day file.

    Checks:
    - id, title, type and durationMinutes are present
    - type, status and priority take known values
    - fixedStartTime, when given, is a valid clock time
    """
    label = f"Task {data.get('id', f'#{index}')!r}"
    errors: list[str] = []

    for key in ("id", "title", "type"):
        if key not in data:
            errors.append(f"{label}: missing '{key}'")
    if "durationMinutes" not in data and "duration_minutes" not in data:
        errors.append(f"{label}: missing 'durationMinutes'")

    if "type" in data and data["type"] not in {t.value for t in TaskType}:
        errors.append(f"{label}: unknown type {data['type']!r}")

    status = data.get("status", TaskStatus.PENDING.value)
    if status not in {s.value for s in TaskStatus}:
        errors.append(f"{label}: unknown status {status!r}")

    if data.get("priority", 2) not in PRIORITIES:
        errors.append(f"{label}: priority must be one of {PRIORITIES}")

    start = data.get("fixedStartTime", data.get("fixed_start_time"))
    if start is not None:
        _check_clock(f"{label}: fixedStartTime", start, errors)

    return errors
