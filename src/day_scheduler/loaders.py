"""Data loading: day files, task mappings and assistant suggestions."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from day_scheduler.schema import validate_settings, validate_task_data, validate_tasks
from day_scheduler.types import Settings, Task, TaskStatus, TaskType


def _get(data: Mapping, camel: str, snake: str, default=None):
    """Read a field by its camelCase name, falling back to snake_case."""
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def task_from_dict(data: Mapping) -> Task:
    """Build a Task from a mapping. Does not validate."""
    return Task(
        id=str(data["id"]),
        title=data["title"],
        type=TaskType(data["type"]),
        priority=data.get("priority", 2),
        duration_minutes=_get(data, "durationMinutes", "duration_minutes"),
        is_splittable=bool(_get(data, "isSplittable", "is_splittable", False)),
        status=TaskStatus(data.get("status", TaskStatus.PENDING.value)),
        fixed_start_time=_get(data, "fixedStartTime", "fixed_start_time"),
        deadline=data.get("deadline"),
    )


def settings_from_dict(data: Mapping) -> Settings:
    """Build Settings from a mapping; missing fields take the defaults."""
    defaults = Settings()
    return Settings(
        work_start=_get(data, "workStart", "work_start", defaults.work_start),
        work_end=_get(data, "workEnd", "work_end", defaults.work_end),
        buffer_minutes=_get(
            data, "bufferMinutes", "buffer_minutes", defaults.buffer_minutes
        ),
        window_start=_get(
            data, "windowStart", "window_start", defaults.window_start
        ),
        window_end=_get(data, "windowEnd", "window_end", defaults.window_end),
    )


def load_day_json(path: str | Path) -> tuple[list[Task], Settings]:
    """Load tasks and settings from a JSON day file.

    The JSON file has the form:
    {
        "settings": { "bufferMinutes": 15, ... },
        "tasks": [ { "id": "1", "title": "...", "type": "Anchor", ... } ]
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    raw_tasks = data.get("tasks", [])
    errors: list[str] = []
    for i, raw in enumerate(raw_tasks):
        errors.extend(validate_task_data(raw, i))

    settings = settings_from_dict(data.get("settings", {}))
    errors.extend(validate_settings(settings))

    tasks: list[Task] = []
    if not errors:
        tasks = [task_from_dict(raw) for raw in raw_tasks]
        errors.extend(validate_tasks(tasks))

    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return tasks, settings


def tasks_from_suggestion(
    suggestion: Mapping,
    priority: int = 2,
    id_prefix: str = "suggested",
) -> list[Task]:
    """Turn a task-decomposition reply into Floating tasks.

    The reply has the form:
    {
        "title": "...",
        "durationMinutes": 30,
        "subtasks": [ { "title": "...", "duration": 45 }, ... ]
    }

    With subtasks, each becomes its own non-splittable task with id
    "{id_prefix}-{index}". Without, a single task "{id_prefix}-0" is built
    from the refined title and duration.
    """
    subtasks = suggestion.get("subtasks") or []
    if subtasks:
        items = [(s["title"], s["duration"]) for s in subtasks]
    else:
        items = [(suggestion["title"], suggestion["durationMinutes"])]

    return [
        Task(
            id=f"{id_prefix}-{i}",
            title=title,
            type=TaskType.FLOATING,
            priority=priority,
            duration_minutes=duration,
            is_splittable=False,
            status=TaskStatus.PENDING,
        )
        for i, (title, duration) in enumerate(items)
    ]
