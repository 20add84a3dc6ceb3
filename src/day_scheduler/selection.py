"""Task selector: which floating tasks to place, and in what order."""

from __future__ import annotations

from collections.abc import Iterable

from day_scheduler.types import Task, TaskStatus, TaskType


def placement_key(task: Task) -> tuple[int, int]:
    """Priority ascending, then largest duration first ("big rocks")."""
    return (task.priority, -task.duration_minutes)


def select_floating(tasks: Iterable[Task]) -> list[Task]:
    """Floating tasks that are not completed, in placement order.

    The sort is stable: tasks with equal priority and duration keep their
    input order.
    """
    floating = [
        t for t in tasks
        if t.type is TaskType.FLOATING and t.status is not TaskStatus.COMPLETED
    ]
    return sorted(floating, key=placement_key)
