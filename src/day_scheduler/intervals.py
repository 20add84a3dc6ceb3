"""Interval set: lock fixed tasks and build the merged occupied ranges."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from day_scheduler.clock import MINUTES_PER_DAY, to_minutes
from day_scheduler.types import Interval, ScheduleBlock, Task, TaskStatus

logger = logging.getLogger(__name__)


def fixed_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Anchors and Interrupts, in input order."""
    return [t for t in tasks if t.is_fixed]


def lock_fixed_tasks(
    tasks: Sequence[Task],
    buffer_minutes: int,
) -> tuple[list[ScheduleBlock], list[Interval], list[Task]]:
    """Emit locked blocks and buffer-expanded occupied intervals.

    Returns (blocks, occupied, deferred). Blocks carry the task's own times;
    the occupied interval is widened by buffer_minutes on both sides and
    clamped to [0, MINUTES_PER_DAY]. Fixed tasks without a start time are
    returned in deferred and take no space.

    Raises FormatError if a fixed_start_time is malformed.
    """
    blocks: list[ScheduleBlock] = []
    occupied: list[Interval] = []
    deferred: list[Task] = []

    for task in fixed_tasks(tasks):
        if task.fixed_start_time is None:
            deferred.append(task)
            continue

        start = to_minutes(task.fixed_start_time)
        end = start + task.duration_minutes
        blocks.append(
            ScheduleBlock(
                id=f"block-{task.id}",
                task_id=task.id,
                task_title=task.title,
                task_type=task.type,
                start_time=start,
                end_time=end,
                is_locked=True,
                priority=task.priority,
                status=TaskStatus.SCHEDULED,
            )
        )
        occupied.append(
            Interval(
                start=max(0, start - buffer_minutes),
                end=min(MINUTES_PER_DAY, end + buffer_minutes),
            )
        )

    return blocks, occupied, deferred


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Sort by start and merge overlaps into a new ascending list.

    An interval is folded into the running one only when its start is
    strictly before the running end; touching intervals stay separate.
    The input is not modified.
    """
    ordered = sorted(intervals, key=lambda iv: iv.start)
    if not ordered:
        return []

    merged: list[Interval] = []
    current = ordered[0]
    for iv in ordered[1:]:
        if iv.start < current.end:
            current = Interval(current.start, max(current.end, iv.end))
        else:
            merged.append(current)
            current = iv
    merged.append(current)

    logger.debug("Merged %d occupied intervals into %d", len(ordered), len(merged))
    return merged
