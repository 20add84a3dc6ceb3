"""Greedy fitter: first-fit placement with splitting and rollover.

Tasks are taken from a work list in placement order. Each one is placed
whole in the first gap that can hold it. Failing that, a splittable task
fills the largest gap with a "Part 1" and its remainder is retried before
anything else. Whatever still cannot be placed rolls over.
"""

from __future__ import annotations

import dataclasses
import logging
from collections import deque
from collections.abc import Iterable

from day_scheduler.gaps import Gap
from day_scheduler.types import ScheduleBlock, Task, TaskStatus

logger = logging.getLogger(__name__)

# Smallest piece a split may produce at the front of a gap.
MIN_SPLIT_MINUTES = 15
# Only tasks strictly longer than this are split.
SPLIT_THRESHOLD_MINUTES = 30


class WorkList:
    """Pending tasks: FIFO for the initial queue, LIFO for split remainders.

    A remainder pushed with push_front() is always popped before any task
    from the initial queue.
    """

    def __init__(self, tasks: Iterable[Task]) -> None:
        self._queue: deque[Task] = deque(tasks)
        self._requeued: list[Task] = []

    def __len__(self) -> int:
        return len(self._queue) + len(self._requeued)

    def __bool__(self) -> bool:
        return bool(self._queue) or bool(self._requeued)

    def push_front(self, task: Task) -> None:
        self._requeued.append(task)

    def pop(self) -> Task:
        if self._requeued:
            return self._requeued.pop()
        return self._queue.popleft()


class _BlockIds:
    """Deterministic block ids: block-{task_id}-{n}, n counted per task."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def next(self, task_id: str) -> str:
        n = self._counts.get(task_id, 0) + 1
        self._counts[task_id] = n
        return f"block-{task_id}-{n}"


def _first_fit(gaps: list[Gap], minutes: int) -> Gap | None:
    """First gap, in existing order, whose duration holds minutes."""
    for gap in gaps:
        if gap.duration >= minutes:
            return gap
    return None


def _largest(gaps: list[Gap]) -> Gap | None:
    """Gap with the largest duration; the earliest one wins ties."""
    if not gaps:
        return None
    return max(gaps, key=lambda g: g.duration)


def _place(
    task: Task,
    title: str,
    gap: Gap,
    minutes: int,
    buffer_minutes: int,
    block_id: str,
) -> ScheduleBlock:
    """Emit a block at the gap's start and reserve minutes + buffer."""
    start = gap.start
    gap.consume(minutes + buffer_minutes)
    return ScheduleBlock(
        id=block_id,
        task_id=task.id,
        task_title=title,
        task_type=task.type,
        start_time=start,
        end_time=start + minutes,
        is_locked=False,
        priority=task.priority,
        status=TaskStatus.SCHEDULED,
    )


def fit_tasks(
    ordered: Iterable[Task],
    gaps: list[Gap],
    buffer_minutes: int,
) -> tuple[list[ScheduleBlock], list[Task]]:
    """Place ordered tasks into gaps. Mutates gaps in place.

    Args:
        ordered: Floating tasks in placement order.
        gaps: Free ranges for this pass, in window order. Not re-sorted.
        buffer_minutes: Reserved after every placed block.

    Returns:
        (blocks, rollover) with blocks in processing order and rollover in
        the order tasks were given up on.
    """
    work = WorkList(ordered)
    ids = _BlockIds()
    blocks: list[ScheduleBlock] = []
    rollover: list[Task] = []

    while work:
        task = work.pop()
        need = task.duration_minutes

        gap = _first_fit(gaps, need)
        if gap is not None:
            block = _place(task, task.title, gap, need, buffer_minutes, ids.next(task.id))
            blocks.append(block)
            logger.debug(
                "Placed %r at [%d, %d)", task.id, block.start_time, block.end_time
            )
            continue

        if task.is_splittable and need > SPLIT_THRESHOLD_MINUTES:
            split = _split(task, gaps, buffer_minutes, ids)
            if split is not None:
                part_one, remainder = split
                blocks.append(part_one)
                work.push_front(remainder)
                continue

        logger.debug("Rolled over %r (%d min)", task.id, need)
        rollover.append(task)

    return blocks, rollover


def _split(
    task: Task,
    gaps: list[Gap],
    buffer_minutes: int,
    ids: _BlockIds,
) -> tuple[ScheduleBlock, Task] | None:
    """Fill the largest gap with a Part 1; return it with the Part 2 task.

    Returns None when no gap has room for a minimum-size piece.
    """
    gap = _largest(gaps)
    if gap is None or gap.duration < MIN_SPLIT_MINUTES:
        return None

    fit = max(MIN_SPLIT_MINUTES, gap.duration - buffer_minutes)
    if fit < MIN_SPLIT_MINUTES:
        return None

    part_one = _place(
        task, f"{task.title} (Part 1)", gap, fit, buffer_minutes, ids.next(task.id)
    )
    remainder = dataclasses.replace(
        task,
        title=f"{task.title} (Part 2)",
        duration_minutes=task.duration_minutes - fit,
    )
    logger.debug(
        "Split %r: %d min at [%d, %d), %d min requeued",
        task.id, fit, part_one.start_time, part_one.end_time,
        remainder.duration_minutes,
    )
    return part_one, remainder
