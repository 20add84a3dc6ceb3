"""Entry point: one full scheduling pass over a day's tasks.

The pass is a pure function of its inputs. Every call builds its own
intervals, gaps and work list, so concurrent calls share nothing. Callers
that react to task edits should recompute from the full task set each time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from day_scheduler.clock import to_minutes
from day_scheduler.fitter import fit_tasks
from day_scheduler.gaps import find_gaps
from day_scheduler.intervals import lock_fixed_tasks, merge_intervals
from day_scheduler.schema import validate_settings, validate_task
from day_scheduler.selection import select_floating
from day_scheduler.types import ScheduleResult, Settings, Task

logger = logging.getLogger(__name__)


def reschedule_day(
    tasks: Sequence[Task],
    settings: Settings | None = None,
) -> ScheduleResult:
    """Lay out fixed tasks, then fit floating tasks into the remaining gaps.

    Args:
        tasks: All tasks for the day, in input order.
        settings: Buffer and window configuration. Defaults to Settings().

    Returns:
        ScheduleResult with locked blocks (input order) followed by floating
        blocks (processing order), the rollover tasks, and any fixed tasks
        deferred for lack of a start time.

    Raises:
        InvalidTaskError: If a task has a non-positive duration or bad priority.
        FormatError: If a fixed start time is malformed.
        ValueError: If the settings are malformed or inconsistent.
    """
    if settings is None:
        settings = Settings()

    errors = validate_settings(settings)
    if errors:
        raise ValueError(
            "Invalid settings:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    for task in tasks:
        validate_task(task)

    window_start = to_minutes(settings.window_start)
    window_end = to_minutes(settings.window_end)

    locked, occupied, deferred = lock_fixed_tasks(tasks, settings.buffer_minutes)
    for task in deferred:
        logger.warning(
            "Fixed task %r has no start time; deferred, not scheduled", task.id
        )

    gaps = find_gaps(merge_intervals(occupied), window_start, window_end)
    placed, rollover = fit_tasks(
        select_floating(tasks), gaps, settings.buffer_minutes
    )

    result = ScheduleResult(
        blocks=tuple(locked + placed),
        rollover_tasks=tuple(rollover),
        deferred_tasks=tuple(deferred),
    )
    logger.info(
        "Scheduled %d blocks (%d locked), %d rollover, %d deferred",
        len(result.blocks), len(locked), len(rollover), len(deferred),
    )
    return result
