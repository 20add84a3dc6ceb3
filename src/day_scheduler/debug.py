"""ASCII timeline views for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from collections.abc import Sequence

from day_scheduler.clock import to_clock, to_minutes
from day_scheduler.gaps import Gap
from day_scheduler.types import ScheduleResult, Settings

MINUTES_PER_CHAR = 15
LABEL_WIDTH = 36


def _header(window_start: int, window_end: int) -> str:
    """Hour labels, one per hour (4 chars at 15 min/char)."""
    chars_per_hour = 60 // MINUTES_PER_CHAR
    labels = []
    for m in range(window_start, window_end, 60):
        labels.append(f"{m // 60:02d}".ljust(chars_per_hour))
    return "".join(labels)


def _row(start: int, end: int, window_start: int, width: int, char: str) -> str:
    row = ["."] * width
    first = (start - window_start) // MINUTES_PER_CHAR
    last = -(-(end - window_start) // MINUTES_PER_CHAR)  # ceil
    for i in range(max(0, first), min(width, last)):
        row[i] = char
    return "".join(row)


def show_schedule(result: ScheduleResult, settings: Settings | None = None) -> str:
    """Print ASCII timeline of a schedule, one row per block.

    Legend: '#' = locked (Anchor/Interrupt), '=' = placed floating work.
    Rows are in chronological order. Rollover and deferred tasks are listed
    below the timeline. Returns the string and also prints to stdout.
    """
    if settings is None:
        settings = Settings()
    window_start = to_minutes(settings.window_start)
    window_end = to_minutes(settings.window_end)
    width = -(-(window_end - window_start) // MINUTES_PER_CHAR)

    lines: list[str] = [f"{'':>{LABEL_WIDTH}s}  {_header(window_start, window_end)}"]

    for block in result.chronological():
        label = f"{to_clock(block.start_time)}-{to_clock(block.end_time)} {block.task_title}"
        char = "#" if block.is_locked else "="
        row = _row(block.start_time, block.end_time, window_start, width, char)
        lines.append(f"{label[:LABEL_WIDTH]:>{LABEL_WIDTH}s}  {row}")

    if result.rollover_tasks:
        names = ", ".join(
            f"{t.title} ({t.duration_minutes}m)" for t in result.rollover_tasks
        )
        lines.append(f"\nRollover: {names}")
    if result.deferred_tasks:
        names = ", ".join(t.title for t in result.deferred_tasks)
        lines.append(f"Deferred (no start time): {names}")

    result_str = "\n".join(lines)
    print(result_str)
    return result_str


def show_gaps(gaps: Sequence[Gap], window_start: int, window_end: int) -> str:
    """Print a single-row view of the free ranges in a window.

    Legend: '-' = free, '.' = occupied or buffer. Only the unconsumed part
    of each gap (start to end, when duration is positive) is drawn.
    Returns the string and also prints to stdout.
    """
    width = -(-(window_end - window_start) // MINUTES_PER_CHAR)
    row = ["."] * width
    for gap in gaps:
        if gap.duration <= 0:
            continue
        free = _row(gap.start, gap.end, window_start, width, "-")
        for i, c in enumerate(free):
            if c == "-":
                row[i] = "-"

    lines = [_header(window_start, window_end), "".join(row)]
    result_str = "\n".join(lines)
    print(result_str)
    return result_str
