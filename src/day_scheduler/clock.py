"""Boundary: clock time "HH:MM" <-> integer minutes since midnight."""

from __future__ import annotations

from day_scheduler.types import FormatError

MINUTES_PER_DAY = 24 * 60

# Default scheduling window, independent of the configured work hours.
DAY_START = "06:00"
DAY_END = "23:00"


def to_minutes(time: str) -> int:
    """Convert "HH:MM" to minutes since midnight.

    Accepts one- or two-digit hours ("9:05") and "24:00" as end of day.
    Raises FormatError for anything else. No implicit rounding or clamping.
    """
    if not isinstance(time, str):
        raise FormatError(time, "expected a string")

    parts = time.strip().split(":")
    if len(parts) != 2:
        raise FormatError(time, "expected HH:MM")

    hours_str, minutes_str = parts
    if not (hours_str.isdecimal() and minutes_str.isdecimal()):
        raise FormatError(time, "hours and minutes must be numeric")
    if len(minutes_str) != 2:
        raise FormatError(time, "minutes must have two digits")

    hours, minutes = int(hours_str), int(minutes_str)
    if minutes > 59:
        raise FormatError(time, f"minute {minutes} out of range")
    if hours > 24 or (hours == 24 and minutes != 0):
        raise FormatError(time, f"hour {hours} out of range")

    return hours * 60 + minutes


def to_clock(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM".

    Values past midnight are not wrapped: 1500 renders as "25:00".
    """
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"
