"""Gap finder: free ranges of the scheduling window between occupied ranges."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from day_scheduler.types import Interval

logger = logging.getLogger(__name__)


@dataclass
class Gap:
    """Mutable free range, owned by a single engine pass.

    start advances and duration shrinks as work is placed. duration may go
    negative once the trailing buffer overruns the gap; such a gap can never
    satisfy a later fit check. end is fixed at construction.
    """

    start: int
    end: int
    duration: int

    @classmethod
    def between(cls, start: int, end: int) -> Gap:
        return cls(start=start, end=end, duration=end - start)

    def consume(self, minutes: int) -> None:
        """Take minutes off the front of the gap."""
        self.start += minutes
        self.duration -= minutes


def find_gaps(
    occupied: Iterable[Interval],
    window_start: int,
    window_end: int,
) -> list[Gap]:
    """Linear scan of merged, ascending intervals across the window.

    Intervals ending at or before the cursor are skipped. Gaps are clipped to
    window_end so nothing placed in them can leave the window. Every gap
    returned is a new object; the occupied intervals are not touched.
    """
    gaps: list[Gap] = []
    cursor = window_start

    for iv in occupied:
        if iv.end <= cursor:
            continue
        if iv.start > cursor:
            gaps.append(Gap.between(cursor, min(iv.start, window_end)))
        cursor = max(cursor, iv.end)
        if cursor >= window_end:
            break

    if cursor < window_end:
        gaps.append(Gap.between(cursor, window_end))

    logger.debug(
        "Found %d gaps in [%d, %d): %s",
        len(gaps), window_start, window_end,
        [(g.start, g.end) for g in gaps],
    )
    return gaps
