"""Hypothesis property-based tests.

Properties that must hold for all valid inputs, verified by random generation.
"""

from __future__ import annotations

from collections import defaultdict

from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import make_settings, make_task


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------
_clock = st.builds(
    lambda m: f"{m // 60:02d}:{m % 60:02d}",
    st.integers(min_value=0, max_value=23 * 60 + 59),
)

_fixed = st.tuples(
    st.sampled_from(["Anchor", "Interrupt"]),
    _clock,
    st.integers(min_value=1, max_value=240),
)

_floating = st.tuples(
    st.integers(min_value=1, max_value=3),        # priority
    st.integers(min_value=1, max_value=300),      # duration
    st.booleans(),                                # splittable
    st.sampled_from(["pending", "pending", "rollover", "completed"]),
)


@st.composite
def _days(draw):
    """(tasks, settings) for a random day."""
    fixed = draw(st.lists(_fixed, max_size=6))
    floating = draw(st.lists(_floating, max_size=12))
    buffer = draw(st.integers(min_value=0, max_value=30))

    tasks = [
        make_task(f"fx{i}", duration, type=kind, start=start)
        for i, (kind, start, duration) in enumerate(fixed)
    ]
    tasks += [
        make_task(f"fl{i}", duration, priority=priority,
                  splittable=splittable, status=status)
        for i, (priority, duration, splittable, status) in enumerate(floating)
    ]
    # Interleave so fixed tasks are not always first in the input.
    tasks = draw(st.permutations(tasks))
    return list(tasks), make_settings(buffer=buffer)


def _run(day):
    from day_scheduler.engine import reschedule_day

    tasks, cfg = day
    return tasks, cfg, reschedule_day(tasks, cfg)


# ---------------------------------------------------------------------------
# Property: placement geometry
# ---------------------------------------------------------------------------
class TestPlacement:

    @given(day=_days())
    @settings(max_examples=100)
    def test_floating_blocks_inside_window(self, day):
        from day_scheduler.clock import to_minutes

        _, cfg, result = _run(day)
        lo, hi = to_minutes(cfg.window_start), to_minutes(cfg.window_end)
        for block in result.blocks:
            if not block.is_locked:
                assert lo <= block.start_time < block.end_time <= hi

    @given(day=_days())
    @settings(max_examples=100)
    def test_floating_blocks_keep_buffer_apart(self, day):
        """No overlap, and at least buffer_minutes between floating blocks."""
        _, cfg, result = _run(day)
        floating = sorted(
            (b for b in result.blocks if not b.is_locked),
            key=lambda b: b.start_time,
        )
        for prev, curr in zip(floating, floating[1:]):
            assert curr.start_time >= prev.end_time + cfg.buffer_minutes

    @given(day=_days())
    @settings(max_examples=100)
    def test_buffer_around_fixed_blocks(self, day):
        _, cfg, result = _run(day)
        locked = [b for b in result.blocks if b.is_locked]
        for f in (b for b in result.blocks if not b.is_locked):
            for x in locked:
                assert (
                    f.end_time + cfg.buffer_minutes <= x.start_time
                    or x.end_time + cfg.buffer_minutes <= f.start_time
                )


# ---------------------------------------------------------------------------
# Property: accounting
# ---------------------------------------------------------------------------
class TestAccounting:

    @given(day=_days())
    @settings(max_examples=100)
    def test_floating_minutes_conserved(self, day):
        """Placed minutes plus rolled-over minutes equal the request."""
        tasks, _, result = _run(day)

        placed: dict[str, int] = defaultdict(int)
        for block in result.blocks:
            placed[block.task_id] += block.duration
        left: dict[str, int] = defaultdict(int)
        for task in result.rollover_tasks:
            left[task.id] += task.duration_minutes

        for task in tasks:
            if task.is_fixed:
                continue
            if task.status.value == "completed":
                assert placed[task.id] == 0 and left[task.id] == 0
            else:
                assert placed[task.id] + left[task.id] == task.duration_minutes

    @given(day=_days())
    @settings(max_examples=100)
    def test_each_task_rolls_over_at_most_once(self, day):
        _, _, result = _run(day)
        ids = [t.id for t in result.rollover_tasks]
        assert len(ids) == len(set(ids))
        assert all(t.duration_minutes > 0 for t in result.rollover_tasks)

    @given(day=_days())
    @settings(max_examples=100)
    def test_whole_placement_is_one_block(self, day):
        """A task placed without splitting has exactly one block."""
        tasks, _, result = _run(day)
        rolled = {t.id for t in result.rollover_tasks}
        for task in tasks:
            if task.is_fixed or task.id in rolled:
                continue
            blocks = result.blocks_for(task.id)
            if len(blocks) == 1:
                assert blocks[0].task_title == task.title
                assert blocks[0].duration == task.duration_minutes

    @given(day=_days())
    @settings(max_examples=100)
    def test_fixed_tasks_always_locked(self, day):
        tasks, _, result = _run(day)
        for task in tasks:
            if task.is_fixed:
                blocks = result.blocks_for(task.id)
                assert len(blocks) == 1
                assert blocks[0].is_locked
                assert blocks[0].duration == task.duration_minutes
        assert all(not t.is_fixed for t in result.rollover_tasks)

    @given(day=_days())
    @settings(max_examples=50)
    def test_idempotent(self, day):
        from day_scheduler.engine import reschedule_day

        tasks, cfg, result = _run(day)
        assert reschedule_day(tasks, cfg) == result

    @given(day=_days())
    @settings(max_examples=50)
    def test_block_ids_unique(self, day):
        _, _, result = _run(day)
        ids = [b.id for b in result.blocks]
        assert len(ids) == len(set(ids))


# ---------------------------------------------------------------------------
# Property: clock round-trip
# ---------------------------------------------------------------------------
class TestClockRoundTrip:

    @given(m=st.integers(min_value=0, max_value=1440))
    @settings(max_examples=100)
    def test_to_minutes_inverts_to_clock(self, m):
        from day_scheduler.clock import to_clock, to_minutes

        assert to_minutes(to_clock(m)) == m
