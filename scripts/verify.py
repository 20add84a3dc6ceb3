#!/usr/bin/env python
"""Visual verification report for day-scheduler.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. The demo day: inputs, resulting blocks and ASCII timeline
  2. Every engine scenario: expected vs actual blocks and rollover
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from day_scheduler.clock import to_clock, to_minutes
from day_scheduler.debug import show_schedule
from day_scheduler.engine import reschedule_day
from day_scheduler.loaders import load_day_json, settings_from_dict, task_from_dict


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        print(fmt.format(*row))


def _span(start: int, end: int) -> str:
    return f"{to_clock(start)}-{to_clock(end)}"


# ---------------------------------------------------------------------------
# Section 1: Demo day
# ---------------------------------------------------------------------------
def section_demo():
    banner("DEMO DAY")
    tasks, settings = load_day_json(FIXTURES / "demo_day.json")

    print(f"\n    Buffer:   {settings.buffer_minutes} min")
    print(f"    Window:   {settings.window_start}-{settings.window_end}")
    print(f"    Work:     {settings.work_start}-{settings.work_end} (advisory)")

    heading("Tasks")
    rows = [
        [t.id, t.title, t.type.value, str(t.priority), str(t.duration_minutes),
         "yes" if t.is_splittable else "", t.fixed_start_time or ""]
        for t in tasks
    ]
    table(["ID", "Title", "Type", "Pri", "Min", "Split", "Start"], rows)

    result = reschedule_day(tasks, settings)

    heading("Blocks (placement order)")
    rows = [
        [b.id, b.task_title, _span(b.start_time, b.end_time),
         "locked" if b.is_locked else ""]
        for b in result.blocks
    ]
    table(["Block", "Title", "Time", ""], rows)

    heading("Timeline")
    print()
    show_schedule(result, settings)


# ---------------------------------------------------------------------------
# Section 2: Engine scenarios
# ---------------------------------------------------------------------------
def section_scenarios():
    banner("ENGINE SCENARIOS")
    data = _load(SCENARIOS / "engine.json")

    failures = 0
    for spec in data["scenarios"]:
        tasks = [task_from_dict(t) for t in spec["tasks"]]
        result = reschedule_day(tasks, settings_from_dict(spec["settings"]))

        heading(spec["id"])
        print(f"    {spec['notes']}\n")

        expected = {
            b["id"]: (to_minutes(b["start"]), to_minutes(b["end"]))
            for b in spec["expected_blocks"]
        }
        rows = []
        for b in result.blocks:
            want = expected.get(b.id)
            ok = want == (b.start_time, b.end_time)
            failures += not ok
            rows.append([
                b.id, b.task_title, _span(b.start_time, b.end_time),
                _span(*want) if want else "-", "PASS" if ok else "FAIL",
            ])
        if len(result.blocks) != len(expected):
            failures += 1
        table(["Block", "Title", "Actual", "Expected", ""], rows)

        rolled = [(t.title, t.duration_minutes) for t in result.rollover_tasks]
        want_rolled = [(r["title"], r["duration"]) for r in spec["expected_rollover"]]
        ok = rolled == want_rolled
        failures += not ok
        names = ", ".join(f"{t} ({m}m)" for t, m in rolled) or "none"
        print(f"\n    Rollover: {names}  [{'PASS' if ok else 'FAIL'}]")

    print(f"\n    {failures} mismatch(es)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("DAY-SCHEDULER   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_demo()
    section_scenarios()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
