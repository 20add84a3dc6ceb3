"""Shared test fixtures and data loading for day-scheduler.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Scenario times are written as "HH:MM" labels; helpers convert them to
minutes since midnight.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
DEMO_DAY = FIXTURES_DIR / "demo_day.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def minutes(label: str) -> int:
    """Minutes since midnight for an "HH:MM" label.

    >>> minutes("09:30")
    570
    """
    hours, mins = label.split(":")
    return int(hours) * 60 + int(mins)


def make_task(
    task_id: str,
    duration: int,
    type: str = "Floating",
    priority: int = 2,
    splittable: bool = False,
    start: str | None = None,
    status: str = "pending",
    title: str | None = None,
):
    """Build a Task with terse arguments."""
    from day_scheduler.types import Task, TaskStatus, TaskType

    return Task(
        id=task_id,
        title=title or f"Task {task_id}",
        type=TaskType(type),
        priority=priority,
        duration_minutes=duration,
        is_splittable=splittable,
        status=TaskStatus(status),
        fixed_start_time=start,
    )


def make_settings(buffer: int = 15, window: tuple[str, str] = ("06:00", "23:00")):
    """Build Settings with the given buffer and scheduling window."""
    from day_scheduler.types import Settings

    return Settings(buffer_minutes=buffer, window_start=window[0], window_end=window[1])


def scenario_inputs(spec: dict):
    """Tasks and Settings for an engine scenario dict."""
    from day_scheduler.loaders import settings_from_dict, task_from_dict

    tasks = [task_from_dict(t) for t in spec["tasks"]]
    return tasks, settings_from_dict(spec["settings"])


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def default_settings():
    from day_scheduler.types import Settings

    return Settings()


@pytest.fixture
def demo_day():
    """(tasks, settings) for the bundled demo day."""
    from day_scheduler.loaders import load_day_json

    return load_day_json(DEMO_DAY)
