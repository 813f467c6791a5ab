"""Shared fixtures and builders for the wearstats test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wearstats.buckets import DayBucket, SECONDS_PER_DAY
from wearstats.feed import HeartRateBatch, SampleBatch
from wearstats.wearer import Wearer

# 2020-09-20 01:25 UTC, day index 18525
DAY0_START = 1600565100

WALK_CALORIES = [12, 14, 16, 18, 14, 16, 12, 16, 18, 16]  # 152
WALK_STEPS = [200, 210, 220, 260, 270, 240, 220, 216, 240, 248]  # 2324
SHORT_WALK_STEPS = [200, 210, 220, 260, 270]  # 1160
EVENING_WALK_STEPS = [150, 160, 170, 155, 165]  # 800

RESTING_HR = [70, 75, 70, 72, 73, 71, 77, 79, 78, 76]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_batch(
    workout_id: int = 1,
    workout_type: str = "walk",
    start_time: float = DAY0_START,
    end_time: float | None = None,
    calories: list[float] | None = None,
    steps: list[float] | None = None,
) -> SampleBatch:
    """Build a workout sample batch (defaults: the 20 minute walk)."""
    return SampleBatch(
        workout_id=workout_id,
        workout_type=workout_type,
        start_time=start_time,
        end_time=end_time if end_time is not None else start_time + 1200,
        calories=tuple(WALK_CALORIES if calories is None else calories),
        steps=tuple(WALK_STEPS if steps is None else steps),
    )


def make_buckets(*pairs: tuple[int, float], tag: str | None = None) -> list[DayBucket]:
    """Build a bucket sequence from (day_index, value) pairs."""
    return [DayBucket(day_index=d, value=v, tag=tag) for d, v in pairs]


def on_day(offset: int, seconds: int = 60) -> int:
    """Timestamp ``offset`` days after DAY0's midnight, plus ``seconds``."""
    midnight = (DAY0_START // SECONDS_PER_DAY) * SECONDS_PER_DAY
    return midnight + offset * SECONDS_PER_DAY + seconds


def write_jsonl(path: Path, entries: list[dict]) -> Path:
    """Write a list of dicts as JSONL to the given path."""
    with open(path, "w") as f:
        for entry in entries:
            f.write(json.dumps(entry) + "\n")
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wearer() -> Wearer:
    return Wearer()


@pytest.fixture
def steps_wearer() -> Wearer:
    """Five walks over days 0, 0, 1, 3, 4.

    Daily step totals by day offset: 0 -> 3484, 1 -> 2324, 3 -> 800, 4 -> 800.
    """
    w = Wearer()
    batches = [
        make_batch(1, start_time=DAY0_START, steps=WALK_STEPS),
        make_batch(2, start_time=1600565160, end_time=1600565760, steps=SHORT_WALK_STEPS),
        make_batch(3, start_time=1600651560, end_time=1600652760, steps=WALK_STEPS),
        make_batch(4, start_time=1600824360, end_time=1600824960, steps=EVENING_WALK_STEPS),
        make_batch(5, start_time=1600910760, end_time=1600911360, steps=EVENING_WALK_STEPS),
    ]
    for batch in batches:
        w.start_workout(batch)
        w.end_workout()
    return w


@pytest.fixture
def calories_wearer() -> Wearer:
    """Four walks over days 0, 0, 3, 4.

    Daily calorie totals by day offset: 0 -> 221, 3 -> 74, 4 -> 74.
    """
    w = Wearer()
    batches = [
        make_batch(1, start_time=DAY0_START, calories=WALK_CALORIES),
        make_batch(2, start_time=1600565160, end_time=1600565760, calories=[11, 13, 15, 17, 13]),
        make_batch(3, start_time=1600824360, end_time=1600824960, calories=[12, 14, 16, 18, 14]),
        make_batch(4, start_time=1600910760, end_time=1600911360, calories=[12, 14, 16, 18, 14]),
    ]
    for batch in batches:
        w.start_workout(batch)
        w.end_workout()
    return w


@pytest.fixture
def resting_batch() -> HeartRateBatch:
    """Ten minutes of resting heart rate on day 0."""
    return HeartRateBatch(start_time=1600565160, heart_rates=tuple(RESTING_HR))
