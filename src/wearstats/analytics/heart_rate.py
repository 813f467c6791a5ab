"""Resting heart-rate averages."""

from __future__ import annotations

from itertools import groupby
from typing import Sequence

import numpy as np

from wearstats.heart_rate import HeartRateSample


def daily_means(samples: Sequence[HeartRateSample]) -> list[tuple[int, float]]:
    """Mean bpm for each run of consecutive same-day samples.

    Days without samples produce no entry.
    """
    means: list[tuple[int, float]] = []
    for day, run in groupby(samples, key=lambda s: s.day_index):
        means.append((day, float(np.mean([s.bpm for s in run]))))
    return means


def average_resting_heart_rate(samples: Sequence[HeartRateSample], n_days: int = 1) -> float:
    """Mean of the per-day mean resting heart rates.

    Args:
        samples: Resting-stream samples in recording order.
        n_days: Period length in days (>= 1).  Every recorded day is
            included regardless of this value.

    Returns:
        The two-level mean, or 0 if there are no samples.
    """
    if n_days < 1:
        raise ValueError(f"period must span at least 1 day, got {n_days}")
    if not samples:
        return 0
    return float(np.mean([mean for _, mean in daily_means(samples)]))
