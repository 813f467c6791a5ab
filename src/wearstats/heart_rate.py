"""Heart-rate sample classification into resting and active streams.

Unlike the metric stores, heart-rate samples are never merged: every sample
is kept individually and tagged with its day index so the statistics layer
can group by day later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from wearstats.buckets import day_index

# Simulated batches are sampled once a minute
HEART_RATE_CADENCE_SEC = 60


@dataclass(frozen=True)
class HeartRateSample:
    """One heart-rate reading."""

    day_index: int
    timestamp: float
    bpm: float
    resting: bool

    def to_dict(self) -> dict:
        return {
            "dayIndex": self.day_index,
            "timestamp": self.timestamp,
            "heartRate": self.bpm,
        }


@dataclass(frozen=True)
class HeartRateStreams:
    """Read-only view of both heart-rate streams."""

    resting: tuple[HeartRateSample, ...]
    active: tuple[HeartRateSample, ...]

    def to_dict(self) -> dict:
        return {
            "resting": [s.to_dict() for s in self.resting],
            "active": [s.to_dict() for s in self.active],
        }


@dataclass
class HeartRateBucketer:
    """Append-only resting/active heart-rate streams."""

    _resting: list[HeartRateSample] = field(default_factory=list, repr=False)
    _active: list[HeartRateSample] = field(default_factory=list, repr=False)

    def record(self, timestamp: float, bpm: float, is_resting: bool) -> HeartRateSample:
        sample = HeartRateSample(
            day_index=day_index(timestamp),
            timestamp=float(timestamp),
            bpm=bpm,
            resting=is_resting,
        )
        if is_resting:
            self._resting.append(sample)
        else:
            self._active.append(sample)
        return sample

    def record_batch(
        self,
        start_time: float,
        heart_rates: Sequence[float],
        is_resting: bool,
        cadence_sec: float = HEART_RATE_CADENCE_SEC,
    ) -> list[HeartRateSample]:
        """Record a batch sampled at a fixed cadence from ``start_time``."""
        return [
            self.record(start_time + i * cadence_sec, bpm, is_resting)
            for i, bpm in enumerate(heart_rates)
        ]

    def streams(self) -> HeartRateStreams:
        return HeartRateStreams(resting=tuple(self._resting), active=tuple(self._active))
