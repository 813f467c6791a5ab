"""Per-day bucket aggregation for a single numeric metric.

Samples arrive in non-decreasing time order, so folding a new value only
ever touches the last bucket in the sequence: either the value lands on the
same day and replaces the last bucket with the sum, or a new bucket is
appended.  Buckets are immutable; no search or re-sort is ever needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


class MetricKind(str, Enum):
    """Metrics aggregated into day buckets."""

    STEPS = "steps"
    CALORIES = "calories"


def day_index(timestamp: float) -> int:
    """Days since the Unix epoch for a timestamp in seconds."""
    return int(timestamp // SECONDS_PER_DAY)


@dataclass(frozen=True)
class RawSample:
    """A single input event, kept verbatim for audit/replay."""

    timestamp: float
    value: float
    workout_id: int | str | None = None
    workout_type: str | None = None


@dataclass(frozen=True)
class DayBucket:
    """Aggregated value of one metric for one calendar day."""

    day_index: int
    value: float
    tag: str | None = None  # workout type, carried for calorie buckets

    def to_dict(self) -> dict:
        d = {"dayIndex": self.day_index, "value": self.value}
        if self.tag is not None:
            d["tag"] = self.tag
        return d


@dataclass
class DayBucketStore:
    """Ordered day buckets for one metric plus the raw samples behind them."""

    kind: MetricKind
    _buckets: list[DayBucket] = field(default_factory=list, repr=False)
    _raw: list[RawSample] = field(default_factory=list, repr=False)

    def check_day(self, day: int) -> None:
        """Raise ValueError if ``day`` precedes the last recorded day."""
        if self._buckets and day < self._buckets[-1].day_index:
            raise ValueError(
                f"{self.kind.value}: day {day} recorded after day {self._buckets[-1].day_index}"
            )

    def record(
        self,
        day: int,
        value: float,
        tag: str | None = None,
        sample: RawSample | None = None,
    ) -> DayBucket:
        """Add ``value`` to the bucket for ``day``.

        Args:
            day: Day index (days since epoch).
            value: Metric amount to fold in.  Assumed non-negative.
            tag: Optional tag (workout type).  Last write wins on a merge.
            sample: Raw sample behind the value.  Only retained when given.

        Returns:
            The bucket now holding ``day``.

        Raises:
            ValueError: If ``day`` precedes the last recorded day.
        """
        self.check_day(day)

        last = self._buckets[-1] if self._buckets else None
        if last is not None and last.day_index == day:
            bucket = replace(
                last,
                value=last.value + value,
                tag=last.tag if tag is None else tag,
            )
            self._buckets[-1] = bucket
        else:
            bucket = DayBucket(day_index=day, value=value, tag=tag)
            self._buckets.append(bucket)
            logger.debug("%s: new bucket for day %d", self.kind.value, day)

        if sample is not None:
            self._raw.append(sample)
        return bucket

    def record_sample(self, sample: RawSample, tag: str | None = None) -> DayBucket:
        """Fold a raw sample in, deriving its day from the timestamp."""
        return self.record(day_index(sample.timestamp), sample.value, tag=tag, sample=sample)

    def summary(self) -> tuple[DayBucket, ...]:
        return tuple(self._buckets)

    def raw(self) -> tuple[RawSample, ...]:
        return tuple(self._raw)

    def __len__(self) -> int:
        return len(self._buckets)
