"""The wearer aggregate: one workout session, day stores and heart-rate streams.

All mutation is synchronous and single-threaded.  Heart-rate samples are
classified as resting or active depending on whether a workout is being
recorded at the time they arrive.
"""

from __future__ import annotations

import logging

from wearstats.analytics.heart_rate import average_resting_heart_rate
from wearstats.analytics.windows import (
    Reduction,
    average_over_window,
    average_per_workout,
    min_or_max_over_window,
)
from wearstats.buckets import DayBucket, DayBucketStore, MetricKind, RawSample, day_index
from wearstats.feed import HeartRateBatch, SampleBatch
from wearstats.heart_rate import HeartRateBucketer, HeartRateSample, HeartRateStreams
from wearstats.workout import WorkoutSession, WorkoutSummary

logger = logging.getLogger(__name__)


class Wearer:
    """A single wearer's activity state and statistics queries."""

    def __init__(self, heart_rate_batch: HeartRateBatch | None = None) -> None:
        self.session = WorkoutSession()
        self.stores: dict[MetricKind, DayBucketStore] = {
            kind: DayBucketStore(kind) for kind in MetricKind
        }
        self.heart_rate = HeartRateBucketer()
        self.is_resting = True
        self._pending: SampleBatch | None = None

        if heart_rate_batch is not None:
            self.ingest_heart_rate_batch(heart_rate_batch)

    # ------------------------------------------------------------------
    # Workouts
    # ------------------------------------------------------------------

    @property
    def active_session(self) -> WorkoutSession | None:
        return self.session if self.session.recording else None

    def start_workout(self, batch: SampleBatch) -> None:
        """Start a workout and feed it the batch's calorie and step samples.

        Raises:
            SessionConflictError: If a workout is already in progress.
        """
        self.session.start(batch.workout_type, batch.start_time)
        self.is_resting = False
        self._pending = batch
        for calories in batch.calories:
            self.session.add_calories(calories)
        for steps in batch.steps:
            self.session.add_steps(steps)

    def record_calories(self, value: float) -> None:
        self.session.add_calories(value)

    def record_steps(self, value: float) -> None:
        self.session.add_steps(value)

    def end_workout(
        self,
        workout_id: int | str | None = None,
        end_time: float | None = None,
    ) -> WorkoutSummary:
        """Finish the workout in progress and fold it into the day stores.

        ``workout_id`` and ``end_time`` default to the values carried by the
        batch the workout was started with.

        Raises:
            SessionConflictError: If no workout is in progress.
            ValueError: If the workout started on a day before the last
                recorded one.  The workout stays in progress.
        """
        if self.session.recording:
            day = day_index(self.session.start_time)
            for store in self.stores.values():
                store.check_day(day)

        pending = self._pending
        if pending is not None:
            workout_id = pending.workout_id if workout_id is None else workout_id
            end_time = pending.end_time if end_time is None else end_time

        summary = self.session.finish(workout_id, end_time)
        self.is_resting = True
        self._pending = None

        day = day_index(summary.start_time)
        self.stores[MetricKind.STEPS].record(
            day,
            summary.steps,
            sample=RawSample(summary.start_time, summary.steps, summary.workout_id, summary.workout_type),
        )
        self.stores[MetricKind.CALORIES].record(
            day,
            summary.calories,
            tag=summary.workout_type,
            sample=RawSample(summary.start_time, summary.calories, summary.workout_id, summary.workout_type),
        )
        logger.debug("Folded %r into day %d", summary, day)
        return summary

    # ------------------------------------------------------------------
    # Heart rate
    # ------------------------------------------------------------------

    def record_heart_rate(self, timestamp: float, bpm: float) -> HeartRateSample:
        return self.heart_rate.record(timestamp, bpm, self.is_resting)

    def ingest_heart_rate_batch(self, batch: HeartRateBatch) -> list[HeartRateSample]:
        return self.heart_rate.record_batch(
            batch.start_time, batch.heart_rates, self.is_resting, cadence_sec=batch.cadence_sec
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def data_summary(self, kind: MetricKind | str) -> tuple[DayBucket, ...]:
        return self.stores[MetricKind(kind)].summary()

    def steps_summary(self) -> tuple[DayBucket, ...]:
        return self.data_summary(MetricKind.STEPS)

    def heart_rate_streams(self) -> HeartRateStreams:
        return self.heart_rate.streams()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def min_or_max_steps(self, n_days: int, reduction: Reduction | str) -> float:
        return min_or_max_over_window(self.steps_summary(), n_days, reduction)

    def average_steps(self, n_days: int) -> float:
        return average_over_window(self.steps_summary(), n_days)

    def average_resting_heart_rate(self, n_days: int = 1) -> float:
        return average_resting_heart_rate(self.heart_rate_streams().resting, n_days)

    def average_calories_per_workout(self, n_days: int, workout_type: str) -> float:
        return average_per_workout(self.data_summary(MetricKind.CALORIES), n_days, workout_type)

    def workout_types(self) -> list[str]:
        """Distinct workout types seen in the calorie buckets, in first-seen order."""
        seen: dict[str, None] = {}
        for bucket in self.data_summary(MetricKind.CALORIES):
            if bucket.tag is not None:
                seen.setdefault(bucket.tag)
        return list(seen)
