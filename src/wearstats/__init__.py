"""wearstats: day-bucketed activity aggregation and N-day window statistics."""

from wearstats.buckets import DayBucket, DayBucketStore, MetricKind, RawSample, day_index
from wearstats.feed import (
    FeedError,
    HeartRateBatch,
    SampleBatch,
    WorkoutEnd,
    WorkoutStart,
    load_feed,
    replay_feed,
)
from wearstats.heart_rate import HeartRateBucketer, HeartRateSample, HeartRateStreams
from wearstats.wearer import Wearer
from wearstats.workout import (
    SessionConflictError,
    WorkoutSession,
    WorkoutState,
    WorkoutSummary,
)

__all__ = [
    # buckets
    "DayBucket",
    "DayBucketStore",
    "MetricKind",
    "RawSample",
    "day_index",
    # heart rate
    "HeartRateBucketer",
    "HeartRateSample",
    "HeartRateStreams",
    # workout
    "SessionConflictError",
    "WorkoutSession",
    "WorkoutState",
    "WorkoutSummary",
    # feed
    "FeedError",
    "HeartRateBatch",
    "SampleBatch",
    "WorkoutStart",
    "WorkoutEnd",
    "load_feed",
    "replay_feed",
    # aggregate
    "Wearer",
]
