"""Watch event feeds: batch models and JSONL replay.

A feed file holds one JSON event per line::

    {"type": "workout", "workoutId": 1, "workoutType": "walk",
     "startTime": 1600565100, "endTime": 1600566300,
     "caloriesBurnedSamples": [12, 14], "stepSamples": [200, 210]}
    {"type": "heart_rate", "startTime": 1600565160, "heartRate": [70, 75]}

A "workout" event is a complete workout.  To interleave heart-rate readings
with a workout in progress, split it into "workout_start" (same fields as
"workout") and "workout_end" ({"workoutId", "endTime"}, both optional)
events; heart-rate events in between land in the active stream.

Events are applied in file order, so the file must be chronological.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Union

from wearstats.heart_rate import HEART_RATE_CADENCE_SEC

if TYPE_CHECKING:
    from wearstats.wearer import Wearer
    from wearstats.workout import WorkoutSummary


class FeedError(ValueError):
    """A feed line could not be parsed into an event."""


@dataclass(frozen=True)
class SampleBatch:
    """Calorie and step samples recorded over one workout."""

    workout_id: int | str | None
    workout_type: str | None
    start_time: float
    end_time: float | None = None
    calories: tuple[float, ...] = ()
    steps: tuple[float, ...] = ()

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "SampleBatch":
        try:
            return cls(
                workout_id=d.get("workoutId"),
                workout_type=d.get("workoutType"),
                start_time=d["startTime"],
                end_time=d.get("endTime"),
                calories=tuple(d.get("caloriesBurnedSamples", ())),
                steps=tuple(d.get("stepSamples", ())),
            )
        except KeyError as e:
            raise FeedError(f"workout event missing {e.args[0]!r}") from None


@dataclass(frozen=True)
class HeartRateBatch:
    """Heart-rate readings at a fixed cadence from ``start_time``."""

    start_time: float
    heart_rates: tuple[float, ...] = ()
    cadence_sec: float = HEART_RATE_CADENCE_SEC

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "HeartRateBatch":
        try:
            return cls(
                start_time=d["startTime"],
                heart_rates=tuple(d.get("heartRate", ())),
                cadence_sec=d.get("cadenceSec", HEART_RATE_CADENCE_SEC),
            )
        except KeyError as e:
            raise FeedError(f"heart_rate event missing {e.args[0]!r}") from None


@dataclass(frozen=True)
class WorkoutStart(SampleBatch):
    """Opens a workout; it stays in progress until a WorkoutEnd."""


@dataclass(frozen=True)
class WorkoutEnd:
    """Closes the workout in progress.  Unset fields fall back to the start event."""

    workout_id: int | str | None = None
    end_time: float | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "WorkoutEnd":
        return cls(workout_id=d.get("workoutId"), end_time=d.get("endTime"))


FeedEvent = Union[SampleBatch, WorkoutStart, WorkoutEnd, HeartRateBatch]

EVENT_TYPES = {
    "workout": SampleBatch,
    "workout_start": WorkoutStart,
    "workout_end": WorkoutEnd,
    "heart_rate": HeartRateBatch,
}


def parse_event(entry: dict[str, Any]) -> FeedEvent:
    """Build an event from a decoded JSON object."""
    if not isinstance(entry, dict):
        raise FeedError(f"expected a JSON object, got {type(entry).__name__}")
    kind = entry.get("type")
    event_cls = EVENT_TYPES.get(kind)
    if event_cls is None:
        raise FeedError(f"unknown event type {kind!r}")
    return event_cls.from_dict(entry)


def load_feed(path: str | Path) -> list[FeedEvent]:
    """Read a .jsonl feed file into events.

    Raises:
        FeedError: On malformed JSON or an unrecognised event.
    """
    events: list[FeedEvent] = []
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as e:
                raise FeedError(f"line {line_num}: invalid JSON ({e.msg})") from e
            try:
                events.append(parse_event(entry))
            except FeedError as e:
                raise FeedError(f"line {line_num}: {e}") from None
    return events


@dataclass
class ReplayResult:
    wearer: "Wearer"
    summaries: list["WorkoutSummary"] = field(default_factory=list)


def replay_feed(events: Iterable[FeedEvent], wearer: "Wearer | None" = None) -> ReplayResult:
    """Apply events to a wearer in order.

    A plain workout event is started, fed its samples and ended straight
    away.  Start and end events leave the workout open in between.
    """
    from wearstats.wearer import Wearer

    result = ReplayResult(wearer=wearer if wearer is not None else Wearer())
    for event in events:
        if isinstance(event, WorkoutStart):
            result.wearer.start_workout(event)
        elif isinstance(event, WorkoutEnd):
            result.summaries.append(result.wearer.end_workout(event.workout_id, event.end_time))
        elif isinstance(event, SampleBatch):
            result.wearer.start_workout(event)
            result.summaries.append(result.wearer.end_workout())
        else:
            result.wearer.ingest_heart_rate_batch(event)
    return result
