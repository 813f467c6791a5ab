"""Workout session state machine.

A wearer has at most one workout in flight.  The machine moves
IDLE -> RECORDING on start, accumulates calorie/step samples while
recording, and RECORDING -> COMPLETED on finish, at which point it hands
back an immutable summary and drops back to IDLE.  Folding that summary
into the day stores is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class WorkoutState(str, Enum):
    IDLE = "idle"
    RECORDING = "recording"
    COMPLETED = "completed"


class SessionConflictError(RuntimeError):
    """A transition was requested from a state that does not allow it.

    Recoverable: the session is left untouched.
    """

    def __init__(self, message: str, state: WorkoutState) -> None:
        super().__init__(message)
        self.state = state


@dataclass(frozen=True)
class WorkoutSummary:
    """Totals for a completed workout."""

    workout_id: int | str | None
    workout_type: str | None
    start_time: float
    end_time: float | None
    calories: float
    steps: float

    def to_dict(self) -> dict:
        """External camelCase shape."""
        return {
            "workoutId": self.workout_id,
            "workoutType": self.workout_type,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "caloriesBurned": self.calories,
            "steps": self.steps,
        }

    def __repr__(self) -> str:
        return (
            f"WorkoutSummary({self.workout_type} #{self.workout_id}, "
            f"cal={self.calories:g}, steps={self.steps:g})"
        )


class WorkoutSession:
    """The single in-progress workout of a wearer."""

    def __init__(self) -> None:
        self.state = WorkoutState.IDLE
        self._reset()

    def _reset(self) -> None:
        self.workout_id: int | str | None = None
        self.workout_type: str | None = None
        self.start_time: float | None = None
        self.end_time: float | None = None
        self.calories: float = 0
        self.steps: float = 0

    @property
    def recording(self) -> bool:
        return self.state is WorkoutState.RECORDING

    def _require_recording(self, action: str) -> None:
        if not self.recording:
            logger.warning("Cannot %s: no workout in progress", action)
            raise SessionConflictError(
                f"cannot {action}: no workout in progress", self.state
            )

    def start(self, workout_type: str | None, start_time: float) -> None:
        """Begin recording a workout.

        Raises:
            SessionConflictError: If a workout is already being recorded.
        """
        if self.recording:
            logger.warning("Workout already in progress (%s)", self.workout_type)
            raise SessionConflictError("a workout is already in progress", self.state)
        self._reset()
        self.workout_type = workout_type
        self.start_time = start_time
        self.state = WorkoutState.RECORDING
        logger.debug("Workout started: %s at %s", workout_type, start_time)

    def add_calories(self, value: float) -> None:
        self._require_recording("add calories")
        self.calories += value

    def add_steps(self, value: float) -> None:
        self._require_recording("add steps")
        self.steps += value

    def finish(self, workout_id: int | str | None, end_time: float | None) -> WorkoutSummary:
        """Complete the workout and return its summary.

        The session is discarded afterwards; the machine is IDLE again.

        Raises:
            SessionConflictError: If no workout is being recorded.
        """
        self._require_recording("end workout")
        self.workout_id = workout_id
        self.end_time = end_time
        self.state = WorkoutState.COMPLETED

        summary = WorkoutSummary(
            workout_id=self.workout_id,
            workout_type=self.workout_type,
            start_time=self.start_time,
            end_time=self.end_time,
            calories=self.calories,
            steps=self.steps,
        )
        logger.debug("Workout completed: %r", summary)

        self._reset()
        self.state = WorkoutState.IDLE
        return summary
