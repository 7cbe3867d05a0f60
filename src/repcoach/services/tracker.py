"""In-memory state of a workout being performed."""

import asyncio
import math
from datetime import datetime
from typing import Awaitable, Callable
from uuid import uuid4

from ..errors import InvalidTransitionError, SessionClosedError
from ..metrics.rounding import round_half_up
from ..models.workout import (
    ExerciseProgress,
    SessionStatus,
    WorkoutExercise,
    WorkoutTemplate,
)
from ..utils.logger import setup_logger
from .realtime import EventPublisher, NullPublisher, UpdateType, WorkoutUpdate

logger = setup_logger(__name__)


class WorkoutTracker:
    """Walks through a workout set by set.

    The tracker only moves forward: completed sets are never taken back and
    the exercise index never decreases. After every completed set a rest
    period starts, using the rest configured on the exercise that was just
    performed. Rest is counted down cooperatively with ``tick`` or
    ``run_rest_countdown`` and can be cut short with ``skip_rest``.

    Not safe for concurrent use; one tracker per active workout.
    """

    def __init__(
        self,
        workout: WorkoutTemplate,
        publisher: EventPublisher | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.workout = workout
        self.publisher = publisher or NullPublisher()
        self._clock = clock

        self.session_key = uuid4().hex
        self.progress: list[ExerciseProgress] = [
            ExerciseProgress(exercise_id=ex.exercise_id, target_sets=ex.sets)
            for ex in workout.exercises
        ]
        self.current_exercise_index = 0
        self.current_set = 1
        self.is_resting = False
        self.rest_seconds_remaining = 0
        self.status = SessionStatus.IN_PROGRESS
        self.started_at = clock()
        self.completed_at: datetime | None = None

        self._publish(UpdateType.WORKOUT_STARTED, {"workout_name": workout.name})

    @property
    def current_exercise(self) -> WorkoutExercise:
        return self.workout.exercises[self.current_exercise_index]

    @property
    def current_progress(self) -> ExerciseProgress:
        return self.progress[self.current_exercise_index]

    @property
    def is_last_exercise(self) -> bool:
        return self.current_exercise_index == len(self.workout.exercises) - 1

    @property
    def is_finished(self) -> bool:
        return self.status != SessionStatus.IN_PROGRESS

    @property
    def total_completed_sets(self) -> int:
        return sum(p.completed_sets for p in self.progress)

    @property
    def total_target_sets(self) -> int:
        return sum(p.target_sets for p in self.progress)

    @property
    def progress_percent(self) -> int:
        return round_half_up(self.total_completed_sets / self.total_target_sets * 100)

    def elapsed_minutes(self, now: datetime | None = None) -> int:
        """Whole minutes between start and completion (or now)."""
        end = self.completed_at or now or self._clock()
        return math.floor((end - self.started_at).total_seconds() / 60)

    def complete_set(self) -> ExerciseProgress:
        """Record the current set as done and advance.

        Returns:
            Progress of the exercise the set belonged to
        """
        self._ensure_open()
        exercise = self.current_exercise
        progress = self.current_progress
        progress.record_set()
        logger.debug(
            "Set %d/%d done for %s", progress.completed_sets, progress.target_sets, exercise.name
        )
        self._publish(
            UpdateType.SET_COMPLETED,
            {
                "current_exercise": exercise.name,
                "current_set": self.current_set,
                "completed_sets": progress.completed_sets,
                "total_sets": progress.target_sets,
                "progress": self.progress_percent,
            },
        )

        if progress.is_completed:
            self._publish(
                UpdateType.EXERCISE_COMPLETED,
                {"exercise_id": exercise.exercise_id, "exercise_name": exercise.name},
            )
            if self.is_last_exercise:
                self._finish()
            else:
                self.current_exercise_index += 1
                self.current_set = 1
                self._start_rest(exercise.rest_seconds)
        else:
            self.current_set += 1
            self._start_rest(exercise.rest_seconds)

        return progress

    def skip_rest(self) -> None:
        """End the rest period now. Set counts are left alone."""
        was_resting = self.is_resting
        self._clear_rest()
        if was_resting:
            self._publish_rest_ended(skipped=True)

    def tick(self, seconds: int = 1) -> int:
        """Count rest down by ``seconds``. Returns the seconds left."""
        if not self.is_resting:
            return 0
        self.rest_seconds_remaining = max(0, self.rest_seconds_remaining - seconds)
        if self.rest_seconds_remaining == 0:
            self.is_resting = False
            self._publish_rest_ended(skipped=False)
        return self.rest_seconds_remaining

    async def run_rest_countdown(
        self,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        """Tick once per second until the rest period ends.

        Returns as soon as ``skip_rest`` is called. Cancelling the task
        running this coroutine leaves the tracker in its last ticked state.
        """
        while self.is_resting:
            await sleep(1)
            if not self.is_resting:
                break
            remaining = self.tick()
            if on_tick is not None:
                on_tick(remaining)

    def cancel(self) -> None:
        """Abandon the workout."""
        if self.is_finished:
            raise InvalidTransitionError(
                f"Cannot cancel a workout that is {self.status.value}"
            )
        self.status = SessionStatus.CANCELLED
        self._clear_rest()
        logger.info("Workout '%s' cancelled", self.workout.name)
        self._publish(
            UpdateType.WORKOUT_CANCELLED,
            {"completed_sets": self.total_completed_sets},
        )

    def snapshot(self) -> dict:
        """Current state, suitable for display or broadcasting."""
        return {
            "session_key": self.session_key,
            "workout_name": self.workout.name,
            "status": self.status.value,
            "current_exercise_index": self.current_exercise_index,
            "current_exercise": self.current_exercise.name,
            "current_set": self.current_set,
            "is_resting": self.is_resting,
            "rest_seconds_remaining": self.rest_seconds_remaining,
            "progress": self.progress_percent,
            "exercises": [p.to_dict() for p in self.progress],
        }

    def _ensure_open(self) -> None:
        if self.is_finished:
            raise SessionClosedError(f"Workout is already {self.status.value}")

    def _start_rest(self, seconds: int) -> None:
        self.is_resting = seconds > 0
        self.rest_seconds_remaining = max(0, seconds)

    def _clear_rest(self) -> None:
        self.is_resting = False
        self.rest_seconds_remaining = 0

    def _publish_rest_ended(self, skipped: bool) -> None:
        self._publish(
            UpdateType.WORKOUT_UPDATED,
            {
                "is_resting": False,
                "rest_skipped": skipped,
                "current_exercise": self.current_exercise.name,
                "current_set": self.current_set,
                "progress": self.progress_percent,
            },
        )

    def _finish(self) -> None:
        self.status = SessionStatus.COMPLETED
        self.completed_at = self._clock()
        self._clear_rest()
        logger.info(
            "Workout '%s' completed: %d sets", self.workout.name, self.total_completed_sets
        )
        self._publish(
            UpdateType.WORKOUT_COMPLETED,
            {
                "completed_sets": self.total_completed_sets,
                "duration_minutes": self.elapsed_minutes(),
            },
        )

    def _publish(self, update_type: UpdateType, data: dict) -> None:
        event = WorkoutUpdate(update_type=update_type, session_id=self.session_key, data=data)
        try:
            self.publisher.publish(event)
        except Exception:
            # Broadcasting is best effort; local progress is what counts.
            logger.exception("Failed to broadcast %s", update_type.value)
