"""Outbound workout progress events.

Events are fire-and-forget: publishers never acknowledge, retry or order
beyond what the underlying transport does.
"""

import json
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from ..utils.logger import setup_logger

logger = setup_logger(__name__)


class UpdateType(str, Enum):
    """Kinds of workout progress event."""

    WORKOUT_STARTED = "workout_started"
    WORKOUT_UPDATED = "workout_updated"
    SET_COMPLETED = "set_completed"
    EXERCISE_COMPLETED = "exercise_completed"
    WORKOUT_COMPLETED = "workout_completed"
    WORKOUT_CANCELLED = "workout_cancelled"


@dataclass
class WorkoutUpdate:
    """A progress event for one workout session."""

    update_type: UpdateType
    session_id: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "type": self.update_type.value,
            "workout_session_id": self.session_id,
            "data": self.data,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


WorkoutUpdateListener = Callable[[WorkoutUpdate], None]


@runtime_checkable
class EventPublisher(Protocol):
    """Anything that accepts workout events."""

    def publish(self, event: WorkoutUpdate) -> None:
        ...


class NullPublisher:
    """Drops every event."""

    def publish(self, event: WorkoutUpdate) -> None:
        pass


class BufferedPublisher:
    """Queues events until someone drains them.

    When ``max_size`` is reached the oldest events are dropped.
    """

    def __init__(self, max_size: int | None = None):
        self._queue: deque[WorkoutUpdate] = deque(maxlen=max_size)

    def publish(self, event: WorkoutUpdate) -> None:
        self._queue.append(event)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def drain(self) -> list[WorkoutUpdate]:
        """Return and clear all queued events, oldest first."""
        events = list(self._queue)
        self._queue.clear()
        return events


class ChannelBroadcaster:
    """Delivers events to listeners registered per workout session."""

    def __init__(self):
        self._listeners: dict[str, list[WorkoutUpdateListener]] = {}

    def subscribe(
        self, session_id: str, listener: WorkoutUpdateListener
    ) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.setdefault(session_id, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(session_id)
            if not listeners:
                return
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                del self._listeners[session_id]

        return unsubscribe

    def listener_count(self, session_id: str | None = None) -> int:
        if session_id is not None:
            return len(self._listeners.get(session_id, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def publish(self, event: WorkoutUpdate) -> None:
        listeners = list(self._listeners.get(event.session_id, []))
        logger.debug(
            "Broadcasting %s for %s to %d listener(s)",
            event.update_type.value,
            event.session_id,
            len(listeners),
        )
        for listener in listeners:
            try:
                listener(event)
            except Exception:
                # A broken listener must not interrupt the workout.
                logger.exception(
                    "Workout update listener failed for session %s", event.session_id
                )

    def clear(self) -> None:
        self._listeners.clear()
