"""Workout execution, persistence and coaching services."""

from .auth import AuthSession
from .coaching import CoachingTrigger, CoachMessage, select_message
from .persistence import SessionPersistenceAdapter, build_logs, build_session
from .realtime import (
    BufferedPublisher,
    ChannelBroadcaster,
    EventPublisher,
    NullPublisher,
    UpdateType,
    WorkoutUpdate,
)
from .tracker import WorkoutTracker

__all__ = [
    "AuthSession",
    "BufferedPublisher",
    "ChannelBroadcaster",
    "CoachingTrigger",
    "CoachMessage",
    "EventPublisher",
    "NullPublisher",
    "SessionPersistenceAdapter",
    "UpdateType",
    "WorkoutTracker",
    "WorkoutUpdate",
    "build_logs",
    "build_session",
    "select_message",
]
