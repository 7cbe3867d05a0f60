"""Error types and the result wrapper returned by collaborator calls."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class RepCoachError(Exception):
    """Base class for repcoach errors."""


class ValidationError(RepCoachError, ValueError):
    """Raised when a plan or a metric input is malformed."""


class InvalidTransitionError(RepCoachError):
    """Raised when a workout session status change is not allowed."""


class SessionClosedError(InvalidTransitionError):
    """Raised when mutating a session that is no longer in progress."""


class NotAuthenticatedError(RepCoachError):
    """Raised when a persistence call is made without a signed-in user."""

    def __init__(self, message: str = "Please sign in"):
        super().__init__(message)


@dataclass
class Result(Generic[T]):
    """Outcome of a call into a storage or auth collaborator.

    Collaborator failures are carried as a one-line error string rather
    than raised, so callers can show them without unwinding local state.
    """

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Result[T]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Return the data or raise if the call failed."""
        if not self.success:
            raise RepCoachError(self.error or "Unknown error")
        return self.data
