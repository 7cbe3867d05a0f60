"""Signed-in user session.

The session is an explicit value handed to whatever needs the current user
id; there is no global auth state.
"""

from dataclasses import dataclass
from datetime import datetime

from ..errors import NotAuthenticatedError


@dataclass(frozen=True)
class AuthSession:
    """The identity a hosted auth provider handed back after sign-in."""

    user_id: str | None
    email: str | None = None
    access_token: str | None = None
    expires_at: datetime | None = None

    @classmethod
    def anonymous(cls) -> "AuthSession":
        return cls(user_id=None)

    @classmethod
    def for_user(cls, user_id: str, email: str | None = None) -> "AuthSession":
        return cls(user_id=user_id, email=email)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now()) >= self.expires_at

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id) and not self.is_expired()

    def require_user_id(self) -> str:
        """Return the user id, or raise if nobody is signed in."""
        if not self.is_authenticated:
            raise NotAuthenticatedError()
        return self.user_id
