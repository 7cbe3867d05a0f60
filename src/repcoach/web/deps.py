"""Request dependencies shared by the routers."""

from fastapi import Header

from ..services.auth import AuthSession


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """The signed-in user's id, taken from the ``X-User-Id`` header.

    Raises ``NotAuthenticatedError`` (answered with 401) when the header is
    missing, before any storage is touched.
    """
    auth = AuthSession.for_user(x_user_id) if x_user_id else AuthSession.anonymous()
    return auth.require_user_id()
