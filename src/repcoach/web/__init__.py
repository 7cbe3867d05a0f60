"""Web interface for repcoach."""

from .app import create_app

__all__ = ["create_app"]
