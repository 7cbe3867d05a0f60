"""CLI commands for repcoach."""

from .coach import coach
from .init import init
from .nutrition import nutrition
from .profile import profile
from .readiness import readiness
from .records import records
from .workout import workout

__all__ = [
    "coach",
    "init",
    "nutrition",
    "profile",
    "readiness",
    "records",
    "workout",
]
