"""repcoach: workout execution, progress metrics and coaching triggers."""

__version__ = "0.1.0"
