"""Built-in reference data."""

from .library import BUILTIN_TEMPLATES, COMMON_EXERCISES, get_template

__all__ = ["BUILTIN_TEMPLATES", "COMMON_EXERCISES", "get_template"]
