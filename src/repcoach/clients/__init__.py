"""Interactive input clients."""

from .questionnaire import ProfileQuestionnaire, custom_style

__all__ = ["ProfileQuestionnaire", "custom_style"]
