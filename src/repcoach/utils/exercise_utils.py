"""Utilities for exercise name normalization and matching."""

import re
from difflib import SequenceMatcher

from ..data.library import COMMON_EXERCISES
from ..models.exercises import Exercise

ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
}


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, collapses whitespace and hyphens, and expands
    common abbreviations.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"[\s\-_]+", " ", normalized)

    if normalized in ABBREVIATIONS:
        return ABBREVIATIONS[normalized]

    for abbrev, full in ABBREVIATIONS.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def find_exercise(
    query: str,
    exercises: list[Exercise] | None = None,
    threshold: float = 0.8,
) -> Exercise | None:
    """Find an exercise by id, name or alias.

    Exact matches win; otherwise the closest name or alias is returned if
    its similarity ratio reaches ``threshold``.

    Args:
        query: Exercise id ("bench_press"), name or alias ("BB Bench")
        exercises: Library to search; defaults to the built-in one
        threshold: Minimum similarity ratio (0-1) for a fuzzy match

    Returns:
        The matching exercise, or None
    """
    if exercises is None:
        exercises = COMMON_EXERCISES

    for exercise in exercises:
        if exercise.id == query:
            return exercise

    target = normalize_exercise_name(query)
    best_match: Exercise | None = None
    best_score = 0.0
    for exercise in exercises:
        for candidate in (exercise.name, *exercise.aliases):
            normalized = normalize_exercise_name(candidate)
            if normalized == target:
                return exercise
            score = SequenceMatcher(None, target, normalized).ratio()
            if score > best_score:
                best_score = score
                best_match = exercise

    return best_match if best_score >= threshold else None
