"""
vocaplan Planner - Lesson scheduling engine.

This module provides:
- normalize: raw teacher input -> WordSet
- generate: WordSet + day count -> Schedule
- validate: Schedule + WordSet -> ValidationResult
- apply_move / remove_review: teacher edits -> EditResult
"""

from .errors import (
    PlannerError,
    WordSetError,
    EmptyWordSet,
    InvalidDayCount,
    GeneratorInvariantViolation,
    InputIssue,
    IssueKind,
)

from .normalizer import normalize, merge

from .validator import validate

from .generator import (
    generate,
    allocate_new_counts,
    build_reviews,
    FRONT_LOAD_RATIO,
    DECAY_RATIO,
)

from .editor import (
    Move,
    EditResult,
    EditErrorKind,
    apply_move,
    remove_review,
)

__all__ = [
    # Errors
    "PlannerError",
    "WordSetError",
    "EmptyWordSet",
    "InvalidDayCount",
    "GeneratorInvariantViolation",
    "InputIssue",
    "IssueKind",
    # Normalizer
    "normalize",
    "merge",
    # Validator
    "validate",
    # Generator
    "generate",
    "allocate_new_counts",
    "build_reviews",
    "FRONT_LOAD_RATIO",
    "DECAY_RATIO",
    # Editor
    "Move",
    "EditResult",
    "EditErrorKind",
    "apply_move",
    "remove_review",
]
