"""
vocaplan Schemas - Pydantic models for the vocabulary lesson planner.

This module exports all schema classes for:
- Word: activity kinds, normalized words, word sets
- Schedule: days, schedules, validation results, phonics chunks
- Lesson: activity items, stored lesson records
- Progress: student progress tracking
"""

# Word schemas
from .word import (
    ActivityKind,
    ACTIVITY_ORDER,
    MAX_WORD_LENGTH,
    Word,
    WordSet,
    RawWordEntry,
    normalize_text,
    sort_activities,
)

# Schedule schemas
from .schedule import (
    Day,
    Schedule,
    MIN_DAY_COUNT,
    MAX_DAY_COUNT,
    ViolationKind,
    Violation,
    ValidationResult,
    ChunkSource,
    ChunkEntry,
)

# Lesson schemas
from .lesson import (
    ActivityItem,
    LessonRecord,
)

# Progress schemas
from .progress import (
    DayStatus,
    DayProgress,
    StudentProgress,
)

__all__ = [
    # Word
    'ActivityKind',
    'ACTIVITY_ORDER',
    'MAX_WORD_LENGTH',
    'Word',
    'WordSet',
    'RawWordEntry',
    'normalize_text',
    'sort_activities',
    # Schedule
    'Day',
    'Schedule',
    'MIN_DAY_COUNT',
    'MAX_DAY_COUNT',
    'ViolationKind',
    'Violation',
    'ValidationResult',
    'ChunkSource',
    'ChunkEntry',
    # Lesson
    'ActivityItem',
    'LessonRecord',
    # Progress
    'DayStatus',
    'DayProgress',
    'StudentProgress',
]
