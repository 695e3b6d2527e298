"""
vocaplan Classroom - Runtime components around the scheduling engine.

This module provides:
- LessonDraft: Teacher-side normalize/generate/edit/confirm workflow
- ScheduleStore: Persist lessons locally (lessons.db)
- ProgressTracker: Track student progress (progress.db)
- StudyNavigator: Day availability and resumable day sessions
- build_day_activities: Deterministic per-day activity sequence
"""

from .store import ScheduleStore

from .progress import ProgressTracker

from .activities import build_day_activities, summarize_day

from .draft import LessonDraft, LessonConfirmedError

from .navigator import (
    StudyNavigator,
    DayAvailability,
    DaySession,
)

__all__ = [
    # Store
    "ScheduleStore",
    # Progress
    "ProgressTracker",
    # Activities
    "build_day_activities",
    "summarize_day",
    # Draft
    "LessonDraft",
    "LessonConfirmedError",
    # Navigator
    "StudyNavigator",
    "DayAvailability",
    "DaySession",
]
