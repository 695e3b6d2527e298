"""
Lesson schemas for vocaplan.

Defines Pydantic models for what a student works through:
- Activity items (one word in one activity on one day)
- Stored lesson records (word set + schedule, as persisted locally)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .schedule import Schedule
from .word import ActivityKind, WordSet


class ActivityItem(BaseModel):
    """A single step of a day's activity sequence."""
    model_config = ConfigDict(frozen=True)

    day_index: int
    position: int           # 0-based index in the day's sequence
    activity: ActivityKind
    word: str
    is_review: bool
    chunks: Optional[tuple[str, ...]] = None  # phonics items only


class LessonRecord(BaseModel):
    """Plain-data record handed to the schedule store."""
    lesson_id: str
    title: str = ""
    words: WordSet
    schedule: Schedule
    confirmed_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_at is not None
