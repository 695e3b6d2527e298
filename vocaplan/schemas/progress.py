"""
Progress tracking schemas for vocaplan.

Defines Pydantic models for student progress including:
- Day status tracking
- Resumable position within a day's activity sequence
- Student progress state per lesson
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class DayStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class DayProgress(BaseModel):
    lesson_id: str
    day_index: int = Field(..., ge=0)
    status: DayStatus = DayStatus.NOT_STARTED
    position: int = Field(default=0, ge=0)  # next activity to play
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class StudentProgress(BaseModel):
    student_id: str = "default"  # single-device mode
    lesson_id: str
    days: dict[int, DayProgress]
    current_day_index: Optional[int] = None
