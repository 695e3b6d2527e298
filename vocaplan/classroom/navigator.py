"""
StudyNavigator - Day sequencing, availability and resumable sessions.

Provides:
- Day availability (a day unlocks once the previous day is completed)
- Recommended day for the student
- Day sessions: the activity sequence plus where to resume
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from vocaplan.phonics import PhonicsResolver
from vocaplan.schemas import ActivityItem, DayStatus, LessonRecord

from .activities import build_day_activities
from .progress import ProgressTracker
from .store import ScheduleStore


class DayAvailability(str, Enum):
    """Day availability status for UI display."""
    LOCKED = "locked"           # Previous day not completed
    AVAILABLE = "available"     # Can start
    IN_PROGRESS = "in_progress" # Started but not completed
    COMPLETED = "completed"     # Finished


@dataclass
class DaySession:
    """One day's activities with the resume position."""
    lesson_id: str
    day_index: int
    items: list[ActivityItem]
    position: int = 0
    completed: bool = False
    new_words: list[str] = field(default_factory=list)
    review_words: list[str] = field(default_factory=list)

    @property
    def current_item(self) -> Optional[ActivityItem]:
        if self.position < len(self.items):
            return self.items[self.position]
        return None

    @property
    def remaining(self) -> int:
        return max(len(self.items) - self.position, 0)

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.items)


class StudyNavigator:
    """
    Navigate a confirmed lesson day by day.

    Combines ScheduleStore (content) with ProgressTracker (student state)
    to provide sessions with availability checking.
    """

    def __init__(
        self,
        store: ScheduleStore,
        progress: ProgressTracker,
        resolver: Optional[PhonicsResolver] = None,
    ):
        """
        Initialize navigator.

        Args:
            store: ScheduleStore instance for lesson access
            progress: ProgressTracker instance for student progress
            resolver: Phonics resolver shared by all sessions
        """
        self.store = store
        self.progress = progress
        self.resolver = resolver or PhonicsResolver()
        self._records: dict[str, LessonRecord] = {}

    def _get_record(self, lesson_id: str) -> LessonRecord:
        if lesson_id not in self._records:
            record = self.store.load_record(lesson_id)
            if record is None:
                raise KeyError(f"Lesson not found: {lesson_id}")
            self._records[lesson_id] = record
        return self._records[lesson_id]

    def day_count(self, lesson_id: str) -> int:
        return self._get_record(lesson_id).schedule.day_count

    # -------------------------------------------------------------------------
    # Availability Checking
    # -------------------------------------------------------------------------

    def get_day_availability(self, lesson_id: str, day_index: int) -> DayAvailability:
        """Check day availability based on progress."""
        day_progress = self.progress.get_day_progress(lesson_id, day_index)

        if day_progress.status == DayStatus.COMPLETED:
            return DayAvailability.COMPLETED
        if day_progress.status == DayStatus.IN_PROGRESS:
            return DayAvailability.IN_PROGRESS
        if day_index == 0 or self.progress.is_day_completed(lesson_id, day_index - 1):
            return DayAvailability.AVAILABLE
        return DayAvailability.LOCKED

    def is_day_available(self, lesson_id: str, day_index: int) -> bool:
        """Check if a day can be started."""
        return self.get_day_availability(lesson_id, day_index) != DayAvailability.LOCKED

    def get_recommended_day(self, lesson_id: str) -> int:
        """
        Get the recommended day for the student.

        Priority:
        1. Current day if in progress
        2. First available day not yet completed
        3. Last day (everything completed)
        """
        current = self.progress.get_current_day_index(lesson_id)
        if current is not None:
            if self.get_day_availability(lesson_id, current) == DayAvailability.IN_PROGRESS:
                return current

        for day_index in range(self.day_count(lesson_id)):
            if self.get_day_availability(lesson_id, day_index) == DayAvailability.AVAILABLE:
                return day_index

        return self.day_count(lesson_id) - 1

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def get_session(self, lesson_id: str, day_index: int) -> DaySession:
        """
        Build a day's session and mark the day started.

        Raises:
            KeyError: If the lesson is not stored
            PermissionError: If the day is still locked
        """
        record = self._get_record(lesson_id)
        if not self.is_day_available(lesson_id, day_index):
            raise PermissionError(f"Day {day_index + 1} of {lesson_id} is locked")

        items = build_day_activities(record.schedule, record.words, day_index, self.resolver)
        self.progress.start_day(lesson_id, day_index)
        day_progress = self.progress.get_day_progress(lesson_id, day_index)
        day = record.schedule.days[day_index]

        return DaySession(
            lesson_id=lesson_id,
            day_index=day_index,
            items=items,
            position=min(day_progress.position, len(items)),
            completed=day_progress.status == DayStatus.COMPLETED,
            new_words=list(day.new_words),
            review_words=list(day.review_words),
        )

    def advance(self, session: DaySession) -> Optional[ActivityItem]:
        """
        Move past the current activity and persist the position.

        Returns the next activity, or None once the day's sequence is done
        (the day is then marked completed).
        """
        if not session.is_finished:
            session.position += 1
            self.progress.set_position(session.lesson_id, session.day_index, session.position)

        if session.is_finished and not session.completed:
            self.complete_day(session)
        return session.current_item

    def complete_day(self, session: DaySession) -> Optional[int]:
        """
        Complete a day and return the next day index.

        Returns:
            Index of the next day, or None if the lesson is finished
        """
        self.progress.complete_day(session.lesson_id, session.day_index)
        session.completed = True
        next_day = session.day_index + 1
        if next_day >= self.day_count(session.lesson_id):
            return None
        return next_day

    # -------------------------------------------------------------------------
    # Progress Summary
    # -------------------------------------------------------------------------

    def get_progress_summary(self, lesson_id: str) -> dict:
        """Get progress summary for display."""
        record = self._get_record(lesson_id)
        stats = self.progress.get_completion_stats(lesson_id, record.schedule.day_count)
        days = [
            {
                "day_index": day.day_index,
                "new_count": day.new_count,
                "review_count": day.review_count,
                "availability": self.get_day_availability(lesson_id, day.day_index).value,
            }
            for day in record.schedule.days
        ]
        return {
            **stats,
            "lesson_id": lesson_id,
            "title": record.title,
            "total_words": record.schedule.total_words,
            "days": days,
            "recommended_day": self.get_recommended_day(lesson_id),
        }
