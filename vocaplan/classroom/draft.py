"""
LessonDraft - The teacher's side of lesson creation.

Holds the working word set and schedule while the teacher edits:

    entries -> normalize -> generate -> [move / remove review]* -> confirm

Each accepted edit swaps in a new schedule value; rejected edits leave the
current schedule as it was. Once confirmed the lesson is saved to the
schedule store and the draft no longer accepts changes.
"""

from datetime import datetime
from typing import Optional

from vocaplan.planner import (
    EditResult,
    Move,
    apply_move,
    generate,
    normalize,
    remove_review,
    validate,
)
from vocaplan.schemas import LessonRecord, Schedule, ValidationResult, WordSet

from .store import ScheduleStore


class LessonConfirmedError(RuntimeError):
    """Raised when a confirmed lesson is edited."""


class LessonDraft:
    """Working copy of a lesson under construction."""

    def __init__(self, words: WordSet, day_count: int):
        """
        Initialize a draft and generate its first schedule.

        Args:
            words: Normalized word set
            day_count: Number of lesson days (1-15)
        """
        self.words = words
        self.day_count = day_count
        self.schedule: Schedule = generate(words, day_count)
        self.confirmed_at: Optional[datetime] = None
        self._history: list[tuple[WordSet, Schedule]] = []

    @classmethod
    def from_entries(cls, entries, day_count: int) -> "LessonDraft":
        """Normalize raw teacher input and start a draft from it."""
        return cls(normalize(entries), day_count)

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_at is not None

    def _ensure_editable(self):
        if self.is_confirmed:
            raise LessonConfirmedError("Lesson is confirmed and can no longer be edited")

    # -------------------------------------------------------------------------
    # Regeneration
    # -------------------------------------------------------------------------

    def renormalize(self, entries) -> Schedule:
        """Replace the word list; the schedule is regenerated from scratch."""
        self._ensure_editable()
        words = normalize(entries)
        schedule = generate(words, self.day_count)
        self._history.append((self.words, self.schedule))
        self.words, self.schedule = words, schedule
        return schedule

    def set_day_count(self, day_count: int) -> Schedule:
        """Change the number of days; manual edits are discarded."""
        self._ensure_editable()
        schedule = generate(self.words, day_count)
        self._history.append((self.words, self.schedule))
        self.day_count, self.schedule = day_count, schedule
        return schedule

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def _commit(self, result: EditResult) -> EditResult:
        if result.accepted:
            self._history.append((self.words, self.schedule))
            self.schedule = result.schedule
        return result

    def move(self, word: str, from_day: int, to_day: int, as_new: bool = False) -> EditResult:
        """Apply one drag-and-drop move."""
        self._ensure_editable()
        move = Move(word=word, from_day=from_day, to_day=to_day, as_new=as_new)
        return self._commit(apply_move(self.schedule, self.words, move))

    def remove_review(self, word: str, day_index: int) -> EditResult:
        """Drop one review occurrence."""
        self._ensure_editable()
        return self._commit(remove_review(self.schedule, self.words, word, day_index))

    def undo(self) -> bool:
        """Restore the previous schedule. Returns False if there is nothing to undo."""
        self._ensure_editable()
        if not self._history:
            return False
        self.words, self.schedule = self._history.pop()
        self.day_count = self.schedule.day_count
        return True

    def validate(self) -> ValidationResult:
        return validate(self.schedule, self.words)

    # -------------------------------------------------------------------------
    # Confirmation
    # -------------------------------------------------------------------------

    def confirm(self, store: ScheduleStore, lesson_id: str, title: str = "") -> LessonRecord:
        """
        Freeze the lesson and save it.

        Raises:
            LessonConfirmedError: If already confirmed
            ValueError: If the current schedule does not validate
        """
        self._ensure_editable()
        result = self.validate()
        if not result.is_valid:
            raise ValueError(
                f"Cannot confirm an invalid schedule: {[k.value for k in result.kinds]}"
            )

        confirmed_at = datetime.now()
        record = store.save(
            lesson_id,
            self.schedule,
            self.words,
            title=title,
            confirmed_at=confirmed_at,
        )
        self.confirmed_at = confirmed_at
        self._history.clear()
        return record
