"""
Schedule schemas for vocaplan.

Defines Pydantic models for a lesson's day-by-day plan including:
- Days with new and review words (word references by text)
- The schedule itself (1-15 days)
- Validation results (violation kinds collected by the validator)
- Phonics chunk entries attached to scheduled words

All models are frozen: edits always produce a new schedule value.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


MIN_DAY_COUNT = 1
MAX_DAY_COUNT = 15


# -----------------------------------------------------------------------------
# Days and schedules
# -----------------------------------------------------------------------------

class Day(BaseModel):
    """
    One day of a lesson.

    review_words is kept ordered (introduction order) so the day's
    activity sequence is reproducible. Duplicates are representable on
    purpose: the validator reports them as duplicate_in_day.
    """
    model_config = ConfigDict(frozen=True)

    day_index: int = Field(..., ge=0)
    new_words: tuple[str, ...] = ()
    review_words: tuple[str, ...] = ()

    @computed_field
    @property
    def new_count(self) -> int:
        return len(self.new_words)

    @computed_field
    @property
    def review_count(self) -> int:
        return len(self.review_words)

    def contains(self, word: str) -> bool:
        return word in self.new_words or word in self.review_words


class Schedule(BaseModel):
    """Ordered sequence of days; days[i].day_index == i."""
    model_config = ConfigDict(frozen=True)

    days: tuple[Day, ...] = Field(..., min_length=MIN_DAY_COUNT, max_length=MAX_DAY_COUNT)

    @model_validator(mode='after')
    def day_indices_consecutive(self):
        for position, day in enumerate(self.days):
            if day.day_index != position:
                raise ValueError(
                    f"Day at position {position} has day_index {day.day_index}"
                )
        return self

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def last_day_index(self) -> int:
        return len(self.days) - 1

    @computed_field
    @property
    def total_words(self) -> int:
        """Number of distinct words introduced anywhere in the schedule."""
        return len({word for day in self.days for word in day.new_words})

    def introduction_day(self, word: str) -> Optional[int]:
        """Earliest day that introduces the word, or None."""
        for day in self.days:
            if word in day.new_words:
                return day.day_index
        return None

    def introduction_order(self) -> dict[str, tuple[int, int]]:
        """Map word -> (day_index, position) of its earliest introduction."""
        order = {}
        for day in self.days:
            for position, word in enumerate(day.new_words):
                order.setdefault(word, (day.day_index, position))
        return order

    def replace_day(self, day: Day) -> "Schedule":
        """Return a copy with one day swapped out."""
        days = list(self.days)
        days[day.day_index] = day
        return Schedule(days=tuple(days))


# -----------------------------------------------------------------------------
# Validation results
# -----------------------------------------------------------------------------

class ViolationKind(str, Enum):
    MISSING_INTRODUCTION = "missing_introduction"
    DUPLICATE_INTRODUCTION = "duplicate_introduction"
    REVIEW_BEFORE_LEARN = "review_before_learn"
    FINAL_DAY_HAS_NEW_WORDS = "final_day_has_new_words"
    DUPLICATE_IN_DAY = "duplicate_in_day"
    UNKNOWN_WORD = "unknown_word"


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    word: Optional[str] = None
    day_index: Optional[int] = None
    message: str


class ValidationResult(BaseModel):
    """Valid when no violations were collected."""
    model_config = ConfigDict(frozen=True)

    violations: tuple[Violation, ...] = ()

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def kinds(self) -> list[ViolationKind]:
        """Distinct violation kinds, in first-seen order."""
        kinds = []
        for violation in self.violations:
            if violation.kind not in kinds:
                kinds.append(violation.kind)
        return kinds

    def __bool__(self) -> bool:
        return self.is_valid


# -----------------------------------------------------------------------------
# Phonics chunks
# -----------------------------------------------------------------------------

class ChunkSource(str, Enum):
    CURATED = "curated"
    FALLBACK = "fallback"


class ChunkEntry(BaseModel):
    """Ordered phonics chunks for one word; they concatenate back to the word."""
    model_config = ConfigDict(frozen=True)

    word: str
    chunks: tuple[str, ...] = Field(..., min_length=1)
    source: ChunkSource
