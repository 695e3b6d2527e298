"""
Schedule editor.

Applies one teacher move (a completed drag-and-drop) to a schedule:
take a word out of one day and drop it into another day, either as a new
introduction or as a review. The candidate schedule is validated before
it is handed back; a rejected move leaves the caller's schedule as it
was (schedules are immutable values).
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from vocaplan.schemas import Day, Schedule, Violation, ViolationKind, WordSet, normalize_text

from .validator import validate

logger = logging.getLogger(__name__)


class Move(BaseModel):
    """One discrete edit event from the UI."""
    model_config = ConfigDict(frozen=True)

    word: str
    from_day: int
    to_day: int
    as_new: bool = False


class EditErrorKind(str, Enum):
    WOULD_VIOLATE = "would_violate"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    WORD_NOT_IN_DAY = "word_not_in_day"


class EditResult(BaseModel):
    """Outcome of apply_move: a new schedule, or the reason it was rejected."""
    model_config = ConfigDict(frozen=True)

    schedule: Optional[Schedule] = None
    error: Optional[EditErrorKind] = None
    violations: tuple[Violation, ...] = Field(default=())

    @property
    def accepted(self) -> bool:
        return self.error is None

    @property
    def reasons(self) -> list[ViolationKind]:
        kinds = []
        for violation in self.violations:
            if violation.kind not in kinds:
                kinds.append(violation.kind)
        return kinds


def _in_introduction_order(reviews: list[str], order: dict[str, tuple[int, int]]) -> tuple[str, ...]:
    # Words without an introduction sort last; sorted() keeps ties stable.
    unknown = (len(order) + 1, 0)
    return tuple(sorted(reviews, key=lambda w: order.get(w, unknown)))


def _candidate(schedule: Schedule, text: str, move: Move, from_new: bool) -> Schedule:
    days = [
        {"new": list(day.new_words), "review": list(day.review_words)}
        for day in schedule.days
    ]

    source = days[move.from_day]["new" if from_new else "review"]
    source.remove(text)

    if move.as_new:
        days[move.to_day]["new"].append(text)
        # The introduction moved: drop reviews up to it, review on every later day.
        for index, day in enumerate(days):
            day["review"] = [w for w in day["review"] if w != text]
            if index > move.to_day:
                day["review"].append(text)
    else:
        days[move.to_day]["review"].append(text)

    draft = Schedule(days=tuple(
        Day(day_index=i, new_words=tuple(day["new"]), review_words=tuple(day["review"]))
        for i, day in enumerate(days)
    ))
    order = draft.introduction_order()
    return Schedule(days=tuple(
        Day(
            day_index=day.day_index,
            new_words=day.new_words,
            review_words=_in_introduction_order(list(day.review_words), order),
        )
        for day in draft.days
    ))


def apply_move(schedule: Schedule, words: WordSet, move: Move) -> EditResult:
    """
    Apply a single move and validate the result.

    Args:
        schedule: Current (valid) schedule; never modified
        words: Word set the schedule was built from
        move: Word, source day, target day and whether it lands as new

    Returns:
        EditResult with the new schedule, or with an error kind and the
        violations the candidate would have introduced
    """
    text = normalize_text(move.word)
    last = schedule.last_day_index

    if not (0 <= move.from_day <= last and 0 <= move.to_day <= last):
        logger.debug(f"Rejected move of '{text}': day out of range ({move.from_day} -> {move.to_day})")
        return EditResult(error=EditErrorKind.DAY_OUT_OF_RANGE)

    source_day = schedule.days[move.from_day]
    if text in source_day.new_words:
        from_new = True
    elif text in source_day.review_words:
        from_new = False
    else:
        logger.debug(f"Rejected move of '{text}': not on day {move.from_day}")
        return EditResult(error=EditErrorKind.WORD_NOT_IN_DAY)

    candidate = _candidate(schedule, text, move, from_new)
    result = validate(candidate, words)
    if not result.is_valid:
        logger.debug(f"Rejected move of '{text}': {[k.value for k in result.kinds]}")
        return EditResult(error=EditErrorKind.WOULD_VIOLATE, violations=result.violations)

    return EditResult(schedule=candidate)


def remove_review(schedule: Schedule, words: WordSet, word: str, day_index: int) -> EditResult:
    """Drop a single review occurrence of a word (reviews are optional reinforcement)."""
    text = normalize_text(word)
    if not 0 <= day_index <= schedule.last_day_index:
        return EditResult(error=EditErrorKind.DAY_OUT_OF_RANGE)

    day = schedule.days[day_index]
    if text not in day.review_words:
        return EditResult(error=EditErrorKind.WORD_NOT_IN_DAY)

    reviews = list(day.review_words)
    reviews.remove(text)
    candidate = schedule.replace_day(Day(
        day_index=day_index,
        new_words=day.new_words,
        review_words=tuple(reviews),
    ))
    result = validate(candidate, words)
    if not result.is_valid:
        return EditResult(error=EditErrorKind.WOULD_VIOLATE, violations=result.violations)
    return EditResult(schedule=candidate)
