"""
Schedule generator.

Partitions a word set into a day-by-day plan:
- front-loaded introduction (day 0 takes the largest share)
- decaying introductions on the interior days
- a review-only final day
- every introduced word reviewed on every later day

The output is run through the validator before it is returned.
"""

import logging
import math
from fractions import Fraction

from vocaplan.schemas import Day, MAX_DAY_COUNT, MIN_DAY_COUNT, Schedule, WordSet

from .errors import EmptyWordSet, GeneratorInvariantViolation, InvalidDayCount
from .validator import validate

logger = logging.getLogger(__name__)

# Share of the whole word set introduced on day 0
FRONT_LOAD_RATIO = 0.4
# Share of the remaining words introduced on each interior day
DECAY_RATIO = 0.8


def ceil_share(count: int, ratio: float) -> int:
    """ceil(count * ratio) computed exactly (0.4 * 5 is 2, not 2.0000000000000004)."""
    return math.ceil(count * Fraction(str(ratio)))


def allocate_new_counts(
    total: int,
    day_count: int,
    front_load_ratio: float = FRONT_LOAD_RATIO,
    decay_ratio: float = DECAY_RATIO,
) -> list[int]:
    """
    Number of new words per day.

    Day 0 gets ceil(total * front_load_ratio) clamped to [1, total]. Each
    interior day gets ceil(remaining * decay_ratio), never more than the day
    before it. The final day gets nothing. Words still unplaced after the
    interior days are added one per day from day 0 forward (wrapping over
    the non-final days), which keeps the counts non-increasing. This
    intentionally differs from piling leftovers onto the second-to-last day,
    which could make that day heavier than day 0.
    """
    if day_count == 1:
        return [total]

    counts = [0] * day_count
    counts[0] = min(max(ceil_share(total, front_load_ratio), 1), total)
    remaining = total - counts[0]

    for day_index in range(1, day_count - 1):
        if remaining == 0:
            break
        share = min(ceil_share(remaining, decay_ratio), remaining, counts[day_index - 1])
        counts[day_index] = share
        remaining -= share

    if remaining:
        logger.debug(f"Re-homing {remaining} leftover words onto non-final days")
    non_final = day_count - 1
    day_index = 0
    while remaining:
        counts[day_index % non_final] += 1
        remaining -= 1
        day_index += 1

    return counts


def build_reviews(new_words_by_day: list[list[str]]) -> list[list[str]]:
    """Review list per day: every word introduced on an earlier day, in introduction order."""
    reviews = []
    learned: list[str] = []
    for new_words in new_words_by_day:
        reviews.append(list(learned))
        learned.extend(new_words)
    return reviews


def generate(words: WordSet, day_count: int) -> Schedule:
    """
    Build the initial schedule for a word set.

    Args:
        words: Normalized word set (allocation follows its order)
        day_count: Number of lesson days, 1-15

    Returns:
        A schedule satisfying every validator check

    Raises:
        EmptyWordSet: if the word set has no words
        InvalidDayCount: if day_count is outside 1-15
        GeneratorInvariantViolation: if the result fails validation (a bug)
    """
    if not MIN_DAY_COUNT <= day_count <= MAX_DAY_COUNT:
        raise InvalidDayCount(
            f"day_count must be between {MIN_DAY_COUNT} and {MAX_DAY_COUNT}, got {day_count}"
        )
    if len(words) == 0:
        raise EmptyWordSet("Cannot schedule an empty word list")

    texts = list(words.texts)
    counts = allocate_new_counts(len(texts), day_count)

    new_words_by_day = []
    start = 0
    for count in counts:
        new_words_by_day.append(texts[start:start + count])
        start += count

    reviews = build_reviews(new_words_by_day)
    schedule = Schedule(days=tuple(
        Day(day_index=i, new_words=tuple(new_words), review_words=tuple(review_words))
        for i, (new_words, review_words) in enumerate(zip(new_words_by_day, reviews))
    ))

    result = validate(schedule, words)
    if not result.is_valid:
        logger.error(
            f"Generator produced an invalid schedule for {len(texts)} words over "
            f"{day_count} days: {[k.value for k in result.kinds]}"
        )
        raise GeneratorInvariantViolation(list(result.violations))

    logger.debug(f"Generated {day_count}-day schedule for {len(texts)} words: {counts}")
    return schedule
