"""
Schedule validator.

Checks a candidate schedule (generated or edited) against the lesson
invariants and returns every violation found:

- each word is introduced exactly once
- a word is only reviewed after the day it was introduced
- the final day introduces nothing (unless the lesson has a single day)
- no word occurs twice within one day
- the schedule references only words of the word set
"""

from collections import Counter

from vocaplan.schemas import (
    Schedule,
    ValidationResult,
    Violation,
    ViolationKind,
    WordSet,
)


def _check_introductions(schedule: Schedule, words: WordSet) -> list[Violation]:
    introduced = Counter(word for day in schedule.days for word in day.new_words)
    violations = []

    for text in words.texts:
        count = introduced.get(text, 0)
        if count == 0:
            violations.append(Violation(
                kind=ViolationKind.MISSING_INTRODUCTION,
                word=text,
                message=f"'{text}' is never introduced as a new word",
            ))
        elif count > 1:
            violations.append(Violation(
                kind=ViolationKind.DUPLICATE_INTRODUCTION,
                word=text,
                message=f"'{text}' is introduced {count} times",
            ))
    return violations


def _check_unknown_words(schedule: Schedule, words: WordSet) -> list[Violation]:
    known = set(words.texts)
    violations = []
    reported = set()
    for day in schedule.days:
        for text in (*day.new_words, *day.review_words):
            if text not in known and (text, day.day_index) not in reported:
                reported.add((text, day.day_index))
                violations.append(Violation(
                    kind=ViolationKind.UNKNOWN_WORD,
                    word=text,
                    day_index=day.day_index,
                    message=f"Day {day.day_index + 1} references '{text}', which is not in the word list",
                ))
    return violations


def _check_review_order(schedule: Schedule) -> list[Violation]:
    first_intro = {}
    for day in schedule.days:
        for text in day.new_words:
            first_intro.setdefault(text, day.day_index)

    violations = []
    for day in schedule.days:
        for text in dict.fromkeys(day.review_words):
            intro_day = first_intro.get(text)
            if intro_day is None or intro_day >= day.day_index:
                violations.append(Violation(
                    kind=ViolationKind.REVIEW_BEFORE_LEARN,
                    word=text,
                    day_index=day.day_index,
                    message=f"'{text}' is reviewed on day {day.day_index + 1} before it is learned",
                ))
    return violations


def _check_final_day(schedule: Schedule) -> list[Violation]:
    if schedule.day_count == 1:
        return []
    last = schedule.days[-1]
    return [
        Violation(
            kind=ViolationKind.FINAL_DAY_HAS_NEW_WORDS,
            word=text,
            day_index=last.day_index,
            message=f"The final day is review-only, but introduces '{text}'",
        )
        for text in last.new_words
    ]


def _check_duplicates_in_day(schedule: Schedule) -> list[Violation]:
    violations = []
    for day in schedule.days:
        counts = Counter((*day.new_words, *day.review_words))
        for text, count in counts.items():
            if count > 1:
                violations.append(Violation(
                    kind=ViolationKind.DUPLICATE_IN_DAY,
                    word=text,
                    day_index=day.day_index,
                    message=f"'{text}' appears {count} times on day {day.day_index + 1}",
                ))
    return violations


def validate(schedule: Schedule, words: WordSet) -> ValidationResult:
    """Run every check and collect all violations (no short-circuit)."""
    violations = [
        *_check_introductions(schedule, words),
        *_check_unknown_words(schedule, words),
        *_check_review_order(schedule),
        *_check_final_day(schedule),
        *_check_duplicates_in_day(schedule),
    ]
    return ValidationResult(violations=tuple(violations))
