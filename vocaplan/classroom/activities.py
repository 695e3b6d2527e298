"""
Day activity sequencing.

Expands one scheduled day into the ordered list of activities a student
plays through. The order is fixed so that two runs over the same schedule
give the same sequence and a saved position can be resumed:

    Vocabulary -> Phonics -> Spelling
    within each activity: new words, then review words (schedule order)

Only words tagged with an activity appear in it. Phonics items carry the
word's chunks.
"""

from typing import Optional

from vocaplan.phonics import PhonicsResolver
from vocaplan.schemas import ACTIVITY_ORDER, ActivityItem, ActivityKind, Schedule, WordSet


def build_day_activities(
    schedule: Schedule,
    words: WordSet,
    day_index: int,
    resolver: Optional[PhonicsResolver] = None,
) -> list[ActivityItem]:
    """
    Build the activity sequence for one day.

    Args:
        schedule: Confirmed schedule
        words: Word set (provides each word's activity tags)
        day_index: 0-based day
        resolver: Chunk resolver for phonics items (fallback-only if omitted)

    Raises:
        IndexError: If day_index is outside the schedule
    """
    if not 0 <= day_index < schedule.day_count:
        raise IndexError(f"Day {day_index} is outside a {schedule.day_count}-day schedule")

    resolver = resolver or PhonicsResolver()
    day = schedule.days[day_index]
    items: list[ActivityItem] = []

    for activity in ACTIVITY_ORDER:
        for is_review, texts in ((False, day.new_words), (True, day.review_words)):
            for text in texts:
                word = words.get(text)
                if word is None or not word.has_activity(activity):
                    continue
                chunks = None
                if activity == ActivityKind.PHONICS:
                    chunks = resolver.resolve(text).chunks
                items.append(ActivityItem(
                    day_index=day_index,
                    position=len(items),
                    activity=activity,
                    word=text,
                    is_review=is_review,
                    chunks=chunks,
                ))

    return items


def summarize_day(items: list[ActivityItem]) -> dict[str, int]:
    """Count items per activity, for display next to a day."""
    summary = {activity.value: 0 for activity in ACTIVITY_ORDER}
    for item in items:
        summary[item.activity.value] += 1
    return summary
