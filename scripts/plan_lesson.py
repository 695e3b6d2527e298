#!/usr/bin/env python3
"""
plan_lesson.py - Plan a multi-day vocabulary lesson from a word list.

Normalizes the word list, generates the day-by-day schedule, applies any
requested moves, prints the plan and (optionally) confirms it into the
local lesson store.

Word list formats:
  - JSON: [{"text": "cat", "activities": ["vocabulary", "phonics"]}, ...]
  - Plain text: one word per line, optionally "word|vocabulary,spelling"

Usage:
  python scripts/plan_lesson.py words.json --days 5
  python scripts/plan_lesson.py words.txt --days 7 --move bird:1:2:new
  python scripts/plan_lesson.py words.txt --days 5 --confirm --lesson-id week_12
  python scripts/plan_lesson.py words.txt --days 5 --show-day 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")

from vocaplan.classroom import LessonDraft, ScheduleStore, build_day_activities
from vocaplan.phonics import PhonicsResolver, load_phonics_table
from vocaplan.planner import PlannerError, WordSetError
from vocaplan.schemas import ACTIVITY_ORDER, Schedule
from vocaplan.settings import DEFAULT_LESSONS_DB, DEFAULT_PHONICS_TABLE

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ALL_ACTIVITIES = [a.value for a in ACTIVITY_ORDER]


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------

def read_word_entries(path: Path) -> list[dict]:
    """Read raw word entries from a JSON or plain-text word list."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    if path.suffix.lower() == ".json":
        return json.loads(content)

    entries = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "|" in line:
            text, activities = line.split("|", 1)
            entries.append({
                "text": text,
                "activities": [a.strip() for a in activities.split(",") if a.strip()],
            })
        else:
            entries.append({"text": line, "activities": ALL_ACTIVITIES})
    return entries


def parse_move(value: str) -> tuple[str, int, int, bool]:
    """
    Parse a move given as word:from:to[:new|review] (days are 1-based).

    Example: 'bird:2:3:new' -> ('bird', 1, 2, True)
    """
    parts = value.split(":")
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(f"Invalid move {value!r}, expected word:from:to[:new|review]")
    word, from_day, to_day = parts[0], int(parts[1]) - 1, int(parts[2]) - 1
    as_new = len(parts) == 4 and parts[3].lower() == "new"
    return word, from_day, to_day, as_new


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------

def format_schedule(schedule: Schedule) -> str:
    lines = [f"{schedule.day_count}-day schedule, {schedule.total_words} words"]
    for day in schedule.days:
        lines.append(
            f"  Day {day.day_index + 1:>2}: "
            f"new ({day.new_count}) {', '.join(day.new_words) or '-'} | "
            f"review ({day.review_count}) {', '.join(day.review_words) or '-'}"
        )
    return "\n".join(lines)


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(description="Plan a multi-day vocabulary lesson")
    parser.add_argument("words", type=Path, help="Word list (.json or .txt)")
    parser.add_argument("--days", type=int, default=5, help="Number of lesson days (1-15)")
    parser.add_argument("--move", type=parse_move, action="append", default=[],
                        help="Apply a move: word:from:to[:new|review] (1-based days)")
    parser.add_argument("--show-day", type=int, default=None,
                        help="Print the activity sequence of a day (1-based)")
    parser.add_argument("--phonics-table", type=Path, default=DEFAULT_PHONICS_TABLE,
                        help="Curated phonics table (.txt or .yaml)")
    parser.add_argument("--confirm", action="store_true", help="Save the confirmed lesson")
    parser.add_argument("--lesson-id", type=str, default=None, help="Lesson ID for --confirm")
    parser.add_argument("--title", type=str, default="", help="Lesson title for --confirm")
    parser.add_argument("--db", type=Path, default=DEFAULT_LESSONS_DB, help="Lesson database")

    args = parser.parse_args()

    if not args.words.exists():
        logger.error(f"Word list not found: {args.words}")
        sys.exit(1)

    logger.info(f"Loading words from {args.words}...")
    entries = read_word_entries(args.words)

    try:
        draft = LessonDraft.from_entries(entries, args.days)
    except WordSetError as e:
        logger.error("Word list has problems:")
        for issue in e.issues:
            logger.error(f"  - #{issue.index + 1} {issue.text!r}: {issue.kind.value} {issue.detail or ''}")
        sys.exit(1)
    except PlannerError as e:
        logger.error(f"Cannot plan lesson: {e}")
        sys.exit(1)

    logger.info(f"  {len(draft.words)} words over {args.days} days")

    for word, from_day, to_day, as_new in args.move:
        result = draft.move(word, from_day, to_day, as_new=as_new)
        if result.accepted:
            logger.info(f"Moved '{word}' to day {to_day + 1} ({'new' if as_new else 'review'})")
        else:
            logger.warning(f"Move of '{word}' rejected: {result.error.value}")
            for violation in result.violations:
                logger.warning(f"  - {violation.message}")

    print(format_schedule(draft.schedule))

    if args.show_day is not None:
        table = {}
        if args.phonics_table.exists():
            table = load_phonics_table(args.phonics_table)
        else:
            logger.warning(f"Phonics table not found, using fallback splitter: {args.phonics_table}")
        items = build_day_activities(
            draft.schedule, draft.words, args.show_day - 1, PhonicsResolver(table)
        )
        print(f"\nDay {args.show_day} activities:")
        for item in items:
            chunks = f" [{'-'.join(item.chunks)}]" if item.chunks else ""
            kind = "review" if item.is_review else "new"
            print(f"  {item.position + 1:>3}. {item.activity.value:<10} {item.word} ({kind}){chunks}")

    if args.confirm:
        if not args.lesson_id:
            logger.error("--confirm requires --lesson-id")
            sys.exit(1)
        record = draft.confirm(ScheduleStore(args.db), args.lesson_id, title=args.title)
        logger.info(f"Confirmed lesson '{record.lesson_id}' saved to {args.db}")


if __name__ == "__main__":
    main()
