"""
WordSet normalizer.

Turns the teacher's raw (text, activities) entries into a WordSet:
- trims, lowercases and length-checks each text
- resolves activity names
- merges duplicates by unioning their activities

Every problem is collected before failing, so the caller can show the
teacher the whole list at once.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from vocaplan.schemas import (
    ActivityKind,
    MAX_WORD_LENGTH,
    RawWordEntry,
    Word,
    WordSet,
    normalize_text,
    sort_activities,
)

from .errors import InputIssue, IssueKind, WordSetError


def _coerce_entry(entry: Any) -> tuple[str, list]:
    """Accept RawWordEntry, Word, {text, activities} mappings or (text, activities) pairs."""
    if isinstance(entry, (RawWordEntry, Word)):
        return entry.text, list(entry.activities)
    if isinstance(entry, Mapping):
        return entry.get("text", ""), list(entry.get("activities") or [])
    text, activities = entry
    return text, list(activities or [])


def normalize(entries: Iterable[Any]) -> WordSet:
    """
    Normalize raw entries into a WordSet.

    Order is first occurrence; duplicates union their activity sets, so
    normalize(normalize(x).to_entries()) == normalize(x).

    Raises:
        WordSetError: with every InvalidWord / MissingActivity /
            UnknownActivity issue found in the input.
    """
    issues: list[InputIssue] = []
    merged: dict[str, set[ActivityKind]] = {}

    for index, entry in enumerate(entries):
        raw_text, raw_activities = _coerce_entry(entry)
        text = normalize_text(raw_text)
        entry_ok = True

        if not text:
            issues.append(InputIssue(
                kind=IssueKind.INVALID_WORD, index=index, text=str(raw_text),
                detail="empty after trimming",
            ))
            entry_ok = False
        elif len(text) > MAX_WORD_LENGTH:
            issues.append(InputIssue(
                kind=IssueKind.INVALID_WORD, index=index, text=str(raw_text),
                detail=f"longer than {MAX_WORD_LENGTH} characters",
            ))
            entry_ok = False

        kinds: set[ActivityKind] = set()
        unknown = []
        for name in raw_activities:
            try:
                kinds.add(ActivityKind.parse(name))
            except ValueError:
                unknown.append(str(name))

        if unknown:
            issues.append(InputIssue(
                kind=IssueKind.UNKNOWN_ACTIVITY, index=index, text=str(raw_text),
                detail=", ".join(unknown),
            ))
            entry_ok = False
        elif not kinds:
            issues.append(InputIssue(
                kind=IssueKind.MISSING_ACTIVITY, index=index, text=str(raw_text),
            ))
            entry_ok = False

        if entry_ok:
            merged.setdefault(text, set()).update(kinds)

    if issues:
        raise WordSetError(issues)

    return WordSet(words=tuple(
        Word(text=text, activities=sort_activities(kinds))
        for text, kinds in merged.items()
    ))


def merge(word_set: WordSet, entries: Iterable[Any]) -> WordSet:
    """Re-normalize an existing word set together with additional entries."""
    return normalize([*word_set.to_entries(), *entries])
