"""
Word schemas for vocaplan.

Defines Pydantic models for the teacher's word list:
- Activity kinds a word is practised in
- Normalized words (identity = normalized text)
- Word sets (deduplicated, insertion-ordered)
- Raw entries as handed over by import/OCR parsers
"""

from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


MAX_WORD_LENGTH = 50


class ActivityKind(str, Enum):
    VOCABULARY = "vocabulary"
    PHONICS = "phonics"
    SPELLING = "spelling"

    @classmethod
    def parse(cls, value: "str | ActivityKind") -> "ActivityKind":
        """Parse an activity name case-insensitively ("Phonics" -> PHONICS)."""
        if isinstance(value, ActivityKind):
            return value
        return cls(str(value).strip().lower())


# Canonical processing order for a day's activities
ACTIVITY_ORDER: tuple[ActivityKind, ...] = (
    ActivityKind.VOCABULARY,
    ActivityKind.PHONICS,
    ActivityKind.SPELLING,
)


def normalize_text(text: str) -> str:
    """Lowercase, trim and collapse inner whitespace runs to a single space."""
    return " ".join(str(text).split()).lower()


def sort_activities(activities) -> tuple[ActivityKind, ...]:
    """Deduplicate activities and return them in canonical order."""
    kinds = {ActivityKind.parse(a) for a in activities}
    return tuple(kind for kind in ACTIVITY_ORDER if kind in kinds)


# -----------------------------------------------------------------------------
# Word
# -----------------------------------------------------------------------------

class Word(BaseModel):
    """
    A single vocabulary item.

    Two words are the same entity iff their normalized text is equal.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, max_length=MAX_WORD_LENGTH)
    activities: tuple[ActivityKind, ...] = Field(..., min_length=1)

    @field_validator('text', mode='before')
    @classmethod
    def text_normalized(cls, v):
        return normalize_text(v)

    @field_validator('activities', mode='before')
    @classmethod
    def activities_canonical(cls, v):
        return sort_activities(v)

    @staticmethod
    def key(text: str) -> str:
        """Identity key for any raw string."""
        return normalize_text(text)

    def has_activity(self, activity: ActivityKind) -> bool:
        return activity in self.activities


# -----------------------------------------------------------------------------
# Word set
# -----------------------------------------------------------------------------

class RawWordEntry(BaseModel):
    """Already-tokenized input from manual entry, file import or OCR parsing."""
    text: str
    activities: list[str] = []


class WordSet(BaseModel):
    """
    Deduplicated collection of words destined for one lesson.
    Order is the teacher's input order (first occurrence wins).
    """
    model_config = ConfigDict(frozen=True)

    words: tuple[Word, ...] = ()

    @model_validator(mode='after')
    def texts_unique(self):
        seen = set()
        for word in self.words:
            if word.text in seen:
                raise ValueError(f"Duplicate word in word set: {word.text!r}")
            seen.add(word.text)
        return self

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __contains__(self, text: object) -> bool:
        if isinstance(text, Word):
            text = text.text
        if not isinstance(text, str):
            return False
        return Word.key(text) in self.texts

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(word.text for word in self.words)

    def get(self, text: str) -> Optional[Word]:
        """Look up a word by (raw or normalized) text."""
        key = Word.key(text)
        for word in self.words:
            if word.text == key:
                return word
        return None

    def to_entries(self) -> list[RawWordEntry]:
        """Export back to the normalizer's input shape."""
        return [
            RawWordEntry(text=word.text, activities=[a.value for a in word.activities])
            for word in self.words
        ]
