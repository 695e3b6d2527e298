"""Planner exceptions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from vocaplan.schemas import Violation


class IssueKind(str, Enum):
    INVALID_WORD = "invalid_word"
    MISSING_ACTIVITY = "missing_activity"
    UNKNOWN_ACTIVITY = "unknown_activity"


class InputIssue(BaseModel):
    """A problem with one raw entry handed to the normalizer."""
    kind: IssueKind
    index: int               # position in the raw input
    text: str
    detail: Optional[str] = None


class PlannerError(Exception):
    """Base class for lesson planner errors."""


class WordSetError(PlannerError, ValueError):
    """Raw word input could not be normalized; carries every issue found."""

    def __init__(self, issues: list[InputIssue]):
        self.issues = list(issues)
        summary = "; ".join(
            f"#{issue.index} {issue.text!r}: {issue.kind.value}" for issue in self.issues[:5]
        )
        more = f" (+{len(self.issues) - 5} more)" if len(self.issues) > 5 else ""
        super().__init__(f"{len(self.issues)} invalid word entries: {summary}{more}")


class EmptyWordSet(PlannerError, ValueError):
    """Scheduling requires at least one word."""


class InvalidDayCount(PlannerError, ValueError):
    """Day count outside the supported range."""


class GeneratorInvariantViolation(PlannerError, RuntimeError):
    """The generator produced a schedule the validator rejects. This is a bug."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        kinds = sorted({v.kind.value for v in self.violations})
        super().__init__(f"Generated schedule violates invariants: {', '.join(kinds)}")
