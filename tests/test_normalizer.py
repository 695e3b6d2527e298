"""
Tests for the word set normalizer.
"""

import pytest

from vocaplan.planner import IssueKind, WordSetError, merge, normalize
from vocaplan.schemas import ActivityKind, RawWordEntry


class TestNormalize:
    """Test normalization of raw teacher input."""

    def test_trims_and_lowercases(self):
        words = normalize([{"text": "  Cat ", "activities": ["Vocabulary"]}])
        assert words.texts == ("cat",)
        assert words.get("cat").activities == (ActivityKind.VOCABULARY,)

    def test_accepts_entry_shapes(self):
        words = normalize([
            RawWordEntry(text="cat", activities=["phonics"]),
            {"text": "dog", "activities": ["spelling"]},
            ("bird", ["vocabulary"]),
        ])
        assert words.texts == ("cat", "dog", "bird")

    def test_merges_duplicates_by_union(self):
        words = normalize([
            {"text": "Cat", "activities": ["phonics"]},
            {"text": "dog", "activities": ["vocabulary"]},
            {"text": " CAT", "activities": ["spelling", "phonics"]},
        ])
        assert words.texts == ("cat", "dog")
        assert words.get("cat").activities == (ActivityKind.PHONICS, ActivityKind.SPELLING)

    def test_merge_is_order_independent(self):
        forward = normalize([
            {"text": "cat", "activities": ["phonics"]},
            {"text": "cat", "activities": ["spelling"]},
        ])
        backward = normalize([
            {"text": "cat", "activities": ["spelling"]},
            {"text": "cat", "activities": ["phonics"]},
        ])
        assert forward == backward

    def test_idempotent(self):
        raw = [
            {"text": " Lion", "activities": ["phonics"]},
            {"text": "tiger", "activities": ["vocabulary", "spelling"]},
            {"text": "LION", "activities": ["vocabulary"]},
        ]
        once = normalize(raw)
        twice = normalize(once.to_entries())
        assert twice == once

    def test_merge_existing_word_set(self):
        words = normalize([{"text": "cat", "activities": ["phonics"]}])
        merged = merge(words, [{"text": "Cat", "activities": ["spelling"]}, {"text": "owl", "activities": ["phonics"]}])
        assert merged.texts == ("cat", "owl")
        assert merged.get("cat").activities == (ActivityKind.PHONICS, ActivityKind.SPELLING)

    def test_empty_input_gives_empty_word_set(self):
        assert len(normalize([])) == 0


class TestNormalizeErrors:
    """Test that invalid entries are rejected, never dropped."""

    def test_empty_text_rejected(self):
        with pytest.raises(WordSetError) as exc_info:
            normalize([{"text": "   ", "activities": ["phonics"]}])
        assert exc_info.value.issues[0].kind == IssueKind.INVALID_WORD

    def test_too_long_rejected(self):
        with pytest.raises(WordSetError) as exc_info:
            normalize([{"text": "x" * 51, "activities": ["phonics"]}])
        assert exc_info.value.issues[0].kind == IssueKind.INVALID_WORD

    def test_missing_activity_rejected(self):
        with pytest.raises(WordSetError) as exc_info:
            normalize([{"text": "cat", "activities": []}])
        assert exc_info.value.issues[0].kind == IssueKind.MISSING_ACTIVITY

    def test_unknown_activity_rejected(self):
        with pytest.raises(WordSetError) as exc_info:
            normalize([{"text": "cat", "activities": ["phonics", "drawing"]}])
        issue = exc_info.value.issues[0]
        assert issue.kind == IssueKind.UNKNOWN_ACTIVITY
        assert "drawing" in issue.detail

    def test_collects_every_issue(self):
        with pytest.raises(WordSetError) as exc_info:
            normalize([
                {"text": "", "activities": ["phonics"]},
                {"text": "cat", "activities": ["phonics"]},
                {"text": "dog", "activities": []},
                {"text": "y" * 60, "activities": []},
            ])
        issues = exc_info.value.issues
        assert [(i.index, i.kind) for i in issues] == [
            (0, IssueKind.INVALID_WORD),
            (2, IssueKind.MISSING_ACTIVITY),
            (3, IssueKind.INVALID_WORD),
            (3, IssueKind.MISSING_ACTIVITY),
        ]

    def test_word_set_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize([{"text": "", "activities": []}])
