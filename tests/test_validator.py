"""
Tests for the schedule validator.
"""

from vocaplan.planner import normalize, validate
from vocaplan.schemas import Day, Schedule, ViolationKind


WORDS = normalize([
    {"text": t, "activities": ["vocabulary"]} for t in ["cat", "dog", "bird"]
])


def make_schedule(*days):
    return Schedule(days=tuple(
        Day(day_index=i, new_words=tuple(new), review_words=tuple(review))
        for i, (new, review) in enumerate(days)
    ))


VALID = make_schedule(
    (["cat", "dog"], []),
    (["bird"], ["cat", "dog"]),
    ([], ["cat", "dog", "bird"]),
)


class TestValidSchedules:
    """Test schedules that satisfy every invariant."""

    def test_valid(self):
        result = validate(VALID, WORDS)
        assert result.is_valid
        assert result.violations == ()

    def test_reviews_may_be_removed(self):
        schedule = make_schedule(
            (["cat", "dog"], []),
            (["bird"], ["dog"]),
            ([], ["bird"]),
        )
        assert validate(schedule, WORDS).is_valid

    def test_single_day_carries_all_new_words(self):
        schedule = make_schedule((["cat", "dog", "bird"], []))
        assert validate(schedule, WORDS).is_valid


class TestViolations:
    """Test each violation kind."""

    def test_missing_introduction(self):
        schedule = make_schedule(
            (["cat", "dog"], []),
            ([], ["cat", "dog"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.MISSING_INTRODUCTION]
        assert result.violations[0].word == "bird"

    def test_duplicate_introduction(self):
        schedule = make_schedule(
            (["cat", "dog", "bird"], []),
            (["bird"], ["cat", "dog"]),
            ([], ["cat", "dog", "bird"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.DUPLICATE_INTRODUCTION]
        assert result.violations[0].word == "bird"

    def test_review_before_learn(self):
        schedule = make_schedule(
            (["cat", "dog"], ["bird"]),
            (["bird"], ["cat", "dog"]),
            ([], ["cat", "dog", "bird"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.REVIEW_BEFORE_LEARN]
        assert result.violations[0].day_index == 0

    def test_review_of_never_introduced_word(self):
        schedule = make_schedule(
            (["cat", "dog"], []),
            ([], ["cat", "dog", "bird"]),
        )
        result = validate(schedule, WORDS)
        assert ViolationKind.MISSING_INTRODUCTION in result.kinds
        assert ViolationKind.REVIEW_BEFORE_LEARN in result.kinds

    def test_final_day_has_new_words(self):
        schedule = make_schedule(
            (["cat", "dog"], []),
            (["bird"], ["cat", "dog"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.FINAL_DAY_HAS_NEW_WORDS]
        assert result.violations[0].word == "bird"

    def test_duplicate_review_in_day(self):
        schedule = make_schedule(
            (["cat", "dog"], []),
            (["bird"], ["cat", "cat", "dog"]),
            ([], ["cat", "dog", "bird"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.DUPLICATE_IN_DAY]

    def test_unknown_word(self):
        schedule = make_schedule(
            (["cat", "dog", "owl"], []),
            (["bird"], ["cat", "dog"]),
            ([], ["cat", "dog", "bird"]),
        )
        result = validate(schedule, WORDS)
        assert result.kinds == [ViolationKind.UNKNOWN_WORD]

    def test_collects_all_violations(self):
        schedule = make_schedule(
            (["cat"], ["dog"]),
            ([], ["cat", "cat"]),
            (["dog", "dog"], []),
        )
        kinds = set(validate(schedule, WORDS).kinds)
        assert kinds == {
            ViolationKind.MISSING_INTRODUCTION,
            ViolationKind.DUPLICATE_INTRODUCTION,
            ViolationKind.REVIEW_BEFORE_LEARN,
            ViolationKind.FINAL_DAY_HAS_NEW_WORDS,
            ViolationKind.DUPLICATE_IN_DAY,
        }

    def test_does_not_mutate(self):
        before = VALID.model_dump()
        validate(VALID, WORDS)
        assert VALID.model_dump() == before
