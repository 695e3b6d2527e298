"""
Tests for the schedule generator.

These tests verify allocation and review propagation in isolation; every
generated schedule is also checked with the validator.
"""

import logging
import math

import pytest

from vocaplan.planner import (
    EmptyWordSet,
    GeneratorInvariantViolation,
    InvalidDayCount,
    allocate_new_counts,
    build_reviews,
    generate,
    normalize,
    validate,
)
from vocaplan.planner import generator as generator_module
from vocaplan.planner.generator import ceil_share
from vocaplan.schemas import WordSet


ANIMALS = ["cat", "dog", "bird", "fish", "lion"]


def make_words(texts):
    return normalize([{"text": t, "activities": ["vocabulary", "phonics"]} for t in texts])


def numbered_words(n):
    return make_words([f"word{i:02d}" for i in range(n)])


class TestAllocation:
    """Test per-day new word counts."""

    def test_ceil_share_is_exact(self):
        assert ceil_share(5, 0.4) == 2
        assert ceil_share(10, 0.4) == 4
        assert ceil_share(3, 0.8) == 3
        assert ceil_share(1, 0.8) == 1
        assert ceil_share(0, 0.8) == 0

    def test_single_day_takes_everything(self):
        assert allocate_new_counts(7, 1) == [7]

    def test_two_days_front_loads_everything(self):
        assert allocate_new_counts(5, 2) == [5, 0]

    def test_five_words_five_days(self):
        assert allocate_new_counts(5, 5) == [2, 2, 1, 0, 0]

    def test_small_word_set_many_days(self):
        counts = allocate_new_counts(3, 15)
        assert counts == [2, 1] + [0] * 13

    def test_leftover_spread_from_day_zero(self):
        # 7 on day 0, 7 on day 1 (capped), 3 left over for two non-final days
        assert allocate_new_counts(17, 3) == [9, 8, 0]

    @pytest.mark.parametrize("total", [1, 2, 5, 9, 17, 40, 100])
    @pytest.mark.parametrize("day_count", [2, 3, 4, 7, 15])
    def test_counts_sum_and_decay(self, total, day_count):
        counts = allocate_new_counts(total, day_count)
        assert sum(counts) == total
        assert len(counts) == day_count
        assert counts[-1] == 0
        assert counts[0] >= min(math.ceil(total * 0.4), total)
        assert all(a >= b for a, b in zip(counts, counts[1:]))


class TestBuildReviews:
    """Test review propagation."""

    def test_every_earlier_word_reviewed(self):
        reviews = build_reviews([["a", "b"], ["c"], [], []])
        assert reviews == [[], ["a", "b"], ["a", "b", "c"], ["a", "b", "c"]]


class TestGenerate:
    """Test the full generator."""

    def test_concrete_five_animals(self):
        words = make_words(ANIMALS)
        schedule = generate(words, 5)

        assert schedule.day_count == 5
        assert schedule.days[0].new_words == ("cat", "dog")
        assert schedule.days[4].new_words == ()
        assert set(schedule.days[4].review_words) == set(ANIMALS)
        introduced = [w for day in schedule.days[:4] for w in day.new_words]
        assert introduced == ANIMALS

    def test_single_day(self):
        words = make_words(ANIMALS)
        schedule = generate(words, 1)
        assert schedule.days[0].new_words == tuple(ANIMALS)
        assert schedule.days[0].review_words == ()
        assert validate(schedule, words).is_valid

    def test_deterministic(self):
        words = numbered_words(17)
        assert generate(words, 7) == generate(words, 7)

    def test_follows_input_order(self):
        words = make_words(["zebra", "apple", "mango"])
        schedule = generate(words, 3)
        assert schedule.days[0].new_words == ("zebra", "apple")

    @pytest.mark.parametrize("n", [1, 5, 17])
    @pytest.mark.parametrize("day_count", [1, 3, 7, 15])
    def test_output_validates(self, n, day_count):
        words = numbered_words(n)
        schedule = generate(words, day_count)
        assert validate(schedule, words).is_valid
        assert schedule.day_count == day_count
        assert schedule.total_words == n

    @pytest.mark.parametrize("n", [1, 5, 17])
    @pytest.mark.parametrize("day_count", [2, 3, 7, 15])
    def test_final_day_review_only(self, n, day_count):
        schedule = generate(numbered_words(n), day_count)
        assert schedule.days[-1].new_words == ()
        assert schedule.days[-1].review_count == n

    @pytest.mark.parametrize("n", [5, 6, 12, 17, 50])
    @pytest.mark.parametrize("day_count", [2, 3, 5, 15])
    def test_front_loaded(self, n, day_count):
        schedule = generate(numbered_words(n), day_count)
        first = schedule.days[0].new_count
        assert first >= math.ceil(n * 0.4)
        assert first == max(day.new_count for day in schedule.days)

    def test_reviews_follow_introduction(self):
        words = numbered_words(17)
        schedule = generate(words, 7)
        for word in words.texts:
            intro = schedule.introduction_day(word)
            for day in schedule.days:
                assert (word in day.review_words) == (day.day_index > intro)

    def test_empty_word_set(self):
        with pytest.raises(EmptyWordSet):
            generate(WordSet(), 5)

    @pytest.mark.parametrize("day_count", [0, -1, 16])
    def test_invalid_day_count(self, day_count):
        with pytest.raises(InvalidDayCount):
            generate(make_words(ANIMALS), day_count)

    def test_invalid_day_count_is_value_error(self):
        with pytest.raises(ValueError):
            generate(make_words(ANIMALS), 99)

    def test_invalid_output_is_logged_and_raised(self, monkeypatch, caplog):
        # everything lands on the review-only final day
        monkeypatch.setattr(
            generator_module,
            "allocate_new_counts",
            lambda total, day_count: [0] * (day_count - 1) + [total],
        )
        with caplog.at_level(logging.ERROR, logger="vocaplan.planner.generator"):
            with pytest.raises(GeneratorInvariantViolation) as exc_info:
                generate(make_words(ANIMALS), 3)

        assert exc_info.value.violations
        assert any(r.levelno == logging.ERROR for r in caplog.records)
