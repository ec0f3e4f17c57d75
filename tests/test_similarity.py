"""Tests for fuzzy string similarity."""

import pytest

from jobfeed.similarity import normalize, similarity


class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize("  Head COOK \n") == "head cook"

    def test_keeps_punctuation(self):
        assert normalize("C++, Java") == "c++, java"

    def test_none_is_empty(self):
        assert normalize(None) == ""


class TestSimilarity:
    def test_exact_match_ignores_case(self):
        assert similarity("Driver", "driver") == 1.0

    def test_exact_match_ignores_surrounding_whitespace(self):
        assert similarity("  Driver ", "DRIVER") == 1.0

    def test_substring_scores_point_eight(self):
        assert similarity("Cook", "Head Cook") == 0.8
        assert similarity("Head Cook", "Cook") == 0.8

    def test_empty_strings_score_zero(self):
        assert similarity("", "") == 0
        assert similarity("Driver", "") == 0
        assert similarity("   ", "Driver") == 0

    def test_none_scores_zero(self):
        assert similarity(None, "Driver") == 0
        assert similarity(None, None) == 0

    def test_word_overlap_divides_by_longer_side(self):
        # only "driver" is shared; the job side has three words
        assert similarity("Delivery Driver", "Truck Driver Needed") == pytest.approx(1 / 3)

    def test_word_overlap_uses_partial_words(self):
        # "sales" ⊂ "salesperson" and "retail" is shared
        assert similarity("retail sales", "salesperson (retail store)") == pytest.approx(2 / 3)

    def test_reordered_words_count_fully(self):
        assert similarity("sales executive", "executive sales") == 1.0

    def test_no_overlap_scores_zero(self):
        assert similarity("Plumber", "Accountant") == 0.0

    def test_substring_wins_over_overlap(self):
        # overlap would be 1/2 but containment is checked first
        assert similarity("cook", "cook helper") == 0.8

    @pytest.mark.parametrize("a,b", [
        ("Python developer", "Senior python engineer"),
        ("Nurse", "Staff nurse (night shift)"),
        ("warehouse", "Warehouse"),
        ("x", "y z"),
    ])
    def test_always_within_unit_interval(self, a, b):
        assert 0.0 <= similarity(a, b) <= 1.0
