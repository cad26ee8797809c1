"""
Tests for talentmatch.core.matching.similarity — edit distance and fuzzy matching.
"""

import pytest

from talentmatch.core.matching.similarity import edit_distance, is_fuzzy_match, similarity


# ── edit_distance ────────────────────────────────────────────────────────────


class TestEditDistance:
    def test_identical(self):
        assert edit_distance("react", "react") == 0

    def test_classic_example(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_against_empty(self):
        assert edit_distance("abc", "") == 3
        assert edit_distance("", "abc") == 3

    def test_both_empty(self):
        assert edit_distance("", "") == 0

    def test_single_substitution(self):
        assert edit_distance("java", "jave") == 1

    def test_insertion(self):
        assert edit_distance("node", "nodes") == 1

    def test_transposition_costs_two(self):
        assert edit_distance("ab", "ba") == 2


# ── similarity ───────────────────────────────────────────────────────────────


class TestSimilarity:
    @pytest.mark.parametrize("value", ["a", "react", "node.js", "machine learning"])
    def test_identical_strings_fully_similar(self, value):
        assert similarity(value, value) == 1.0

    def test_both_empty(self):
        assert similarity("", "") == 1.0

    def test_one_empty(self):
        assert similarity("abc", "") == 0.0
        assert similarity("", "abc") == 0.0

    @pytest.mark.parametrize(
        "a, b",
        [("kitten", "sitting"), ("python", "pyhton"), ("sql", "mysql"), ("go", "golang")],
    )
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    def test_normalized_by_longer_string(self):
        assert similarity("kitten", "sitting") == pytest.approx(4 / 7)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0

    def test_range(self):
        value = similarity("typescript", "javascript")
        assert 0.0 <= value <= 1.0
        assert value == pytest.approx(0.6)


# ── is_fuzzy_match ───────────────────────────────────────────────────────────


class TestIsFuzzyMatch:
    def test_exact(self):
        assert is_fuzzy_match("react", "react")

    def test_candidate_substring_of_required(self):
        assert is_fuzzy_match("javascript", "java")

    def test_required_substring_of_candidate(self):
        assert is_fuzzy_match("react", "react native")

    def test_typo_above_threshold(self):
        # 2 edits over 10 characters -> 0.8
        assert is_fuzzy_match("javascript", "javascirpt")

    def test_below_threshold(self):
        assert not is_fuzzy_match("typescript", "javascript")

    def test_threshold_is_strict(self):
        # similarity exactly 0.6 does not pass a 0.6 threshold
        assert not is_fuzzy_match("typescript", "javascript", threshold=0.6)
        assert is_fuzzy_match("typescript", "javascript", threshold=0.59)

    def test_unrelated(self):
        assert not is_fuzzy_match("sql", "java")
