"""
Unit tests for string distance helpers.
"""

import pytest

from dictation_toolkit.scoring.distance import levenshtein_distance, normalize, similarity


class TestNormalize:
    """Tests for text normalization."""

    def test_normalize_lowercase(self):
        assert normalize("CAT") == "cat"

    def test_normalize_strips_edges_only(self):
        assert normalize("  ice cream \n") == "ice cream"

    def test_normalize_none_is_empty(self):
        assert normalize(None) == ""


class TestLevenshteinDistance:
    """Tests for edit distance."""

    @pytest.mark.parametrize("a, b, expected", [
        ("", "", 0),
        ("abc", "", 3),
        ("", "abc", 3),
        ("cat", "cat", 0),
        ("cat", "hat", 1),
        ("cat", "cats", 1),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
    ])
    def test_distance(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_distance_is_symmetric(self):
        assert levenshtein_distance("crimson", "crayon") == levenshtein_distance("crayon", "crimson")

    def test_distance_counts_code_points(self):
        """Accented characters count as one character each."""
        assert levenshtein_distance("café", "cafe") == 1


class TestSimilarity:
    """Tests for normalized similarity."""

    def test_identical_strings(self):
        assert similarity("cat", "cat") == 1.0

    def test_one_substitution(self):
        assert similarity("cat", "hat") == pytest.approx(1 - 1 / 3)

    def test_uses_longer_length(self):
        assert similarity("cat", "cats") == pytest.approx(0.75)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0

    def test_non_ascii_uses_character_length(self):
        """'é' vs 'e' is one edit over four characters, not five bytes."""
        assert similarity("café", "cafe") == pytest.approx(0.75)
