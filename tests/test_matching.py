"""
Tests for the edit-distance matcher.
"""

import itertools

import pytest
from Levenshtein import distance

from pokedex_api.app.services.matching import levenshtein

WORDS = ["", "a", "abc", "kitten", "sitting", "pikachu", "pikuchu", "raichu", "Mew"]


class TestLevenshtein:
    """Test ``levenshtein``."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("abc", "abc", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("pikuchu", "pikachu", 1),
            ("charmandr", "charmander", 1),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int) -> None:
        assert levenshtein(a, b) == expected

    def test_case_sensitive(self) -> None:
        """Case folding is left to the caller."""
        assert levenshtein("Mew", "mew") == 1

    def test_identity(self) -> None:
        for word in WORDS:
            assert levenshtein(word, word) == 0

    def test_symmetry(self) -> None:
        for a, b in itertools.combinations(WORDS, 2):
            assert levenshtein(a, b) == levenshtein(b, a)

    def test_triangle_inequality(self) -> None:
        for a, b, c in itertools.permutations(WORDS, 3):
            assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

    def test_empty_string_distance_is_length(self) -> None:
        for word in WORDS:
            assert levenshtein("", word) == len(word)

    def test_agrees_with_levenshtein_package(self) -> None:
        for a, b in itertools.product(WORDS, repeat=2):
            assert levenshtein(a, b) == distance(a, b)

    def test_none_counts_as_empty(self) -> None:
        assert levenshtein(None, "abc") == 3
        assert levenshtein("abc", None) == 3
