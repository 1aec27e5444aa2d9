"""Tests for string similarity primitives."""

import numpy as np
import pytest

from integraum.similarity import (
    Jaccard,
    Levenshtein,
    LocalitySensitiveHashing,
    MinHash,
    SimilarityMeasure,
    Tokenizer,
    edit_distance,
    jaccard_similarity,
    levenshtein_similarity,
    stable_token_hash,
)


class TestTokenizer:
    """Tests for q-gram tokenization."""

    def test_padded_qgrams(self):
        """Test that padding frames the string."""
        assert Tokenizer(2, padding=True).tokenize("ab") == ["#a", "ab", "b$"]

    def test_unpadded_qgrams(self):
        """Test plain sliding windows."""
        assert Tokenizer(2, padding=False).tokenize("abc") == ["ab", "bc"]

    def test_short_string_is_single_token(self):
        """Test strings shorter than the token size."""
        assert Tokenizer(4, padding=False).tokenize("ab") == ["ab"]

    def test_empty_and_missing(self):
        """Test that empty input yields no tokens."""
        assert Tokenizer().tokenize("") == []
        assert Tokenizer().tokenize(None) == []

    def test_from_settings(self, settings):
        """Test that size and padding come from settings."""
        tokenizer = Tokenizer.from_settings(settings.model_copy(update={"tokenizer_size": 3}))
        assert tokenizer == Tokenizer(3, padding=True)

    def test_invalid_size(self):
        """Test that the token size must be positive."""
        with pytest.raises(ValueError):
            Tokenizer(0)


class TestLevenshtein:
    """Tests for edit distance similarity."""

    @pytest.mark.parametrize(
        ("left", "right", "distance"),
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "abc", 0),
            ("flaw", "lawn", 2),
        ],
    )
    def test_distance(self, left, right, distance):
        """Test classic Levenshtein distances."""
        assert edit_distance(left, right) == distance
        assert edit_distance(right, left) == distance

    def test_transposition(self):
        """Test that Damerau counts an adjacent swap once."""
        assert edit_distance("ab", "ba") == 2
        assert edit_distance("ab", "ba", damerau=True) == 1
        assert edit_distance("ca", "abc", damerau=True) == 3

    def test_similarity_normalised(self):
        """Test normalisation by the longer length."""
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
        assert levenshtein_similarity("", "") == 1.0
        assert levenshtein_similarity("", "abc") == 0.0
        assert levenshtein_similarity(None, "") == 1.0

    def test_token_lists(self):
        """Test edit distance over token sequences."""
        measure = Levenshtein()
        assert measure.calculate(["a", "b", "c"], ["a", "c"]) == pytest.approx(2 / 3)

    def test_protocol(self):
        """Test that the measure satisfies the common protocol."""
        assert isinstance(Levenshtein(damerau=True), SimilarityMeasure)


class TestJaccard:
    """Tests for Jaccard similarity."""

    def test_set_semantics(self):
        """Test set Jaccard ignores repetitions."""
        assert jaccard_similarity(["a", "a", "b"], ["a", "c"]) == pytest.approx(1 / 3)

    def test_bag_semantics(self):
        """Test bag Jaccard counts repetitions and peaks at one half."""
        assert jaccard_similarity(["a", "a", "b"], ["a", "a"], bag=True) == pytest.approx(2 / 5)
        assert jaccard_similarity(["x", "y"], ["x", "y"], bag=True) == pytest.approx(0.5)

    def test_empty_inputs(self):
        """Test that two empty inputs are identical."""
        assert jaccard_similarity([], []) == 1.0
        assert jaccard_similarity([], [], bag=True) == 0.5
        assert jaccard_similarity(["a"], []) == 0.0

    def test_strings_are_tokenized(self):
        """Test the class tokenizes strings but not lists."""
        measure = Jaccard(Tokenizer(2, padding=False))
        assert measure.calculate("abc", "abd") == pytest.approx(1 / 3)
        assert measure.calculate(["abc"], ["abc"]) == 1.0
        assert measure.calculate(None, "") == 1.0


class TestMinHash:
    """Tests for MinHash and locality sensitive hashing."""

    def test_stable_hash(self):
        """Test that token hashes do not depend on the process."""
        assert stable_token_hash("token") == stable_token_hash("token")
        assert stable_token_hash("token") != stable_token_hash("other")

    def test_signature_shape(self):
        """Test one slot per hash function."""
        minhash = MinHash(num_functions=8, seed=1)
        assert minhash.signature(["a", "b"]).shape == (8,)

    def test_identical_inputs(self):
        """Test that identical strings have similarity one."""
        lsh = LocalitySensitiveHashing(num_functions=32)
        assert lsh.calculate("data integration", "data integration") == 1.0

    def test_disjoint_inputs(self):
        """Test that disjoint token sets rarely agree."""
        lsh = LocalitySensitiveHashing(Tokenizer(2, padding=False), num_functions=64)
        assert lsh.calculate(["a", "b", "c"], ["x", "y", "z"]) < 0.2

    def test_approximates_jaccard(self):
        """Test that the estimate is close to the exact similarity."""
        left = [f"t{i}" for i in range(0, 60)]
        right = [f"t{i}" for i in range(30, 90)]
        exact = jaccard_similarity(left, right)
        lsh = LocalitySensitiveHashing(num_functions=256, seed=3)
        assert abs(lsh.calculate(left, right) - exact) < 0.15

    def test_seed_reproducible(self):
        """Test that the same seed yields the same signature."""
        first = LocalitySensitiveHashing(seed=9).signature("abcdef")
        second = LocalitySensitiveHashing(seed=9).signature("abcdef")
        assert np.array_equal(first, second)

    def test_bag_semantics_counts_repetitions(self):
        """Test that repetitions change bag signatures only."""
        bag = LocalitySensitiveHashing(bag=True, num_functions=64)
        plain = LocalitySensitiveHashing(bag=False, num_functions=64)
        assert plain.calculate(["a", "a"], ["a"]) == 1.0
        assert bag.calculate(["a", "a"], ["a"]) < 1.0

    def test_from_settings(self, settings):
        """Test that the hash family is configured from settings."""
        lsh = LocalitySensitiveHashing.from_settings(
            settings.model_copy(update={"minhash_functions": 8, "minhash_seed": 7})
        )
        assert lsh.minhash.num_functions == 8
        expected = LocalitySensitiveHashing(num_functions=8, seed=7).signature("abc")
        assert np.array_equal(lsh.signature("abc"), expected)

    def test_invalid_function_count(self):
        """Test that at least one hash function is needed."""
        with pytest.raises(ValueError):
            MinHash(num_functions=0)
