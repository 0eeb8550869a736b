"""
Tests for vocabulary mapping.
"""

import pytest

from hashtagger.core.tagging.mapping import jaccard, map_to_vocabulary, tokenize_label


class TestJaccard:
    """Test token-set similarity helpers."""

    def test_tokenize(self) -> None:
        """Test that labels split on hyphens without empty tokens."""
        assert tokenize_label("api-design") == frozenset({"api", "design"})
        assert tokenize_label("-") == frozenset()

    def test_scores(self) -> None:
        """Test basic Jaccard values."""
        assert jaccard(frozenset({"a", "b"}), frozenset({"a", "b"})) == 1.0
        assert jaccard(frozenset({"a"}), frozenset({"b"})) == 0.0
        assert jaccard(frozenset({"a", "b"}), frozenset({"a", "c"})) == pytest.approx(1 / 3)

    def test_both_empty(self) -> None:
        """Test that two empty sets score zero."""
        assert jaccard(frozenset(), frozenset()) == 0.0


class TestMapToVocabulary:
    """Test the map_to_vocabulary function."""

    def test_exact_match(self) -> None:
        """Test that an exact entry wins with score 1.0."""
        result = map_to_vocabulary("python", ["api-design", "python"], 0.6)
        assert result.label == "python"
        assert result.score == 1.0
        assert result.remapped is True
        assert result.changed is False

    def test_exact_match_ignores_threshold(self) -> None:
        """Test that an exact match is returned even above any threshold."""
        result = map_to_vocabulary("python", ["python"], 1.0)
        assert result.label == "python"
        assert result.score == 1.0

    def test_plural_not_remapped(self) -> None:
        """Test that api-designs stays distinct from api-design at 0.6."""
        result = map_to_vocabulary("api-designs", ["api-design"], 0.6)
        assert result.label == "api-designs"
        assert result.remapped is False
        assert result.score == pytest.approx(1 / 3)

    def test_remap_above_threshold(self) -> None:
        """Test that a close enough entry replaces the candidate."""
        result = map_to_vocabulary("react-hooks-guide", ["python", "react-hooks"], 0.6)
        assert result.label == "react-hooks"
        assert result.score == pytest.approx(2 / 3)
        assert result.changed is True

    def test_token_reordering_scores_one(self) -> None:
        """Test that the same tokens in another order map with score 1.0."""
        result = map_to_vocabulary("design-api", ["api-design"], 0.6)
        assert result.label == "api-design"
        assert result.score == 1.0
        assert result.changed is True

    def test_ties_go_to_earliest_entry(self) -> None:
        """Test that only a strictly higher score replaces the best entry."""
        result = map_to_vocabulary("gamma-x", ["alpha-x", "beta-x"], 0.3)
        assert result.label == "alpha-x"

    def test_threshold_zero_remaps_any_overlap(self) -> None:
        """Test that threshold 0 accepts the best entry."""
        result = map_to_vocabulary("rust-async", ["async-python"], 0.0)
        assert result.label == "async-python"

    def test_empty_vocabulary(self) -> None:
        """Test that an empty vocabulary never remaps."""
        result = map_to_vocabulary("python", [], 0.0)
        assert result.label == "python"
        assert result.remapped is False
        assert result.score == 0.0

    def test_candidate_without_tokens(self) -> None:
        """Test that a token-less candidate scores zero."""
        result = map_to_vocabulary("", ["python"], 0.0)
        assert result.label == ""
        assert result.score == 0.0
        assert result.remapped is False

    def test_entries_without_tokens_skipped(self) -> None:
        """Test that malformed vocabulary entries are ignored."""
        result = map_to_vocabulary("python-tips", ["-", "python-tricks"], 0.3)
        assert result.label == "python-tricks"
