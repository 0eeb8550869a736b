"""
Tests for denylist filtering.
"""

from hashtagger.core.tagging.denylist import DenylistMode, filter_denylisted, glob_to_regex


class TestExactMode:
    """Test exact-match denylisting."""

    def test_partitions_in_order(self) -> None:
        """Test that kept and denied preserve input order."""
        result = filter_denylisted(
            ["astro", "python", "blog", "testing"], ["blog", "astro"], DenylistMode.EXACT
        )
        assert result.kept == ["python", "testing"]
        assert result.denied == ["astro", "blog"]

    def test_empty_denylist_keeps_everything(self) -> None:
        """Test that an empty denylist is a no-op."""
        result = filter_denylisted(["one1", "two2"], [], DenylistMode.GLOB)
        assert result.kept == ["one1", "two2"]
        assert result.denied == []

    def test_mode_accepts_string(self) -> None:
        """Test that plain strings are accepted as the mode."""
        result = filter_denylisted(["astro"], ["astro"], "exact")
        assert result.denied == ["astro"]


class TestGlobMode:
    """Test glob denylisting."""

    def test_star_prefix(self) -> None:
        """Test that 'astro-*' denies prefixed labels but not 'astro' itself."""
        result = filter_denylisted(
            ["astro-components", "astro", "my-astro-tips"], ["astro-*"], DenylistMode.GLOB
        )
        assert result.denied == ["astro-components"]
        assert result.kept == ["astro", "my-astro-tips"]

    def test_question_mark_matches_one_character(self) -> None:
        """Test that '?' matches exactly one character."""
        result = filter_denylisted(["v2", "v10", "v"], ["v?"], "glob")
        assert result.denied == ["v2"]
        assert result.kept == ["v10", "v"]

    def test_case_insensitive(self) -> None:
        """Test that patterns match regardless of case."""
        result = filter_denylisted(["astro-tips"], ["ASTRO-*"], DenylistMode.GLOB)
        assert result.denied == ["astro-tips"]


class TestGlobToRegex:
    """Test glob compilation."""

    def test_anchored(self) -> None:
        """Test that patterns must match the whole label."""
        pattern = glob_to_regex("*-js")
        assert pattern.fullmatch("node-js")
        assert pattern.fullmatch("-js")
        assert not pattern.fullmatch("js")
        assert not pattern.fullmatch("node-jsx")

    def test_other_characters_literal(self) -> None:
        """Test that regex and bracket characters carry no meaning."""
        assert glob_to_regex("[ab]").fullmatch("[ab]")
        assert not glob_to_regex("[ab]").fullmatch("a")
        assert glob_to_regex("a.b").fullmatch("a.b")
        assert not glob_to_regex("a.b").fullmatch("axb")
