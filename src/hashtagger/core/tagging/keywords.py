"""
Markdown body scanning: code stripping, headings and keyword ranking.
"""

import re
from collections import Counter

from hashtagger.core.tagging.slug import STOPWORDS

MIN_KEYWORD_LENGTH = 3

_FENCED_CODE = re.compile(r"```.*?```", re.DOTALL)
_INLINE_CODE = re.compile(r"`[^`]*`")
_HEADING = re.compile(r"^(#{1,6})\s+(.+?)\s*$")
_URL = re.compile(r"https?://\S+")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def strip_code_blocks(markdown: str) -> str:
    """Blank out fenced code blocks first, then inline code spans."""
    without_fences = _FENCED_CODE.sub(" ", markdown)
    return _INLINE_CODE.sub(" ", without_fences)


def extract_headings(markdown: str) -> list[str]:
    """
    Collect ATX heading texts (``#`` through ``######``) in document order.

    Code is removed before scanning so that shell comments inside fenced
    blocks are not mistaken for headings.

    Args:
        markdown: Document body

    Returns:
        Heading texts without their ``#`` markers
    """
    headings: list[str] = []
    for line in strip_code_blocks(markdown).split("\n"):
        match = _HEADING.match(line)
        if match and match.group(2):
            headings.append(match.group(2))
    return headings


def extract_words(text: str) -> list[str]:
    """Split text into lowercase keyword tokens, in order of appearance."""
    cleaned = text.lower()
    cleaned = _URL.sub(" ", cleaned)
    cleaned = _DISALLOWED.sub(" ", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    if not cleaned:
        return []
    return [
        word
        for word in cleaned.split(" ")
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOPWORDS
    ]


def rank_keywords(text: str, limit: int) -> list[str]:
    """
    Rank body tokens by frequency.

    Ties keep first-occurrence order: Counter preserves insertion order and
    ``sorted`` is stable, so only the count participates in the sort key.

    Args:
        text: Markdown body (code is stripped here)
        limit: Maximum number of keywords to return

    Returns:
        Up to ``limit`` tokens, most frequent first

    Example:
        >>> rank_keywords("apis need contracts. apis need versioning.", 2)
        ['apis', 'need']
    """
    counts = Counter(extract_words(strip_code_blocks(text)))
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [word for word, _ in ranked[: max(0, limit)]]
