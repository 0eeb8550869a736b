"""
Hashtag slug normalization.

Every label that ends up in a document's ``hashtags`` list passes through
``normalize_label``. The grammar is deliberately narrow: lowercase ASCII
letters, digits and single hyphens, at least two characters, and never a
bare stopword.
"""

import re
from collections.abc import Iterable

# Common English function words. Inputs are lowercased before lookup.
STOPWORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "can",
        "could",
        "did",
        "do",
        "does",
        "for",
        "from",
        "had",
        "has",
        "have",
        "how",
        "i",
        "if",
        "in",
        "into",
        "is",
        "it",
        "its",
        "just",
        "like",
        "may",
        "might",
        "more",
        "most",
        "not",
        "of",
        "on",
        "or",
        "our",
        "should",
        "so",
        "some",
        "such",
        "than",
        "that",
        "the",
        "their",
        "then",
        "there",
        "these",
        "this",
        "those",
        "to",
        "too",
        "up",
        "use",
        "using",
        "was",
        "we",
        "were",
        "what",
        "when",
        "where",
        "which",
        "who",
        "why",
        "will",
        "with",
        "you",
        "your",
    }
)

MIN_LABEL_LENGTH = 2

_LEADING_HASHES = re.compile(r"^#+")
_QUOTES = re.compile(r"['\"]")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")
_LABEL_GRAMMAR = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def normalize_label(raw: str) -> str | None:
    """
    Normalize arbitrary text into a hashtag label.

    Args:
        raw: Title, heading, tag or keyword text

    Returns:
        The normalized label, or None if the text cannot form a label
        (empty, shorter than two characters, or a stopword)

    Example:
        >>> normalize_label("#Rock & Roll!")
        'rock-and-roll'
        >>> normalize_label("The") is None
        True
    """
    cleaned = raw.lower().strip()
    cleaned = _LEADING_HASHES.sub("", cleaned)
    cleaned = _QUOTES.sub("", cleaned)
    cleaned = cleaned.replace("&", " and ")
    cleaned = _DISALLOWED.sub(" ", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    cleaned = _WHITESPACE.sub("-", cleaned)
    cleaned = _HYPHEN_RUNS.sub("-", cleaned).strip("-")

    if len(cleaned) < MIN_LABEL_LENGTH:
        return None
    if cleaned in STOPWORDS:
        return None

    return cleaned


def is_valid_label(value: str) -> bool:
    """Check whether a string already satisfies the label grammar."""
    return (
        len(value) >= MIN_LABEL_LENGTH
        and value not in STOPWORDS
        and _LABEL_GRAMMAR.fullmatch(value) is not None
    )


def normalize_labels(values: Iterable[str]) -> list[str]:
    """Normalize many values, dropping rejects and duplicates."""
    normalized = (normalize_label(value) for value in values)
    return unique_stable(label for label in normalized if label is not None)


def unique_stable(items: Iterable[str]) -> list[str]:
    """
    De-duplicate strings while keeping first-seen order.

    Args:
        items: Strings in priority order

    Returns:
        List with later duplicates removed
    """
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out
