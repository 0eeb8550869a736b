"""
Vocabulary mapping by token-set similarity.

A candidate is compared with each vocabulary entry by Jaccard similarity over
hyphen-separated tokens. The heuristic is intentionally blunt: ``api-design``
and ``api-designs`` share one of three tokens and score 0.33, so they stay
distinct at the default threshold.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of mapping one candidate against the vocabulary.

    Attributes:
        candidate: The label that was looked up
        label: Vocabulary entry it maps to, or the candidate itself
        score: Best Jaccard score seen (1.0 for an exact match)
        remapped: True when ``label`` came from the vocabulary
    """

    candidate: str
    label: str
    score: float
    remapped: bool

    @property
    def changed(self) -> bool:
        """True when the candidate was replaced by a different entry."""
        return self.remapped and self.label != self.candidate


def tokenize_label(label: str) -> frozenset[str]:
    """Split a label on hyphens into a set of non-empty tokens."""
    return frozenset(token for token in label.split("-") if token)


def jaccard(left: frozenset[str], right: frozenset[str]) -> float:
    """
    Jaccard similarity of two token sets.

    Returns:
        ``|left & right| / |left | right|``, or 0.0 when both are empty
    """
    union = len(left | right)
    if union == 0:
        return 0.0
    return len(left & right) / union


def map_to_vocabulary(candidate: str, vocabulary: Iterable[str], threshold: float) -> MatchResult:
    """
    Map a candidate label onto the closest vocabulary entry.

    The vocabulary is consumed in the order given (sorted for a
    ``Vocabulary`` snapshot). Only a strictly higher score replaces the best
    entry, so the earliest entry wins ties. An exact match returns at once
    with score 1.0, whatever the threshold.

    Args:
        candidate: Normalized candidate label
        vocabulary: Known labels
        threshold: Minimum score (0..1) required to remap

    Returns:
        MatchResult describing the mapping
    """
    candidate_tokens = tokenize_label(candidate)
    if not candidate_tokens:
        return MatchResult(candidate=candidate, label=candidate, score=0.0, remapped=False)

    entries = list(vocabulary)
    if candidate in entries:
        return MatchResult(candidate=candidate, label=candidate, score=1.0, remapped=True)

    best = candidate
    best_score = 0.0
    for entry in entries:
        entry_tokens = tokenize_label(entry)
        if not entry_tokens:
            continue
        score = jaccard(candidate_tokens, entry_tokens)
        if score > best_score:
            best_score = score
            best = entry

    if best_score >= threshold and best != candidate:
        return MatchResult(candidate=candidate, label=best, score=best_score, remapped=True)
    return MatchResult(candidate=candidate, label=candidate, score=best_score, remapped=False)
