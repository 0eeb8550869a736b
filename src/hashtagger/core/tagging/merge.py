"""
Merge policy for existing and newly generated hashtags.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from hashtagger.core.tagging.slug import unique_stable


@dataclass
class MergeResult:
    """
    Result of merging hashtags.

    Attributes:
        final: Ordered, de-duplicated, capped label list
        added: Labels in ``final`` that were not already present, in order
        capped: True when existing labels alone filled the cap
    """

    final: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    capped: bool = False


def merge_labels(existing: Sequence[str], new: Sequence[str], max_count: int) -> MergeResult:
    """
    Combine existing hashtags with new ones under a maximum count.

    Existing labels always come first and keep their positions. When they
    already fill ``max_count``, nothing is added: existing labels are never
    evicted to make room for generated ones. In that case the existing list
    is only truncated if it is itself longer than the cap.

    Args:
        existing: Normalized labels already on the document
        new: Mapped candidate labels in generation order
        max_count: Maximum number of labels to keep

    Returns:
        MergeResult with final and added labels

    Example:
        >>> merge_labels(["python"], ["python", "testing"], 12).added
        ['testing']
    """
    existing_unique = unique_stable(existing)

    if len(existing_unique) >= max_count:
        return MergeResult(final=existing_unique[:max_count], added=[], capped=True)

    final = unique_stable([*existing_unique, *new])[:max_count]
    existing_set = set(existing_unique)
    added = [label for label in final if label not in existing_set]
    return MergeResult(final=final, added=added)
