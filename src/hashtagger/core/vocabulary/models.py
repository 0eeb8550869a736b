"""
Vocabulary data models.

The vocabulary is the flat set of hashtags accepted so far. During a batch
it is a read-only snapshot; new labels are merged in once the batch is done.
"""

from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hashtagger.core.tagging.slug import normalize_labels

CACHE_FORMAT_VERSION = 1


class Vocabulary:
    """
    Immutable, lexicographically sorted set of labels.

    Iteration order is the sorted order, which is also the order the
    vocabulary mapper scans entries in.

    Example:
        >>> vocab = Vocabulary(["python", "api-design"])
        >>> list(vocab)
        ['api-design', 'python']
        >>> list(vocab.merge(["testing", "python"]))
        ['api-design', 'python', 'testing']
    """

    __slots__ = ("_labels", "_members")

    def __init__(self, labels: Iterable[str] = ()):
        self._members = frozenset(labels)
        self._labels = tuple(sorted(self._members))

    @classmethod
    def from_raw(cls, values: Iterable[str]) -> "Vocabulary":
        """Build a vocabulary from unnormalized values, dropping rejects."""
        return cls(normalize_labels(values))

    @property
    def labels(self) -> list[str]:
        """Labels in sorted order."""
        return list(self._labels)

    def merge(self, new_labels: Iterable[str]) -> "Vocabulary":
        """Return a new snapshot containing these labels and ``new_labels``."""
        return Vocabulary([*self._labels, *new_labels])

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"Vocabulary({list(self._labels)!r})"


class VocabularyCache(BaseModel):
    """
    On-disk representation of the vocabulary.

    Example file:
        {
          "version": 1,
          "updatedAt": "2026-01-16T14:32:00+00:00",
          "hashtags": ["api-design", "python"]
        }
    """

    version: Literal[1] = Field(
        default=CACHE_FORMAT_VERSION,
        description="Cache format version",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="updatedAt",
        description="When the cache was last written",
    )
    hashtags: list[str] = Field(
        default_factory=list,
        description="Sorted vocabulary labels",
    )

    model_config = ConfigDict(
        populate_by_name=True,
    )

    @classmethod
    def from_vocabulary(cls, vocabulary: Vocabulary) -> "VocabularyCache":
        """Create a cache payload stamped with the current time."""
        return cls(hashtags=vocabulary.labels)

    def to_vocabulary(self) -> Vocabulary:
        """Convert the payload back into a snapshot."""
        return Vocabulary.from_raw(self.hashtags)
