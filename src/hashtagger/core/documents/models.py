"""
Document model shared by the tagging engine and document sources.
"""

from dataclasses import dataclass, field, replace
from pathlib import PurePath
from typing import Any

TITLE_KEY = "title"
TAGS_KEY = "tags"
HASHTAGS_KEY = "hashtags"


@dataclass
class Document:
    """
    A Markdown post split into its metadata block and body.

    The engine only reads ``title``, ``tags`` and ``hashtags`` from
    ``metadata`` and only ever writes ``hashtags``.

    Attributes:
        id: Source identifier (a file path for the Markdown store)
        metadata: Parsed frontmatter mapping
        body: Markdown content after the frontmatter block
        raw: Original serialized text, if the document was read from a source
    """

    id: str
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    raw: str | None = None

    @property
    def title(self) -> str | None:
        """Stripped frontmatter title, or None when missing or blank."""
        value = self.metadata.get(TITLE_KEY)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @property
    def fallback_title(self) -> str:
        """Filename stem, used when the frontmatter has no title."""
        return PurePath(self.id).stem

    @property
    def category_tags(self) -> list[str]:
        """Pre-existing ``tags`` entries, verbatim. Non-strings are ignored."""
        return _string_list(self.metadata.get(TAGS_KEY))

    @property
    def hashtags(self) -> list[str]:
        """Previously assigned ``hashtags`` entries, verbatim."""
        return _string_list(self.metadata.get(HASHTAGS_KEY))

    def with_hashtags(self, hashtags: list[str]) -> "Document":
        """
        Return a copy whose metadata carries the given hashtags.

        Every other key keeps its value and position.
        """
        metadata = dict(self.metadata)
        metadata[HASHTAGS_KEY] = list(hashtags)
        return replace(self, metadata=metadata)


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]
