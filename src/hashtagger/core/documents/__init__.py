"""
Document models and sources.

Documents are Markdown posts with a YAML frontmatter block. The tagging
engine works against the DocumentSource protocol; MarkdownDocumentStore is
the filesystem implementation.
"""

from .models import HASHTAGS_KEY, TAGS_KEY, TITLE_KEY, Document
from .source import (
    DocumentError,
    DocumentParseError,
    DocumentReadError,
    DocumentSource,
    DocumentWriteError,
)
from .store import MarkdownDocumentStore

__all__ = [
    # Models
    "Document",
    "HASHTAGS_KEY",
    "TAGS_KEY",
    "TITLE_KEY",
    # Source protocol and errors
    "DocumentError",
    "DocumentParseError",
    "DocumentReadError",
    "DocumentSource",
    "DocumentWriteError",
    # Implementations
    "MarkdownDocumentStore",
]
