"""
Hashtag vocabulary.

The vocabulary is the flat, sorted set of hashtags accepted across all
documents. It is used to fold near-duplicate candidates onto labels that
already exist, and is persisted as a small JSON cache.
"""

from .models import CACHE_FORMAT_VERSION, Vocabulary, VocabularyCache
from .store import VocabularyLoadError, VocabularyStore, scan_document_hashtags

__all__ = [
    "CACHE_FORMAT_VERSION",
    "Vocabulary",
    "VocabularyCache",
    "VocabularyLoadError",
    "VocabularyStore",
    "scan_document_hashtags",
]
