"""
Vocabulary persistence.

The vocabulary cache is a derived artifact: it can always be rebuilt from
the ``hashtags`` already present in documents. A cache that can't be read
is therefore reported and treated as empty rather than aborting a run.
"""

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hashtagger.core.documents.source import DocumentParseError, DocumentReadError, DocumentSource

from .models import Vocabulary, VocabularyCache

logger = logging.getLogger(__name__)


class VocabularyLoadError(Exception):
    """Raised when the vocabulary cache exists but cannot be used."""

    pass


class VocabularyStore:
    """
    Reads and writes the vocabulary cache file.

    Example:
        store = VocabularyStore(Path(".hashtags-cache.json"))
        vocabulary = store.load()
        store.save(vocabulary.merge(["new-label"]))
    """

    def __init__(self, cache_file: Path | str):
        """
        Initialize store with a cache file path.

        Args:
            cache_file: JSON file holding the vocabulary
        """
        self.cache_file = Path(cache_file)

    def exists(self) -> bool:
        """Check whether the cache file is present."""
        return self.cache_file.exists()

    def load(self) -> Vocabulary:
        """
        Load the persisted vocabulary.

        Returns:
            Vocabulary snapshot; empty if the cache file doesn't exist

        Raises:
            VocabularyLoadError: If the file is unreadable, not JSON, or not
                a supported cache format
        """
        if not self.cache_file.exists():
            return Vocabulary()

        try:
            with self.cache_file.open(encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            raise VocabularyLoadError(f"Failed to read {self.cache_file}: {e}") from e

        try:
            cache = VocabularyCache.model_validate(data)
        except ValidationError as e:
            raise VocabularyLoadError(f"Unsupported cache format in {self.cache_file}: {e}") from e

        return cache.to_vocabulary()

    def to_payload(self, vocabulary: Vocabulary) -> dict[str, Any]:
        """
        Build the JSON payload that ``save`` would write.

        Args:
            vocabulary: Vocabulary to serialize

        Returns:
            JSON-compatible dictionary
        """
        cache = VocabularyCache.from_vocabulary(vocabulary)
        return cache.model_dump(mode="json", by_alias=True)

    def save(self, vocabulary: Vocabulary) -> Path:
        """
        Write the vocabulary atomically.

        Creates parent directories as needed and replaces the cache file
        only after the new content is fully written.

        Args:
            vocabulary: Vocabulary to persist

        Returns:
            Path to the cache file

        Raises:
            OSError: If the file cannot be written
        """
        directory = self.cache_file.parent
        directory.mkdir(parents=True, exist_ok=True)

        payload = self.to_payload(vocabulary)
        fd, temp_path = tempfile.mkstemp(
            dir=directory, prefix=".hashtags_", suffix=".json.tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps(payload, indent=2) + "\n")
            os.replace(temp_path, self.cache_file)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

        logger.info(f"Vocabulary written: {self.cache_file} ({len(vocabulary)} hashtags)")
        return self.cache_file


def scan_document_hashtags(source: DocumentSource, document_ids: Iterable[str]) -> Vocabulary:
    """
    Build a vocabulary from the hashtags already stored in documents.

    Unreadable documents are logged and skipped.

    Args:
        source: Document source
        document_ids: Documents to scan

    Returns:
        Vocabulary of every normalized hashtag found
    """
    found: list[str] = []
    for document_id in document_ids:
        try:
            document = source.read_document(document_id)
        except (DocumentReadError, DocumentParseError) as e:
            logger.error(f"Vocabulary scan error for {document_id}: {e}")
            continue
        found.extend(document.hashtags)
    return Vocabulary.from_raw(found)
