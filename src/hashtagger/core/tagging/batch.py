"""
Batch tagging over many documents.

Provides high-level operations for:
- Loading (or building) the vocabulary snapshot a batch runs against
- Processing documents one by one with failures isolated per document
- Folding newly added labels back into the vocabulary after the batch
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hashtagger.core.documents.source import DocumentSource
from hashtagger.core.tagging.models import ProcessingOutcome
from hashtagger.core.tagging.processor import DocumentProcessor
from hashtagger.core.tagging.slug import unique_stable
from hashtagger.core.vocabulary.models import Vocabulary
from hashtagger.core.vocabulary.store import (
    VocabularyLoadError,
    VocabularyStore,
    scan_document_hashtags,
)

if TYPE_CHECKING:
    from hashtagger.core.config.models import TaggerConfig

logger = logging.getLogger(__name__)


@dataclass
class VocabularyLoadResult:
    """
    Vocabulary a batch starts from, and where it came from.

    Attributes:
        vocabulary: The snapshot
        built: True when it was rebuilt by scanning documents
        saved: True when a rebuilt vocabulary was written to disk
        error: Load error that forced a rebuild, if any
    """

    vocabulary: Vocabulary
    built: bool = False
    saved: bool = False
    error: str | None = None


@dataclass
class BatchReport:
    """
    Result of a batch run.

    ``merged_vocabulary`` is the starting snapshot plus every label added in
    this batch. It is computed regardless of write mode; persisting it is up
    to the caller.
    """

    outcomes: list[ProcessingOutcome] = field(default_factory=list)
    vocabulary: Vocabulary = field(default_factory=Vocabulary)
    merged_vocabulary: Vocabulary = field(default_factory=Vocabulary)

    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @property
    def changed(self) -> int:
        return sum(1 for o in self.outcomes if o.changed)

    @property
    def skipped(self) -> int:
        """Documents that were processed but needed no change."""
        return sum(1 for o in self.outcomes if not o.changed and not o.failed)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    @property
    def write_failed(self) -> int:
        return sum(1 for o in self.outcomes if o.write_error is not None)

    @property
    def new_labels(self) -> list[str]:
        """Labels added across the batch, first-seen order."""
        return unique_stable(label for o in self.outcomes for label in o.added)

    @property
    def vocabulary_grew(self) -> bool:
        return len(self.merged_vocabulary) != len(self.vocabulary)


def load_vocabulary(
    store: VocabularyStore,
    source: DocumentSource,
    document_ids: Sequence[str],
    write: bool = False,
) -> VocabularyLoadResult:
    """
    Load the vocabulary, building it from documents when no usable cache exists.

    A cache that exists but can't be read is rebuilt the same way as a
    missing one, and the load error is kept on the result for reporting.

    Args:
        store: Vocabulary store
        source: Document source, used to build a missing or unreadable cache
        document_ids: Documents to scan when building
        write: Save a freshly built vocabulary

    Returns:
        VocabularyLoadResult

    Raises:
        OSError: If a rebuilt vocabulary cannot be saved
    """
    error: str | None = None
    if store.exists():
        try:
            return VocabularyLoadResult(vocabulary=store.load())
        except VocabularyLoadError as e:
            logger.warning(f"{e}; rebuilding the vocabulary from documents")
            error = str(e)

    vocabulary = scan_document_hashtags(source, document_ids)
    logger.info(
        f"Built vocabulary from {len(document_ids)} document(s): {len(vocabulary)} hashtags"
    )
    saved = False
    if write:
        store.save(vocabulary)
        saved = True
    return VocabularyLoadResult(vocabulary=vocabulary, built=True, saved=saved, error=error)


def run_batch(
    source: DocumentSource,
    document_ids: Sequence[str],
    config: TaggerConfig,
    vocabulary: Vocabulary,
    write: bool = False,
) -> BatchReport:
    """
    Tag every document against one vocabulary snapshot.

    Documents are processed sequentially and independently. The vocabulary
    is not touched until all documents are done.

    Args:
        source: Document source
        document_ids: Documents to process, in order
        config: Tagging configuration
        vocabulary: Snapshot taken at batch start
        write: Persist changed documents

    Returns:
        BatchReport with per-document outcomes and the merged vocabulary
    """
    processor = DocumentProcessor(config, vocabulary, source=source, write=write)
    report = BatchReport(vocabulary=vocabulary)

    for document_id in document_ids:
        report.outcomes.append(processor.process_id(document_id))

    report.merged_vocabulary = vocabulary.merge(report.new_labels)
    logger.info(
        f"Batch done: {report.processed} processed, {report.changed} changed, "
        f"{report.failed} failed"
    )
    return report


def reconcile_vocabulary(store: VocabularyStore, report: BatchReport, write: bool = False) -> bool:
    """
    Persist the merged vocabulary if the batch introduced new labels.

    Args:
        store: Vocabulary store
        report: Finished batch report
        write: Actually write the cache file

    Returns:
        True if the vocabulary grew (whether or not it was written)

    Raises:
        OSError: If the cache file cannot be written
    """
    if not report.vocabulary_grew:
        return False
    if write:
        store.save(report.merged_vocabulary)
    return True
