"""
Document processor: runs the tagging pipeline on one document.

Stages:
    extracted -> normalized -> filtered -> mapped -> merged -> unchanged | changed

The processor only reads the vocabulary snapshot it was given; collecting
new labels into the vocabulary happens once per batch (see ``batch.py``).
Read and parse failures are reported on the outcome instead of raised, so
one bad document never stops a batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from hashtagger.core.documents.models import Document
from hashtagger.core.documents.source import (
    DocumentParseError,
    DocumentReadError,
    DocumentSource,
    DocumentWriteError,
)
from hashtagger.core.tagging.candidates import extract_candidates
from hashtagger.core.tagging.denylist import filter_denylisted
from hashtagger.core.tagging.mapping import map_to_vocabulary
from hashtagger.core.tagging.merge import merge_labels
from hashtagger.core.tagging.models import (
    DENIED_DIAGNOSTIC_CAP,
    LowRichnessWarning,
    ProcessingOutcome,
    ProcessingStage,
)
from hashtagger.core.tagging.slug import normalize_labels, unique_stable

if TYPE_CHECKING:
    from hashtagger.core.config.models import TaggerConfig

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """
    Assigns hashtags to documents.

    Example:
        processor = DocumentProcessor(config, vocabulary, source, write=True)
        outcome = processor.process_id("src/content/blog/intro.md")
        if outcome.changed:
            print(outcome.added)
    """

    def __init__(
        self,
        config: TaggerConfig,
        vocabulary: Iterable[str],
        source: DocumentSource | None = None,
        write: bool = False,
    ):
        """
        Initialize the processor.

        Args:
            config: Tagging configuration
            vocabulary: Read-only vocabulary snapshot, in lexicographic order
            source: Document source used to render and write documents.
                Without one, any added label counts as a change.
            write: Persist changed documents through the source
        """
        self.config = config
        self.vocabulary = list(vocabulary)
        self.source = source
        self.write = write

    def process_id(self, document_id: str) -> ProcessingOutcome:
        """
        Read a document from the source and process it.

        Args:
            document_id: Identifier understood by the source

        Returns:
            ProcessingOutcome; stage FAILED if the document couldn't be read
        """
        if self.source is None:
            raise ValueError("process_id requires a document source")

        try:
            document = self.source.read_document(document_id)
        except (DocumentReadError, DocumentParseError) as e:
            logger.warning(f"Skipping {document_id}: {e}")
            return ProcessingOutcome(
                document_id=document_id,
                stage=ProcessingStage.FAILED,
                error=str(e),
            )

        return self.process(document)

    def process(self, document: Document) -> ProcessingOutcome:
        """
        Run the tagging pipeline on a parsed document.

        Args:
            document: Parsed document

        Returns:
            ProcessingOutcome with the final hashtags and diagnostics
        """
        config = self.config
        title = document.title or document.fallback_title
        existing = normalize_labels(document.hashtags)
        outcome = ProcessingOutcome(
            document_id=document.id,
            stage=ProcessingStage.EXTRACTED,
            title=title,
            existing=existing,
        )

        outcome.raw_candidates = extract_candidates(
            document, config.candidate_cap, config.keyword_cap
        )

        outcome.generated = normalize_labels(outcome.raw_candidates)
        outcome.stage = ProcessingStage.NORMALIZED

        filtered = filter_denylisted(outcome.generated, config.denylist, config.denylist_mode)
        outcome.denied = filtered.denied
        outcome.stage = ProcessingStage.FILTERED

        outcome.matches = [
            map_to_vocabulary(candidate, self.vocabulary, config.similarity_threshold)
            for candidate in filtered.kept
        ]
        outcome.stage = ProcessingStage.MAPPED

        merged = merge_labels(existing, [m.label for m in outcome.matches], config.max_count)
        outcome.final = merged.final
        outcome.added = merged.added
        outcome.stage = ProcessingStage.MERGED

        logger.debug(
            f"{document.id}: {len(outcome.raw_candidates)} raw, "
            f"{len(outcome.generated)} generated, {len(outcome.denied)} denied, "
            f"{len(outcome.remaps)} remapped, {len(outcome.added)} added"
        )

        final_set = set(outcome.final)
        outcome.suggestions = unique_stable(
            label for label in outcome.generated if label not in final_set
        )[: config.suggestion_diagnostic_cap]

        if len(outcome.final) == 1 or len(outcome.final) < config.min_count:
            outcome.warning = LowRichnessWarning(
                document_id=document.id,
                title=title,
                min_count=config.min_count,
                max_count=config.max_count,
                denylist_mode=config.denylist_mode.value,
                existing=list(existing),
                added=list(outcome.added),
                final=list(outcome.final),
                denied=outcome.denied[:DENIED_DIAGNOSTIC_CAP],
                suggestions=list(outcome.suggestions),
            )
            logger.warning(f"Low hashtag richness for {document.id}: {len(outcome.final)} total")

        if not outcome.added:
            outcome.stage = ProcessingStage.UNCHANGED
            return outcome

        updated = document.with_hashtags(outcome.final)
        if not self._differs(document, updated):
            outcome.added = []
            outcome.stage = ProcessingStage.UNCHANGED
            return outcome

        outcome.changed = True
        outcome.stage = ProcessingStage.CHANGED

        if self.write and self.source is not None:
            try:
                self.source.write_document(updated)
                outcome.written = True
            except DocumentWriteError as e:
                logger.error(f"Failed to write {document.id}: {e}")
                outcome.write_error = str(e)

        return outcome

    def _differs(self, original: Document, updated: Document) -> bool:
        """Compare the rendered update with the original text, byte for byte."""
        if self.source is None or original.raw is None:
            return True
        return self.source.render_document(updated) != original.raw
