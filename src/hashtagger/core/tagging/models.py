"""
Per-document processing results and diagnostics.
"""

from dataclasses import dataclass, field
from enum import Enum

from hashtagger.core.tagging.mapping import MatchResult

# Upper bound on denied candidates carried in a warning.
DENIED_DIAGNOSTIC_CAP = 50


class ProcessingStage(str, Enum):
    """Stages a document passes through, in order."""

    EXTRACTED = "extracted"
    NORMALIZED = "normalized"
    FILTERED = "filtered"
    MAPPED = "mapped"
    MERGED = "merged"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    FAILED = "failed"


@dataclass
class LowRichnessWarning:
    """
    Raised (as data, not as an exception) when a document ends up with too
    few hashtags to be useful.

    Attributes:
        document_id: Document the warning is about
        title: Title used for candidate extraction
        min_count: Configured minimum
        max_count: Configured maximum
        denylist_mode: Configured denylist mode
        existing: Normalized hashtags the document already had
        added: Hashtags the engine added
        final: Final hashtag list
        denied: Denylisted candidates (first DENIED_DIAGNOSTIC_CAP)
        suggestions: Unused normalized candidates worth adding by hand
    """

    document_id: str
    title: str
    min_count: int
    max_count: int
    denylist_mode: str
    existing: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    final: list[str] = field(default_factory=list)
    denied: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def note(self) -> str:
        """One-line explanation of why the warning fired."""
        if len(self.final) == 1:
            return "only 1 hashtag total. This is a strong signal to add manual hashtags."
        return (
            f"only {len(self.final)} hashtags total (min is {self.min_count}). "
            "Add manual hashtags."
        )

    def to_lines(self) -> list[str]:
        """Render the warning as plain text lines."""
        lines = [
            f"Review hashtags for {self.document_id}",
            f"  title: {self.title}",
            f"  settings: min={self.min_count}, max={self.max_count}, "
            f"denylistMode={self.denylist_mode}",
            f"  existing ({len(self.existing)}): {', '.join(self.existing) or '(none)'}",
            f"  added ({len(self.added)}): {', '.join(self.added) or '(none)'}",
            f"  final ({len(self.final)}): {', '.join(self.final) or '(none)'}",
        ]
        if self.denied:
            lines.append(f"  denylisted candidates ({len(self.denied)}): {', '.join(self.denied)}")
        lines.append(f"  note: {self.note}")
        if self.suggestions:
            lines.append(
                f"  manual suggestions (not added) ({len(self.suggestions)}): "
                f"{', '.join(self.suggestions)}"
            )
        return lines


@dataclass
class ProcessingOutcome:
    """
    Result of running the tagging pipeline on one document.

    ``changed`` reflects what the engine decided. When a write was attempted
    and failed, ``changed`` stays True and ``write_error`` says why, so the
    divergence between report and disk is visible.
    """

    document_id: str
    stage: ProcessingStage
    changed: bool = False
    title: str = ""
    existing: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    final: list[str] = field(default_factory=list)

    # Diagnostics
    raw_candidates: list[str] = field(default_factory=list)
    generated: list[str] = field(default_factory=list)
    denied: list[str] = field(default_factory=list)
    matches: list[MatchResult] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    warning: LowRichnessWarning | None = None

    # Failure details
    error: str | None = None
    written: bool = False
    write_error: str | None = None

    @property
    def failed(self) -> bool:
        """True when the document could not be read or parsed."""
        return self.stage == ProcessingStage.FAILED

    @property
    def remaps(self) -> list[MatchResult]:
        """Matches where the candidate was replaced by a vocabulary entry."""
        return [m for m in self.matches if m.changed]

    @property
    def kept_after_denylist(self) -> list[str]:
        """Generated labels that survived the denylist."""
        return [m.candidate for m in self.matches]
