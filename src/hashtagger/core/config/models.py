"""
Configuration data models for hashtagger.

These models define the structure of .hashtagger.json and
~/.config/hashtagger/config.json files, with validation and type safety via
Pydantic.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from hashtagger.core.tagging.denylist import DenylistMode
from hashtagger.core.tagging.slug import normalize_labels


class TaggerConfig(BaseModel):
    """
    Top-level hashtagger configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = TaggerConfig(min_count=2, max_count=8, denylist=["Astro JS"])
        >>> config.denylist
        ['astro-js']
    """

    # Discovery
    content_dir: str = Field(
        default="src/content/blog",
        description="Directory scanned recursively for .md files",
    )
    content_glob: Optional[str] = Field(
        default=None,
        description="Glob pattern used instead of content_dir when set",
    )

    # Label counts
    min_count: int = Field(
        default=3,
        ge=1,
        description="Warn when a document ends up with fewer hashtags than this",
    )
    max_count: int = Field(
        default=12,
        ge=1,
        description="Maximum hashtags stored in frontmatter",
    )

    # Denylist (mode must be declared before the list it governs, and is fixed
    # once set because exact-mode entries are normalized on validation)
    denylist_mode: DenylistMode = Field(
        default=DenylistMode.EXACT,
        frozen=True,
        description="'exact' slug matching or 'glob' patterns such as 'astro-*'",
    )
    denylist: list[str] = Field(
        default_factory=list,
        description="Labels or patterns never added as new hashtags",
    )

    # Vocabulary
    cache_file: str = Field(
        default=".hashtags-cache.json",
        description="Path of the persisted hashtag vocabulary",
    )
    similarity_threshold: float = Field(
        default=0.6,
        description="Jaccard score (0.0-1.0) needed to map a candidate onto the vocabulary",
    )

    # Budgets
    candidate_cap: int = Field(
        default=500,
        ge=0,
        description="Maximum raw candidates considered per document",
    )
    keyword_cap: int = Field(
        default=30,
        ge=0,
        description="Maximum body keywords considered per document",
    )
    remap_diagnostic_cap: int = Field(
        default=25,
        ge=0,
        description="How many vocabulary remaps to print in verbose mode",
    )
    suggestion_diagnostic_cap: int = Field(
        default=10,
        ge=0,
        description="How many unused candidates to list in low-richness warnings",
    )
    extra_word_scan_limit: int = Field(
        default=300,
        ge=0,
        description="Reserved. Accepted for compatibility; not used by tagging",
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,  # Validate on field assignment
    )

    @field_validator("content_glob", mode="before")
    @classmethod
    def blank_glob_is_none(cls, v: Any) -> Any:
        """Treat an empty or whitespace glob as unset."""
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("similarity_threshold")
    @classmethod
    def clamp_threshold(cls, v: float) -> float:
        """Clamp the coerced threshold into [0, 1]."""
        return max(0.0, min(1.0, v))

    @field_validator("denylist")
    @classmethod
    def prepare_denylist(cls, v: list[str], info: ValidationInfo) -> list[str]:
        """
        Normalize exact-mode entries into labels.

        Glob patterns keep their wildcard characters and are only trimmed.
        """
        mode = info.data.get("denylist_mode", DenylistMode.EXACT)
        if mode == DenylistMode.GLOB:
            return [entry.strip() for entry in v if entry.strip()]
        return normalize_labels(v)

    @model_validator(mode="after")
    def check_counts(self) -> "TaggerConfig":
        """Require max_count >= min_count."""
        if self.max_count < self.min_count:
            raise ValueError(
                f"max_count must be >= min_count (got max_count={self.max_count}, "
                f"min_count={self.min_count})"
            )
        return self
