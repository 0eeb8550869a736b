"""
Hashtag generation engine.

Pure building blocks for turning a document into hashtags:
- slug: label normalization and the stopword list
- keywords: code stripping, headings, keyword ranking
- candidates: raw candidate extraction
- denylist: exclusion of newly generated labels
- mapping: Jaccard mapping onto the vocabulary
- merge: combining existing and new labels under a cap

Orchestration lives in ``processor`` (one document) and ``batch`` (many).
"""

from .candidates import extract_candidates
from .denylist import DenylistMode, DenylistResult, filter_denylisted, glob_to_regex
from .keywords import extract_headings, extract_words, rank_keywords, strip_code_blocks
from .mapping import MatchResult, jaccard, map_to_vocabulary, tokenize_label
from .merge import MergeResult, merge_labels
from .models import LowRichnessWarning, ProcessingOutcome, ProcessingStage
from .slug import STOPWORDS, is_valid_label, normalize_label, normalize_labels, unique_stable

__all__ = [
    # Normalization
    "STOPWORDS",
    "is_valid_label",
    "normalize_label",
    "normalize_labels",
    "unique_stable",
    # Extraction
    "extract_candidates",
    "extract_headings",
    "extract_words",
    "rank_keywords",
    "strip_code_blocks",
    # Filtering and mapping
    "DenylistMode",
    "DenylistResult",
    "filter_denylisted",
    "glob_to_regex",
    "MatchResult",
    "jaccard",
    "map_to_vocabulary",
    "tokenize_label",
    # Merging and results
    "MergeResult",
    "merge_labels",
    "LowRichnessWarning",
    "ProcessingOutcome",
    "ProcessingStage",
]
