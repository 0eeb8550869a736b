"""
Raw candidate extraction from a document.
"""

from hashtagger.core.documents.models import Document
from hashtagger.core.tagging.keywords import extract_headings, rank_keywords
from hashtagger.core.tagging.slug import unique_stable


def extract_candidates(document: Document, candidate_cap: int, keyword_cap: int) -> list[str]:
    """
    Collect unnormalized candidate strings for a document.

    Sources in priority order:
    1. Title (frontmatter ``title``, or the filename stem)
    2. Headings, with code removed before scanning
    3. Category ``tags``, verbatim
    4. Top body keywords

    Duplicates are removed by exact string match before normalization; the
    cap applies to the combined list.

    Args:
        document: Parsed document
        candidate_cap: Maximum number of candidates returned
        keyword_cap: Maximum number of body keywords considered

    Returns:
        Ordered list of raw candidates
    """
    title = document.title or document.fallback_title
    headings = extract_headings(document.body)
    keywords = rank_keywords(document.body, keyword_cap)

    combined = unique_stable([title, *headings, *document.category_tags, *keywords])
    return combined[: max(0, candidate_cap)]
