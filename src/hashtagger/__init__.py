"""
Hashtagger - Frontmatter hashtag assignment for Markdown posts.

A CLI tool that derives a bounded set of normalized hashtags for Markdown
documents and reconciles them against a learned vocabulary.
"""

__version__ = "0.3.0-dev"

# Re-export core models for convenience
from hashtagger.core.config.models import TaggerConfig
from hashtagger.core.tagging.models import ProcessingOutcome
from hashtagger.core.vocabulary.models import Vocabulary

__all__ = ["ProcessingOutcome", "TaggerConfig", "Vocabulary", "__version__"]
