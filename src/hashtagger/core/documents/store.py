"""
Markdown document store.

Reads and writes Markdown posts with YAML frontmatter from the filesystem.
Uses python-frontmatter for parsing and serialization so that metadata keys
the engine does not own are carried through untouched and in order.
"""

import glob
import logging
import os
from pathlib import Path

import frontmatter  # type: ignore[import-untyped]
import yaml  # type: ignore[import-untyped]

from .models import Document
from .source import DocumentParseError, DocumentReadError, DocumentWriteError

logger = logging.getLogger(__name__)

MARKDOWN_GLOB = "**/*.md"


class MarkdownDocumentStore:
    """
    Filesystem document source for Markdown posts.

    Documents are discovered either from an explicit glob pattern or from
    every ``.md`` file below a content directory. Hidden files and
    directories are skipped, and results are sorted so that batches run in
    a stable order.

    Example:
        store = MarkdownDocumentStore(Path("src/content/blog"))
        for document_id in store.list_documents():
            document = store.read_document(document_id)
    """

    def __init__(
        self,
        content_dir: Path | str,
        content_glob: str | None = None,
        root: Path | None = None,
    ):
        """
        Initialize the store.

        Args:
            content_dir: Directory scanned recursively for ``.md`` files
            content_glob: Glob pattern that overrides ``content_dir``
            root: Base directory for relative paths (defaults to cwd)
        """
        self.root = Path(root) if root is not None else Path.cwd()
        self.content_dir = Path(content_dir)
        self.content_glob = content_glob

    def get_pattern(self) -> str:
        """
        Get the glob pattern used for discovery.

        Returns:
            Absolute glob pattern
        """
        if self.content_glob:
            pattern = self.content_glob
        else:
            pattern = os.path.join(str(self.content_dir), MARKDOWN_GLOB)
        if not os.path.isabs(pattern):
            pattern = os.path.join(str(self.root), pattern)
        return pattern

    def list_documents(self, selector: str | None = None) -> list[str]:
        """
        List Markdown files to process.

        Args:
            selector: Single file path. When given, discovery is skipped.

        Returns:
            Sorted list of file paths
        """
        if selector:
            return [selector]

        matches = glob.glob(self.get_pattern(), recursive=True)
        files = sorted(path for path in matches if os.path.isfile(path))
        logger.debug(f"Discovered {len(files)} document(s) with {self.get_pattern()}")
        return files

    def read_document(self, document_id: str) -> Document:
        """
        Read and parse a Markdown file.

        The original text is kept on the document so that callers can detect
        no-op rewrites.

        Args:
            document_id: Path to the Markdown file

        Returns:
            Parsed document

        Raises:
            DocumentReadError: If the file cannot be read or decoded
            DocumentParseError: If the frontmatter is not valid YAML
        """
        try:
            with open(document_id, encoding="utf-8", newline="") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(document_id, str(e)) from e

        try:
            post = frontmatter.loads(raw)
        except (yaml.YAMLError, ValueError) as e:
            raise DocumentParseError(document_id, f"invalid frontmatter: {e}") from e

        return Document(
            id=document_id,
            metadata=dict(post.metadata),
            body=post.content,
            raw=raw,
        )

    def render_document(self, document: Document) -> str:
        """
        Serialize a document to frontmatter Markdown.

        Keys are written in their existing order and the output always ends
        with a single newline.

        Args:
            document: Document to serialize

        Returns:
            Full file text
        """
        post = frontmatter.Post(document.body)
        post.metadata = dict(document.metadata)
        return frontmatter.dumps(post, sort_keys=False).rstrip("\n") + "\n"

    def write_document(self, document: Document) -> None:
        """
        Overwrite a Markdown file with the rendered document.

        Args:
            document: Document to persist

        Raises:
            DocumentWriteError: If the file cannot be written
        """
        text = self.render_document(document)
        try:
            with open(document.id, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise DocumentWriteError(document.id, str(e)) from e
        logger.info(f"Wrote {document.id}")
