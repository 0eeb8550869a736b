"""
Document source protocol and errors.

The tagging engine never touches the filesystem directly. It talks to a
DocumentSource, which lists, reads, renders and writes documents. The
Markdown implementation lives in ``store.py``.
"""

from typing import Protocol, runtime_checkable

from .models import Document


class DocumentError(Exception):
    """Base class for per-document failures."""

    def __init__(self, document_id: str, message: str):
        self.document_id = document_id
        super().__init__(f"{document_id}: {message}")


class DocumentReadError(DocumentError):
    """Raised when a document cannot be read from its source."""

    pass


class DocumentParseError(DocumentError):
    """Raised when a document's metadata block is malformed."""

    pass


class DocumentWriteError(DocumentError):
    """Raised when an updated document cannot be persisted."""

    pass


@runtime_checkable
class DocumentSource(Protocol):
    """
    Protocol for document source implementations.

    Sources are responsible for:
    - Enumerating documents in a deterministic order
    - Parsing the metadata block into a mapping
    - Rendering a document back to its serialized form
    - Persisting updated documents
    """

    def list_documents(self, selector: str | None = None) -> list[str]:
        """
        List document identifiers.

        Args:
            selector: Optional single document identifier. When given, only
                that document is returned.

        Returns:
            Ordered list of document identifiers
        """
        ...

    def read_document(self, document_id: str) -> Document:
        """
        Read and parse a document.

        Raises:
            DocumentReadError: If the document cannot be read
            DocumentParseError: If the metadata block is malformed
        """
        ...

    def render_document(self, document: Document) -> str:
        """Serialize a document exactly as ``write_document`` would store it."""
        ...

    def write_document(self, document: Document) -> None:
        """
        Persist a document.

        Raises:
            DocumentWriteError: If the document cannot be written
        """
        ...
