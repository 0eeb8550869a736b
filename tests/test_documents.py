"""
Tests for the document model and the Markdown document store.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from hashtagger.core.documents import (
    Document,
    DocumentParseError,
    DocumentReadError,
    DocumentSource,
    DocumentWriteError,
    MarkdownDocumentStore,
)


class TestDocument:
    """Test the Document model."""

    def test_title(self) -> None:
        """Test that titles are stripped and blanks ignored."""
        assert Document(id="a.md", metadata={"title": "  Hello  "}).title == "Hello"
        assert Document(id="a.md", metadata={"title": "   "}).title is None
        assert Document(id="a.md", metadata={"title": 42}).title is None
        assert Document(id="dir/my-post.md").fallback_title == "my-post"

    def test_list_fields_keep_strings_only(self) -> None:
        """Test that tags and hashtags ignore non-string items and non-lists."""
        document = Document(
            id="a.md", metadata={"tags": ["one", 2, None, "two"], "hashtags": "python"}
        )
        assert document.category_tags == ["one", "two"]
        assert document.hashtags == []

    def test_with_hashtags_copies(self) -> None:
        """Test that with_hashtags leaves the original untouched."""
        original = Document(id="a.md", metadata={"title": "T", "draft": True}, raw="x")

        updated = original.with_hashtags(["python"])

        assert updated.metadata == {"title": "T", "draft": True, "hashtags": ["python"]}
        assert "hashtags" not in original.metadata
        assert updated.raw == "x"


class TestMarkdownDocumentStore:
    """Test MarkdownDocumentStore discovery, reading and writing."""

    def test_implements_protocol(self, store: MarkdownDocumentStore) -> None:
        """Test that the store satisfies DocumentSource."""
        assert isinstance(store, DocumentSource)

    def test_list_documents_recursive_and_sorted(
        self, store: MarkdownDocumentStore, write_post: Callable[..., Path]
    ) -> None:
        """Test recursive discovery in sorted order, skipping hidden and non-md files."""
        b = write_post("b.md", "title: B")
        a = write_post("nested/deeper/a.md", "title: A")
        write_post("notes.txt", None, "not markdown")
        write_post(".drafts/hidden.md", "title: Hidden")

        assert store.list_documents() == sorted([str(a), str(b)])

    def test_content_glob_overrides_dir(
        self, content_dir: Path, write_post: Callable[..., Path]
    ) -> None:
        """Test that content_glob replaces directory discovery."""
        write_post("a.md", "title: A")
        keep = write_post("keep/b.md", "title: B")
        store = MarkdownDocumentStore(content_dir, content_glob=str(content_dir / "keep" / "*.md"))

        assert store.list_documents() == [str(keep)]

    def test_relative_pattern_uses_root(
        self, tmp_path: Path, write_post: Callable[..., Path]
    ) -> None:
        """Test that relative content directories resolve against root."""
        path = write_post("a.md", "title: A")
        store = MarkdownDocumentStore("content", root=tmp_path)

        assert store.get_pattern() == str(tmp_path / "content" / "**" / "*.md")
        assert store.list_documents() == [str(path)]

    def test_selector_skips_discovery(self, store: MarkdownDocumentStore) -> None:
        """Test that a selector is returned as the only document."""
        assert store.list_documents("some/post.md") == ["some/post.md"]

    def test_empty_directory(self, store: MarkdownDocumentStore) -> None:
        """Test that no files yields an empty list."""
        assert store.list_documents() == []

    def test_read_document(
        self, store: MarkdownDocumentStore, write_post: Callable[..., Path]
    ) -> None:
        """Test that metadata, body and raw text are parsed."""
        path = write_post("a.md", "title: Hello\ntags: [python]", "# Heading\n\nBody.\n")

        document = store.read_document(str(path))

        assert document.id == str(path)
        assert document.metadata == {"title": "Hello", "tags": ["python"]}
        assert "# Heading" in document.body
        assert document.raw == path.read_text(encoding="utf-8")

    def test_read_without_frontmatter(
        self, store: MarkdownDocumentStore, write_post: Callable[..., Path]
    ) -> None:
        """Test that a file without frontmatter has empty metadata."""
        path = write_post("plain.md", None, "Just text.\n")

        document = store.read_document(str(path))

        assert document.metadata == {}
        assert "Just text." in document.body

    def test_read_missing_raises(self, store: MarkdownDocumentStore, content_dir: Path) -> None:
        """Test that a missing file raises DocumentReadError."""
        with pytest.raises(DocumentReadError):
            store.read_document(str(content_dir / "missing.md"))

    def test_read_malformed_raises(
        self, store: MarkdownDocumentStore, write_post: Callable[..., Path]
    ) -> None:
        """Test that malformed YAML raises DocumentParseError."""
        path = write_post("bad.md", "title: [unclosed")
        with pytest.raises(DocumentParseError):
            store.read_document(str(path))

    def test_render_keeps_key_order_and_single_newline(
        self, store: MarkdownDocumentStore
    ) -> None:
        """Test that rendering keeps metadata order and ends with one newline."""
        document = Document(
            id="a.md",
            metadata={"title": "Hello", "date": "2024-01-02", "hashtags": ["python"]},
            body="Body.\n\n\n",
        )

        text = store.render_document(document)

        assert text.startswith("---\n")
        assert text.endswith("Body.\n")
        assert text.index("title:") < text.index("date:") < text.index("hashtags:")

    def test_write_then_read(
        self, store: MarkdownDocumentStore, write_post: Callable[..., Path]
    ) -> None:
        """Test that a written document reads back with its hashtags."""
        path = write_post("a.md", "title: Hello", "Body.\n")
        document = store.read_document(str(path))

        store.write_document(document.with_hashtags(["hello"]))

        reread = store.read_document(str(path))
        assert reread.metadata["hashtags"] == ["hello"]
        assert reread.raw == store.render_document(document.with_hashtags(["hello"]))

    def test_write_failure_raises(self, store: MarkdownDocumentStore, tmp_path: Path) -> None:
        """Test that an unwritable path raises DocumentWriteError."""
        document = Document(id=str(tmp_path / "no-such-dir" / "a.md"), metadata={"title": "T"})
        with pytest.raises(DocumentWriteError):
            store.write_document(document)
