"""
Pytest configuration and shared fixtures.

Provides fixtures for temp content directories, markdown post creation,
isolated configuration environments, and sample configs.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from hashtagger.core.config.models import TaggerConfig
from hashtagger.core.documents import MarkdownDocumentStore

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Provide a project directory with no user config and no HASHTAGGER_* env.

    Returns the project directory, which is also the working directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "HASHTAGGER_MIN_COUNT",
        "HASHTAGGER_MAX_COUNT",
        "HASHTAGGER_SIMILARITY_THRESHOLD",
        "HASHTAGGER_DENYLIST_MODE",
        "HASHTAGGER_CACHE_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return project


# ==============================================================================
# Content Fixtures
# ==============================================================================


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Provide an empty content directory for markdown posts."""
    directory = tmp_path / "content"
    directory.mkdir()
    return directory


@pytest.fixture
def write_post(content_dir: Path) -> Callable[..., Path]:
    """
    Provide a helper that writes a markdown post into the content directory.

    Usage:
        path = write_post("intro.md", "title: Intro", "Body text")
    """

    def _write(name: str, frontmatter_block: str | None, body: str = "") -> Path:
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if frontmatter_block is None:
            text = body
        else:
            text = f"---\n{frontmatter_block.strip()}\n---\n\n{body}"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(content_dir: Path) -> MarkdownDocumentStore:
    """Provide a markdown store rooted at the content directory."""
    return MarkdownDocumentStore(content_dir)


# ==============================================================================
# Config Fixtures
# ==============================================================================


@pytest.fixture
def config() -> TaggerConfig:
    """Provide the default tagging configuration (min 3, max 12, threshold 0.6)."""
    return TaggerConfig()
