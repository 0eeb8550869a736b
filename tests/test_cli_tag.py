"""
Tests for the hashtagger tag CLI command.
"""

import json
from pathlib import Path

import frontmatter  # type: ignore[import-untyped]
import pytest
from typer.testing import CliRunner

from hashtagger.cli import app

runner = CliRunner()


@pytest.fixture
def project(isolated_env: Path) -> Path:
    """Create a project with a posts directory and a project config."""
    (isolated_env / "posts").mkdir()
    (isolated_env / ".hashtagger.json").write_text(
        json.dumps({"content_dir": "posts", "cache_file": ".cache/hashtags.json"}),
        encoding="utf-8",
    )
    return isolated_env


def _post(project: Path, name: str, frontmatter_block: str, body: str = "") -> Path:
    path = project / "posts" / name
    path.write_text(f"---\n{frontmatter_block}\n---\n\n{body}", encoding="utf-8")
    return path


def test_tag_dry_run_by_default(project: Path) -> None:
    """Test that the default run reports changes without writing."""
    path = _post(project, "intro.md", "title: Intro to API Design", "APIs need contracts.\n")
    before = path.read_text(encoding="utf-8")

    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 0
    assert "Proposed Changes" in result.stdout
    assert "Done. Files processed: 1, changed: 1, skipped: 0, failed: 0" in result.stdout
    assert "Dry run only" in result.stdout
    assert path.read_text(encoding="utf-8") == before
    assert not (project / ".cache" / "hashtags.json").exists()


def test_tag_write_updates_files_and_cache(project: Path) -> None:
    """Test that --write updates posts and the vocabulary cache."""
    path = _post(project, "intro.md", "title: Intro to API Design", "APIs need contracts.\n")

    result = runner.invoke(app, ["tag", "--write"])

    assert result.exit_code == 0
    assert "Updated Files" in result.stdout
    hashtags = frontmatter.load(str(path)).metadata["hashtags"]
    assert hashtags[0] == "intro-to-api-design"
    cache = json.loads((project / ".cache" / "hashtags.json").read_text(encoding="utf-8"))
    assert cache["version"] == 1
    assert cache["hashtags"] == sorted(hashtags)


def test_tag_write_twice_is_idempotent(project: Path) -> None:
    """Test that a second --write run changes nothing."""
    path = _post(project, "intro.md", "title: Intro to API Design", "APIs need contracts.\n")
    runner.invoke(app, ["tag", "--write"])
    written = path.read_text(encoding="utf-8")

    result = runner.invoke(app, ["tag", "--write"])

    assert result.exit_code == 0
    assert "changed: 0, skipped: 1" in result.stdout
    assert path.read_text(encoding="utf-8") == written


def test_tag_single_file(project: Path) -> None:
    """Test that --file limits processing to one post."""
    _post(project, "a.md", "title: Kubernetes Basics")
    _post(project, "b.md", "title: Docker Basics")

    result = runner.invoke(app, ["tag", "--file", "posts/a.md"])

    assert result.exit_code == 0
    assert "Files processed: 1" in result.stdout


def test_tag_missing_single_file(project: Path) -> None:
    """Test that --file with a missing path fails."""
    result = runner.invoke(app, ["tag", "--file", "posts/nope.md"])

    assert result.exit_code == 1
    assert "File not found" in result.stdout


def test_tag_no_documents(project: Path) -> None:
    """Test that an empty content directory is an error."""
    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 1
    assert "No markdown files found" in result.stdout


def test_tag_invalid_config(project: Path) -> None:
    """Test that an invalid config exits with a user error."""
    (project / ".hashtagger.json").write_text(
        json.dumps({"content_dir": "posts", "min_count": 5, "max_count": 2}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.stdout


def test_tag_explicit_config(project: Path, tmp_path: Path) -> None:
    """Test that --config points at another config file."""
    other = tmp_path / "other-posts"
    other.mkdir()
    (other / "x.md").write_text("---\ntitle: Elsewhere Post\n---\n", encoding="utf-8")
    config_file = tmp_path / "tagger.json"
    config_file.write_text(json.dumps({"content_dir": str(other)}), encoding="utf-8")

    result = runner.invoke(app, ["tag", "--config", str(config_file)])

    assert result.exit_code == 0
    assert "Files processed: 1" in result.stdout


def test_tag_reports_parse_errors(project: Path) -> None:
    """Test that a malformed post is reported and the run continues."""
    _post(project, "bad.md", "title: [unclosed")
    _post(project, "good.md", "title: Kubernetes Basics")

    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 0
    assert "Error processing" in result.stdout
    assert "failed: 1" in result.stdout


def test_tag_low_richness_warning(project: Path) -> None:
    """Test that a sparse post prints a warning block."""
    _post(project, "go.md", "title: Go")

    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 0
    assert "WARN:" in result.stdout
    assert "only 1 hashtag total" in result.stdout


def test_tag_verbose(project: Path) -> None:
    """Test that --verbose prints pipeline diagnostics."""
    _post(project, "a.md", "title: Kubernetes Basics")

    result = runner.invoke(app, ["tag", "--verbose"])

    assert result.exit_code == 0
    assert "candidates (raw): 1" in result.stdout
    assert "denylisted: 0" in result.stdout
    assert "vocabulary remaps: 0" in result.stdout


def test_tag_verbose_shows_remaps(project: Path) -> None:
    """Test that remaps onto the vocabulary are listed."""
    cache = project / ".cache" / "hashtags.json"
    cache.parent.mkdir()
    cache.write_text(
        json.dumps(
            {"version": 1, "updatedAt": "2025-01-01T00:00:00Z", "hashtags": ["react-hooks"]}
        ),
        encoding="utf-8",
    )
    _post(project, "hooks.md", "title: React Hooks Guide")

    result = runner.invoke(app, ["tag", "--verbose"])

    assert result.exit_code == 0
    assert "vocabulary remaps: 1" in result.stdout
    assert "react-hooks-guide -> react-hooks" in result.stdout


def test_tag_corrupt_cache_continues(project: Path) -> None:
    """Test that an unreadable cache is reported but not fatal."""
    cache = project / ".cache" / "hashtags.json"
    cache.parent.mkdir()
    cache.write_text("{broken", encoding="utf-8")
    _post(project, "a.md", "title: Kubernetes Basics")

    result = runner.invoke(app, ["tag"])

    assert result.exit_code == 0
    assert "Warning:" in result.stdout
    assert "changed: 1" in result.stdout


def test_tag_unsupported_cache_keeps_existing_hashtags(project: Path) -> None:
    """Test that a rewritten cache still holds labels from documents it couldn't load."""
    cache = project / ".cache" / "hashtags.json"
    cache.parent.mkdir()
    cache.write_text(json.dumps({"version": 2, "hashtags": []}), encoding="utf-8")
    _post(project, "old.md", "title: Old\nhashtags: [react-hooks, kubernetes]")
    new = _post(project, "new.md", "title: React Hooks Guide")

    result = runner.invoke(app, ["tag", "--write"])

    assert result.exit_code == 0
    assert "Warning:" in result.stdout
    assert "react-hooks" in frontmatter.load(str(new)).metadata["hashtags"]
    labels = json.loads(cache.read_text(encoding="utf-8"))["hashtags"]
    assert "kubernetes" in labels
    assert "react-hooks" in labels


def test_tag_unwritable_cache_is_general_error(project: Path) -> None:
    """Test that a cache path that can't be written exits with an error."""
    (project / "blocker").write_text("not a directory", encoding="utf-8")
    (project / ".hashtagger.json").write_text(
        json.dumps({"content_dir": "posts", "cache_file": "blocker/hashtags.json"}),
        encoding="utf-8",
    )
    _post(project, "a.md", "title: Kubernetes Basics")

    result = runner.invoke(app, ["tag", "--write"])

    assert result.exit_code == 1
    assert "Could not write vocabulary cache" in result.stdout
