"""
Standardized error handling and exit codes for the hashtagger CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for hashtagger CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, including documents that failed to write."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "No markdown files found",
        ...     reason="content_dir is src/content/blog",
        ...     solution="hashtagger tag --file post.md",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_config_error(error: Exception) -> None:
    """Print error when configuration cannot be loaded."""
    print_error(
        "Invalid configuration",
        reason=str(error),
        solution="check .hashtagger.json (min_count >= 1, max_count >= min_count)",
    )


def print_no_documents_error(pattern: str) -> None:
    """Print error when discovery finds nothing to process."""
    print_error(
        "No markdown files found with given options.",
        reason=f"Searched: {pattern}",
        solution="set content_dir or content_glob in .hashtagger.json, or pass --file",
    )


def print_missing_file_error(path: Path) -> None:
    """Print error when --file points at a missing file."""
    print_error(
        f"File not found: {path}",
        solution="pass an existing markdown file to --file",
    )


def print_cache_write_error(path: Path, error: OSError) -> None:
    """Print error when the vocabulary cache cannot be saved."""
    print_error(
        f"Could not write vocabulary cache: {path}",
        reason=str(error),
        solution="check that cache_file points at a writable location",
    )
