"""
Hashtagger CLI - tag command.

Derives hashtags for Markdown posts and writes them into the ``hashtags``
frontmatter key. Dry-run is the default; nothing is written without
``--write``.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hashtagger.cli.common import (
    CONFIG_OPTION_HELP,
    document_store,
    load_config_or_exit,
    resolve_documents,
    vocabulary_store,
)
from hashtagger.cli.errors import ExitCode, print_cache_write_error
from hashtagger.core.config import TaggerConfig
from hashtagger.core.tagging.batch import load_vocabulary, reconcile_vocabulary, run_batch
from hashtagger.core.tagging.models import ProcessingOutcome

console = Console()


def tag(
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=CONFIG_OPTION_HELP,
    ),
    single_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Process a single markdown file only",
    ),
    dry_run: bool = typer.Option(
        True,
        "--dry-run/--write",
        help="Show changes without writing (default), or write files and the vocabulary",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show candidates, denylist hits and vocabulary remaps per file",
    ),
) -> None:
    """
    Add hashtags to markdown frontmatter.

    Candidates come from the title, headings, existing tags and the most
    frequent body words. They are normalized, filtered by the denylist,
    mapped onto the existing vocabulary, and appended after any hashtags a
    post already has (up to max_count). Existing hashtags are never removed.

    Examples:
        hashtagger tag                        # Dry run over content_dir
        hashtagger tag --write                # Apply changes
        hashtagger tag --file post.md -v      # One file, verbose
        hashtagger tag --config tagger.json   # Explicit config
    """
    write = not dry_run
    config = load_config_or_exit(config_file)
    store = document_store(config)
    cache = vocabulary_store(config)

    document_ids = resolve_documents(store, single_file)

    try:
        loaded = load_vocabulary(cache, store, document_ids, write=write)
    except OSError as e:
        print_cache_write_error(cache.cache_file, e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if loaded.error:
        console.print(
            f"[yellow]Warning:[/yellow] {escape(loaded.error)}. "
            "Rebuilding the vocabulary from existing hashtags."
        )
    if loaded.built and verbose:
        action = "written" if loaded.saved else "would be written"
        console.print(
            f"[dim]Vocabulary built from existing hashtags "
            f"({len(loaded.vocabulary)} hashtags), {action}: {escape(str(cache.cache_file))}[/dim]"
        )

    report = run_batch(store, document_ids, config, loaded.vocabulary, write=write)

    for outcome in report.outcomes:
        if outcome.failed:
            console.print(
                f"\n[red]Error processing {escape(outcome.document_id)}:[/red] "
                f"{escape(outcome.error or '')}"
            )
            continue
        if verbose:
            _print_verbose(outcome, config)
        if outcome.warning is not None:
            lines = outcome.warning.to_lines()
            console.print(f"\n[yellow]WARN:[/yellow] {escape(lines[0])}")
            for line in lines[1:]:
                console.print(escape(line))
        if outcome.write_error:
            console.print(f"[red]Write failed:[/red] {escape(outcome.write_error)}")

    changed = [o for o in report.outcomes if o.changed]
    if changed:
        _print_changes(changed, write)

    try:
        grew = reconcile_vocabulary(cache, report, write=write)
    except OSError as e:
        print_cache_write_error(cache.cache_file, e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if grew and verbose:
        action = "updated" if write else "would be updated"
        console.print(
            f"\nVocabulary {action}: {escape(str(cache.cache_file))} "
            f"({len(report.merged_vocabulary)} hashtags)"
        )

    console.print(
        f"\nDone. Files processed: {report.processed}, changed: {report.changed}, "
        f"skipped: {report.skipped}, failed: {report.failed}"
    )
    if dry_run:
        console.print("[dim]Dry run only. Re-run with --write to apply changes.[/dim]")

    if report.write_failed:
        console.print(
            f"[red]✗[/red] {report.write_failed} file(s) were reported as changed "
            "but could not be written."
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _print_verbose(outcome: ProcessingOutcome, config: TaggerConfig) -> None:
    """Print per-file pipeline detail."""
    console.print(f"\n[bold]{escape(outcome.document_id)}[/bold]")
    console.print(f"  title: {escape(outcome.title)}")
    console.print(f"  candidates (raw): {len(outcome.raw_candidates)}")
    console.print(f"  generated (pre-denylist): {len(outcome.generated)}")
    console.print(f"  denylisted: {len(outcome.denied)}")
    console.print(f"  generated (post-denylist): {len(outcome.kept_after_denylist)}")

    remaps = outcome.remaps
    limit = config.remap_diagnostic_cap
    console.print(f"  vocabulary remaps: {len(remaps)} (threshold {config.similarity_threshold})")
    for match in remaps[:limit]:
        console.print(f"    {match.candidate} -> {match.label} (score {match.score:.2f})")
    if len(remaps) > limit:
        console.print(f"    ...and {len(remaps) - limit} more remaps")


def _print_changes(changed: list[ProcessingOutcome], write: bool) -> None:
    """Print a table of changed files."""
    title = "Updated Files" if write else "Proposed Changes"
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("File", style="cyan")
    table.add_column("Added", style="green")
    table.add_column("Total", justify="right")

    for outcome in changed:
        table.add_row(
            escape(outcome.document_id),
            escape(", ".join(outcome.added)),
            str(len(outcome.final)),
        )

    console.print()
    console.print(table)
