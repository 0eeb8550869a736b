"""
Hashtagger CLI - vocabulary commands.

Inspect and rebuild the hashtag vocabulary cache.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from hashtagger.cli.common import (
    CONFIG_OPTION_HELP,
    document_store,
    load_config_or_exit,
    resolve_documents,
    vocabulary_store,
)
from hashtagger.cli.errors import ExitCode, print_cache_write_error, print_error
from hashtagger.core.vocabulary import VocabularyLoadError, scan_document_hashtags

console = Console()
app = typer.Typer(help="Inspect and rebuild the hashtag vocabulary")


@app.command()
def rebuild(
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=CONFIG_OPTION_HELP,
    ),
    dry_run: bool = typer.Option(
        True,
        "--dry-run/--write",
        help="Show the cache that would be written (default), or write it",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print extra detail",
    ),
) -> None:
    """
    Rebuild the vocabulary from hashtags already in frontmatter.

    Scans every document for its existing hashtags. Posts are not edited.

    Examples:
        hashtagger vocabulary rebuild           # Preview the rebuilt cache
        hashtagger vocabulary rebuild --write   # Replace the cache file
    """
    config = load_config_or_exit(config_file)
    store = document_store(config)
    cache = vocabulary_store(config)

    document_ids = resolve_documents(store, None)
    vocabulary = scan_document_hashtags(store, document_ids)

    if dry_run:
        console.print(f"\nDRY-RUN: Cache would be written to: {escape(str(cache.cache_file))}")
        console.print(f"DRY-RUN: Cache hashtag count: {len(vocabulary)}")
        console.print("DRY-RUN: Cache payload:")
        console.print_json(json.dumps(cache.to_payload(vocabulary)))
        if verbose and len(vocabulary) == 0:
            console.print(
                "DRY-RUN: Note: empty cache is expected if no posts currently "
                'contain frontmatter "hashtags".'
            )
    else:
        try:
            path = cache.save(vocabulary)
        except OSError as e:
            print_cache_write_error(cache.cache_file, e)
            raise typer.Exit(ExitCode.GENERAL_ERROR)
        console.print(f"\nCache written: {escape(str(path))} ({len(vocabulary)} hashtags)")

    mode = "dry-run" if dry_run else "written"
    console.print(f"\nDone. Cache rebuild completed ({mode}).")


@app.command()
def show(
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=CONFIG_OPTION_HELP,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    List the hashtags in the vocabulary cache.

    Examples:
        hashtagger vocabulary show
        hashtagger vocabulary show --json
    """
    config = load_config_or_exit(config_file)
    cache = vocabulary_store(config)

    if not cache.exists():
        console.print(f"[dim]No vocabulary cache at {escape(str(cache.cache_file))}[/dim]")
        raise typer.Exit(ExitCode.SUCCESS)

    try:
        vocabulary = cache.load()
    except VocabularyLoadError as e:
        print_error(
            "Vocabulary cache is unreadable",
            reason=str(e),
            solution="hashtagger vocabulary rebuild --write",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if json_output:
        console.print(json.dumps(vocabulary.labels, indent=2))
        return

    for label in vocabulary:
        console.print(f"#{label}")
    console.print(f"\n[dim]{len(vocabulary)} hashtags in {escape(str(cache.cache_file))}[/dim]")
