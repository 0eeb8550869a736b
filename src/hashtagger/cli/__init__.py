"""
Hashtagger CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from hashtagger import __version__
from hashtagger.cli import tag, vocabulary
from hashtagger.core.config.env import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="hashtagger",
    help="Assign normalized hashtags to markdown posts",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Hashtagger - hashtags for markdown frontmatter.

    Builds hashtags from each post's title, headings, tags and body text,
    folds near-duplicates onto a learned vocabulary, and appends them to the
    post's ``hashtags`` list without removing anything already there.

    Quick Start:
        hashtagger tag                      # Preview changes
        hashtagger tag --write              # Apply them
        hashtagger vocabulary show          # Inspect the vocabulary
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()
    setup_logging(debug)

    ctx.obj = {"debug": debug}


app.command(name="tag")(tag.tag)
app.add_typer(vocabulary.app, name="vocabulary")


@app.command()
def version() -> None:
    """Show hashtagger version and exit."""
    console.print(f"hashtagger version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
