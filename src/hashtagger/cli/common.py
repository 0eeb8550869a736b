"""
Helpers shared by hashtagger CLI commands.
"""

from pathlib import Path

import typer

from hashtagger.cli.errors import (
    ExitCode,
    print_config_error,
    print_missing_file_error,
    print_no_documents_error,
)
from hashtagger.core.config import ConfigurationError, TaggerConfig, load_config
from hashtagger.core.documents import MarkdownDocumentStore
from hashtagger.core.vocabulary import VocabularyStore

CONFIG_OPTION_HELP = "Config JSON (default: .hashtagger.json in the current directory)"


def load_config_or_exit(config_file: Path | None) -> TaggerConfig:
    """
    Load configuration, exiting with USER_ERROR if it is invalid.

    Args:
        config_file: Explicit config path from --config

    Returns:
        Validated configuration
    """
    try:
        return load_config(config_path=config_file)
    except ConfigurationError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)


def document_store(config: TaggerConfig) -> MarkdownDocumentStore:
    """Create the Markdown store described by the configuration."""
    return MarkdownDocumentStore(config.content_dir, config.content_glob)


def vocabulary_store(config: TaggerConfig) -> VocabularyStore:
    """Create the vocabulary store described by the configuration."""
    return VocabularyStore(Path(config.cache_file))


def resolve_documents(store: MarkdownDocumentStore, single_file: Path | None) -> list[str]:
    """
    List the documents a command should work on.

    Exits with GENERAL_ERROR when there is nothing to process.

    Args:
        store: Markdown store
        single_file: File passed with --file, if any

    Returns:
        Document identifiers in processing order
    """
    if single_file is not None:
        if not single_file.is_file():
            print_missing_file_error(single_file)
            raise typer.Exit(ExitCode.GENERAL_ERROR)
        return store.list_documents(str(single_file))

    document_ids = store.list_documents()
    if not document_ids:
        print_no_documents_error(store.get_pattern())
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    return document_ids
