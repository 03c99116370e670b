"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..builder import DocModel, ModelBuilder
from ..comments.docfile import read_doc_file
from ..config import load_config
from ..exceptions import ConfigurationError, DocweaveError
from ..logging_config import setup_logging

console = Console()


class ExitCode:
    """Process exit codes.

    Ranges:
      0: Success
      1-9: Lookup failures
      80-89: User errors (bad input)
    """

    SUCCESS = 0
    NOT_FOUND = 1
    CONFIG_ERROR = 81
    INPUT_ERROR = 82


def load_model(
    doc_file: Path,
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> DocModel:
    """Load settings, read ``doc_file`` and build its model; exit on error."""
    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    setup_logging(
        verbose=(settings.verbosity == "verbose"), quiet=(settings.verbosity == "quiet")
    )
    try:
        docs = read_doc_file(doc_file, encoding=settings.encoding)
        return ModelBuilder(settings).build(docs)
    except DocweaveError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.INPUT_ERROR)


def one_line(text: Optional[str], width: int = 80) -> str:
    """Collapse whitespace and shorten ``text`` for table cells."""
    if not text:
        return ""
    flat = " ".join(text.split())
    if len(flat) > width:
        flat = flat[: width - 1] + "…"
    return flat
