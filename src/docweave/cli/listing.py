"""List command — table of every entity in a doc file."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..builder import ENTITY_CLASSES
from . import app
from ._common import ExitCode, console, load_model, one_line

_KINDS = sorted(cls.kind for cls in ENTITY_CLASSES.values())


@app.command("list")
def list_entities(
    doc_file: Path = typer.Argument(..., help="XML documentation file"),
    kind: Optional[str] = typer.Option(
        None, "--kind", "-k", help=f"Only show one kind ({', '.join(_KINDS)})"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (TOML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Errors only"),
):
    """List documented entities with their summaries."""
    if kind is not None and kind not in _KINDS:
        console.print(f"[red]Unknown kind:[/red] {escape(kind)}")
        raise typer.Exit(ExitCode.INPUT_ERROR)

    model = load_model(doc_file, config=config, verbose=verbose, quiet=quiet)
    entities = model.of_kind(kind) if kind else model.entities

    title = model.assembly_name or doc_file.name
    table = Table(title=f"{title} ({len(entities)} entities)")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Id", style="bold")
    table.add_column("Summary")

    for entity in entities:
        table.add_row(entity.kind, escape(entity.id), escape(one_line(entity.description)))

    console.print(table)
