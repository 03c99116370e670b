"""Show command — full documentation of one entity."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from ..model import DocumentableEntity
from . import app
from ._common import ExitCode, console, load_model


def render_entity(entity: DocumentableEntity) -> str:
    """Rich markup describing ``entity``."""
    lines = [f"[dim]{entity.kind}[/dim]  {escape(entity.full_name or '')}"]
    lines.append(f"[dim]file id:[/dim] {escape(entity.normalized_id or '')}")

    def section(title: str, body: Optional[str]) -> None:
        if body:
            lines.append("")
            lines.append(f"[bold]{title}[/bold]")
            lines.append(escape(body))

    section("Summary", entity.description)
    section("Remarks", entity.remarks)

    for attr, title in (("type_parameters", "Type parameters"), ("parameters", "Parameters")):
        docs = getattr(entity, attr, None)
        if docs:
            lines.append("")
            lines.append(f"[bold]{title}[/bold]")
            for doc in docs:
                lines.append(f"  [cyan]{escape(doc.name)}[/cyan]  {escape(doc.description)}")

    section("Returns", getattr(entity, "returns", None))
    section("Value", getattr(entity, "value", None))

    exceptions = getattr(entity, "exceptions", None)
    if exceptions:
        lines.append("")
        lines.append("[bold]Exceptions[/bold]")
        for doc in exceptions:
            lines.append(f"  [red]{escape(doc.cref or '?')}[/red]  {escape(doc.description)}")

    if entity.see_also_links:
        lines.append("")
        lines.append("[bold]See also[/bold]")
        for link in entity.see_also_links:
            target = escape(link.target or "")
            lines.append(f"  {escape(link.label)} ({target})" if link.label else f"  {target}")

    return "\n".join(lines)


@app.command()
def show(
    doc_file: Path = typer.Argument(..., help="XML documentation file"),
    member_id: str = typer.Argument(..., help="Member id, e.g. T:Acme.Widget"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (TOML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Errors only"),
):
    """Show the documentation of one entity."""
    model = load_model(doc_file, config=config, verbose=verbose, quiet=quiet)

    entity = model.get(member_id)
    if entity is None:
        console.print(f"[red]No entity with id[/red] {escape(member_id)}")
        raise typer.Exit(ExitCode.NOT_FOUND)

    console.print(Panel(render_entity(entity), title=escape(entity.name or member_id)))
