"""CLI entry point — registers all subcommands."""

import typer

app = typer.Typer(
    name="docweave",
    help="docweave - browse the documentation model of an XML doc file",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .listing import list_entities as _list_entities  # noqa: F401, E402
from .show import show as _show  # noqa: F401, E402
