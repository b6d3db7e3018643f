"""Command-line interface for catalogsearch.

This package provides the Typer app and global console for all CLI commands and
user-facing output.

- app: The Typer application object; commands are registered in
  :mod:`catalogsearch.cli.commands`.
- console: Rich Console instance for consistent, styled output.
"""

import typer
from rich.console import Console
from rich.traceback import install

# Install rich traceback handler for all CLI commands
install(show_locals=False)

console = Console()

app = typer.Typer(
    name="catalogsearch",
    help="Search the media catalog from the command line.",
    add_completion=False,
)

config_app = typer.Typer(help="Read and write persistent defaults.")
app.add_typer(config_app, name="config")


@app.command()
def version() -> None:
    """Show the version of catalogsearch."""
    from catalogsearch.__about__ import __version__

    console.print(f"catalogsearch version: [bold]{__version__}[/bold]")
