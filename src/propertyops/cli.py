"""PropertyOps command line interface."""

import typer
from rich.console import Console

from propertyops import __version__
from propertyops.commands import db, seed, serve, ui


console = Console()

app = typer.Typer(
    name="propertyops",
    help="Run the PropertyOps API, manage its data, and generate its UI.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="serve")(serve.serve)
app.command(name="init-db")(db.init_db)
app.command(name="seed")(seed.seed)
app.command(name="ui")(ui.ui)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """PropertyOps CLI - API server, demo data and UI generator."""
    if version:
        console.print(f"[bold cyan]propertyops[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
