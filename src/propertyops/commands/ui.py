"""Command: propertyops ui - Write the React front end."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel


console = Console()

DEFAULT_API_URL = "http://localhost:8000/api"


def get_ui_template_path() -> Path:
    """Get the path to the bundled UI template."""
    import importlib.resources
    from importlib.resources import as_file

    ref = importlib.resources.files("propertyops").joinpath("templates/ui")
    with as_file(ref) as p:
        path = Path(p)
    if not path.exists():
        raise FileNotFoundError(
            "Could not find the UI template. Make sure PropertyOps is installed correctly."
        )
    return path


def render_ui(target: Path, api_url: str, project_name: str) -> None:
    """Render the UI template into ``target``."""
    from copier import run_copy

    run_copy(
        src_path=str(get_ui_template_path()),
        dst_path=str(target),
        data={"project_name": project_name, "api_base_url": api_url.rstrip("/")},
        unsafe=True,
        quiet=True,
        defaults=True,  # Skip prompts, use defaults
    )


def ui(
    output_dir: Path = typer.Argument(..., help="Directory to write the UI into"),
    api_url: Annotated[
        str,
        typer.Option("--api-url", help="Base URL of the PropertyOps API"),
    ] = DEFAULT_API_URL,
    project_name: Annotated[
        str,
        typer.Option("--name", help="Package name for the UI project"),
    ] = "propertyops-ui",
) -> None:
    """Write the tabbed React UI for tenants, units, requests and payments."""
    if output_dir.exists() and any(output_dir.iterdir()):
        console.print(f"[red]Error:[/red] Directory '{output_dir}' is not empty")
        raise typer.Exit(1)

    try:
        with console.status("[bold green]Writing UI..."):
            render_ui(output_dir, api_url, project_name)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    console.print(f"[green]✓[/green] Wrote UI to {output_dir}")
    console.print(
        Panel(
            f"""[bold]Next steps:[/bold]

  [cyan]cd {output_dir}[/cyan]
  [cyan]npm install[/cyan]
  [cyan]npm run dev[/cyan]

The UI talks to [link={api_url}]{api_url}[/link]""",
            title="[bold green]UI ready[/bold green]",
            border_style="green",
        )
    )
