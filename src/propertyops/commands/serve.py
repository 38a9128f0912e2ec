"""Command: propertyops serve - Run the API server."""

import typer
from rich.console import Console


console = Console()


def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the PropertyOps API under uvicorn."""
    import uvicorn

    console.print(
        f"[bold cyan]PropertyOps API[/bold cyan] on http://{host}:{port}"
    )
    uvicorn.run(
        "propertyops.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
