"""Serve command implementation."""

from typing import Optional

import typer
import uvicorn
from rich.console import Console

from ..api import create_app
from ..config import Config
from ..logging_setup import setup_logging

console = Console()


def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from config)"),
    log_level: str = typer.Option("info", "--log-level", help="Log level"),
) -> None:
    """Serve the feed normalizer over HTTP."""
    setup_logging(log_level)

    try:
        config = Config().config
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    host = host or config.server.host
    port = port or config.server.port

    console.print(f"[bold]biofeed[/bold] listening on http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level=log_level.lower())
