"""Fetch command implementation."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..ingestion import FeedError, FeedResponse, NormalizedFeed, RSSFetcher

console = Console()


def _print_feed(feed: NormalizedFeed) -> None:
    table = Table(title=f"{feed.feed_title or 'Untitled feed'} ({feed.feed_type})")
    table.add_column("#", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Published", style="green")
    table.add_column("Author", style="magenta")
    table.add_column("Thumbnail", style="yellow")

    for index, item in enumerate(feed.items, start=1):
        table.add_row(
            str(index),
            item.title,
            item.published_at,
            item.author or "-",
            "✓" if item.thumbnail else "✗",
        )

    console.print(table)


def fetch_command(
    feed_url: str = typer.Argument(..., help="Feed URL to normalize"),
    max_items: Optional[int] = typer.Option(
        None,
        "--max-items",
        "-n",
        help="Maximum items to return (default from config)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON response envelope"),
) -> None:
    """Fetch a feed and print its normalized items."""
    try:
        fetch_config = Config().config.fetch
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    fetcher = RSSFetcher(fetch_config)

    try:
        feed = fetcher.normalize_sync(feed_url, max_items)
    except FeedError as e:
        if as_json:
            typer.echo(json.dumps(FeedResponse.failed(e.message).to_payload(), indent=2))
        else:
            console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(FeedResponse.ok(feed).to_payload(), indent=2, ensure_ascii=False))
    else:
        _print_feed(feed)
