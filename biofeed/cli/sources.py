"""Sources management commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import FEED_TYPES, Config, SourceConfig, load_sources, save_sources
from ..ingestion import RSSFetcher, print_feed_summary
from ..ingestion.feed_urls import normalize_feed_url

console = Console()
sources_app = typer.Typer(help="Manage feed sources")


@sources_app.command("list")
def sources_list() -> None:
    """List all configured sources."""
    config = Config()

    try:
        sources = load_sources(config.sources_path)
    except FileNotFoundError:
        console.print("[red]Sources file not found. Run 'biofeed init' first.[/red]")
        raise typer.Exit(1)

    if not sources:
        console.print("[yellow]No sources configured.[/yellow]")
        return

    table = Table(title="Configured Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Max items", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("URL", style="blue")

    for source in sources:
        table.add_row(
            source.name,
            source.feed_type,
            str(source.max_items),
            "✓" if source.enabled else "✗",
            source.url,
        )

    console.print(table)


@sources_app.command("add")
def sources_add(
    name: str = typer.Option(..., "--name", "-n", help="Source name"),
    url: str = typer.Option(..., "--url", "-u", help="Feed URL"),
    feed_type: str = typer.Option(
        "generic",
        "--type",
        "-t",
        help=f"Feed kind ({', '.join(FEED_TYPES)})",
    ),
    max_items: int = typer.Option(
        10,
        "--max-items",
        "-m",
        help="Items to show (1-50)",
        min=1,
        max=50,
    ),
) -> None:
    """Add a new feed source."""
    config = Config()
    url = normalize_feed_url(url)

    if feed_type not in FEED_TYPES:
        console.print(f"[red]Unknown feed type '{feed_type}'. Use one of: {', '.join(FEED_TYPES)}[/red]")
        raise typer.Exit(1)

    try:
        sources = load_sources(config.sources_path)
    except FileNotFoundError:
        sources = []

    if any(s.name == name or s.url == url for s in sources):
        console.print(f"[red]Source '{name}' or URL already exists.[/red]")
        raise typer.Exit(1)

    sources.append(
        SourceConfig(
            name=name,
            url=url,
            feed_type=feed_type,
            max_items=max_items,
            enabled=True,
        )
    )
    save_sources(sources, config.sources_path)

    console.print(f"[green]✅ Added source: {name}[/green]")


@sources_app.command("remove")
def sources_remove(
    name: str = typer.Argument(..., help="Source name to remove"),
) -> None:
    """Remove a source."""
    config = Config()

    try:
        sources = load_sources(config.sources_path)
    except FileNotFoundError:
        console.print("[red]Sources file not found.[/red]")
        raise typer.Exit(1)

    original_count = len(sources)
    sources = [s for s in sources if s.name != name]

    if len(sources) == original_count:
        console.print(f"[red]Source '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_sources(sources, config.sources_path)
    console.print(f"[green]✅ Removed source: {name}[/green]")


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all)"),
) -> None:
    """Fetch and normalize configured feeds."""
    config = Config()

    try:
        sources = load_sources(config.sources_path)
    except FileNotFoundError:
        console.print("[red]Sources file not found.[/red]")
        raise typer.Exit(1)

    if name:
        sources = [s for s in sources if s.name == name]
        if not sources:
            console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)

    for source in sources:
        if not source.enabled:
            console.print(f"[yellow]⚠️  {source.name}: Disabled[/yellow]")

    enabled = [s for s in sources if s.enabled]
    fetcher = RSSFetcher(config.config.fetch)
    results = fetcher.fetch_feeds_sync(enabled)

    for source, result in zip(enabled, results):
        if result.success:
            console.print(f"[green]✅ {source.name}: {len(result.items)} items[/green]")
        else:
            console.print(f"[red]❌ {source.name}: {result.error}[/red]")

    print_feed_summary(enabled, results)

    if any(not r.success for r in results):
        raise typer.Exit(1)
