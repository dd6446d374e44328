"""Init command implementation."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, SourceConfig, default_config_path, save_config, save_sources

console = Console()


def create_default_sources() -> List[SourceConfig]:
    """Create example sources, one per supported feed kind."""
    return [
        SourceConfig(
            name="Python Insider",
            url="https://blog.python.org/feeds/posts/default",
            feed_type="blog",
            max_items=5,
            enabled=True,
        ),
        SourceConfig(
            name="Talk Python To Me",
            url="https://talkpython.fm/episodes/rss",
            feed_type="podcast",
            max_items=5,
            enabled=True,
        ),
        SourceConfig(
            name="PyCon US YouTube",
            url="https://www.youtube.com/feeds/videos.xml?channel_id=UCMjMBMGt0WJQLeluw6qNJuA",
            feed_type="youtube",
            max_items=6,
            enabled=True,
        ),
    ]


def init_command(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Configuration directory (default: ~/.config/biofeed)",
    ),
    port: int = typer.Option(8000, "--port", help="HTTP port for 'biofeed serve'"),
    seed_sources: bool = typer.Option(
        True,
        "--seed-sources/--no-seed-sources",
        help="Seed example feed sources",
    ),
) -> None:
    """Initialize biofeed configuration."""
    console.print(Panel.fit("biofeed - Initialization", style="bold blue"))

    if config_dir is None:
        config_dir = default_config_path().parent
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    sources_path = config_dir / "sources.yaml"

    config = ConfigModel(server={"port": port})
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if seed_sources:
        sources = create_default_sources()
        save_sources(sources, sources_path)
        console.print(f"✅ Created sources: {sources_path} (seeded with {len(sources)} sources)")
    else:
        save_sources([], sources_path)
        console.print(f"✅ Created sources: {sources_path} (empty)")

    console.print(
        Panel(
            f"[green]✅ biofeed initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Sources: {sources_path}\n\n"
            f"Next steps:\n"
            f"1. Check your feeds: [bold]biofeed sources test[/bold]\n"
            f"2. Start the API: [bold]biofeed serve[/bold]",
            style="green",
        )
    )
