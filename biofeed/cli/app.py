"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .fetch import fetch_command
from .init import init_command
from .serve import serve_command
from .sources import sources_app

app = typer.Typer(
    name="biofeed",
    help="biofeed - RSS/Atom feed normalizer for link-in-bio pages",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("fetch")(fetch_command)
app.command("serve")(serve_command)
app.add_typer(sources_app, name="sources", help="Manage feed sources")


if __name__ == "__main__":
    app()
