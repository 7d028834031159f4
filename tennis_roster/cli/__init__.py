"""Command-line interface for Tennis Roster."""

import typer

from tennis_roster.utils.config import ensure_directories
from tennis_roster.utils.logging import setup_logging

from .admin import admin_app
from .players import players_app

app = typer.Typer(
    name="tennis-roster",
    help="Tennis Roster - manage tennis players and roster statistics",
    add_completion=False,
)

app.add_typer(admin_app, name="admin")
app.add_typer(players_app, name="players")


@app.callback()
def _configure() -> None:
    """Tennis Roster - manage tennis players and roster statistics."""
    ensure_directories()
    setup_logging()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
