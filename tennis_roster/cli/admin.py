"""Admin commands: init, migrate, status, seed."""

from pathlib import Path

import structlog
import typer

from tennis_roster.exceptions import PlayerError, StoreError
from tennis_roster.schema.connection import init_database
from tennis_roster.schema.migrations import rollback_migration, run_migrations
from tennis_roster.utils.config import get_settings

from .common import fail, get_service, parse_player, read_json

admin_app = typer.Typer(help="Roster administration commands.")

logger = structlog.get_logger(__name__)


@admin_app.command()
def init(
    db_path: Path = typer.Option(
        None,
        "--db-path",
        help="Path to SQLite database file",
        envvar="TENNIS_DB_PATH",
    ),
) -> None:
    """
    Initialize the roster database.

    Creates the database file and runs all pending migrations.
    """
    logger.info("Initializing database", db_path=str(db_path))
    try:
        init_database(db_path)
        typer.echo(f"[OK] Database initialized at {db_path or get_settings().db_path}")
    except RuntimeError as e:
        logger.error("Failed to initialize database", error=str(e))
        typer.echo(f"[FAIL] Failed to initialize database: {e}", err=True)
        raise typer.Exit(code=1) from e


@admin_app.command()
def migrate(
    rollback: bool = typer.Option(
        False,
        "--rollback",
        "-r",
        help="Rollback the most recent migration",
    ),
    steps: int = typer.Option(
        1,
        "--steps",
        "-n",
        help="Number of migrations to rollback (0 for all)",
    ),
) -> None:
    """
    Run database migrations.

    Applies pending migrations by default. Use --rollback to undo migrations.
    """
    try:
        if rollback:
            count = rollback_migration(steps=steps)
            typer.echo(f"[OK] Rolled back {count} migration(s)")
        else:
            count = run_migrations()
            typer.echo(f"[OK] Applied {count} migration(s)")
    except Exception as e:
        logger.error("Migration failed", error=str(e))
        typer.echo(f"[FAIL] Migration failed: {e}", err=True)
        raise typer.Exit(code=1) from e


@admin_app.command()
def status() -> None:
    """Show the configured record store and how many players it holds."""
    settings = get_settings()
    service = get_service()

    try:
        count = len(service.store.list_all())
    except StoreError as e:
        logger.error("Failed to get status", error=str(e))
        typer.echo(f"[FAIL] Failed to get status: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"\nRecord store: {settings.store_backend}")
    if settings.store_backend == "sqlite":
        typer.echo(f"   Database: {settings.db_path}")
    elif settings.store_backend == "json":
        typer.echo(f"   File: {settings.players_file}")
    typer.echo(f"   Players: {count:,}" if count else "   Players: (empty)")


@admin_app.command()
def seed(
    file: Path = typer.Argument(..., help='Roster document shaped like {"players": [...]}'),
) -> None:
    """
    Add every player of a roster document.

    Players get fresh ids in document order; ids in the document are ignored.
    """
    document = read_json(file)
    items = document.get("players") if isinstance(document, dict) else None
    if not isinstance(items, list):
        typer.echo(f"[FAIL] '{file}' has no 'players' list", err=True)
        raise typer.Exit(code=1)

    payloads = [parse_player(item, file) for item in items]
    service = get_service()

    added = 0
    for payload in payloads:
        try:
            service.add_player(payload)
        except PlayerError as e:
            logger.error("Seeding stopped", added=added, error=e.message)
            fail(e)
        added += 1

    logger.info("Roster seeded", count=added, source=str(file))
    typer.echo(f"[OK] Seeded {added} player(s)")
