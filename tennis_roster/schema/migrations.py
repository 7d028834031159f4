"""Database schema migrations using yoyo-migrations."""

from pathlib import Path

import structlog
from yoyo import get_backend, read_migrations

from tennis_roster.utils.config import get_settings

logger = structlog.get_logger(__name__)


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory."""
    return Path(__file__).parent.parent.parent / "migrations"


def _get_db_uri(db_path: Path | None = None) -> str:
    """Build the yoyo-compatible SQLite URI for the given path."""
    resolved = Path(db_path or get_settings().db_path)
    return f"sqlite:///{resolved.resolve()}"


def run_migrations(db_path: Path | None = None, migrations_dir: Path | None = None) -> int:
    """
    Apply pending database migrations.

    Args:
        db_path: Path to the SQLite database file. If None, uses default from settings.
        migrations_dir: Path to migrations directory. If None, uses default.

    Returns:
        Number of migrations applied.
    """
    migrations_dir = migrations_dir or get_migrations_dir()

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found, skipping migrations", path=str(migrations_dir))
        return 0

    backend = get_backend(_get_db_uri(db_path))
    migrations = read_migrations(str(migrations_dir))

    with backend.lock():
        pending = backend.to_apply(migrations)
        if not pending:
            logger.info("No pending migrations")
            return 0
        for migration in pending:
            logger.info("Applying migration", migration=migration.id)
            backend.apply_one(migration)

    logger.info("Migrations applied successfully", count=len(pending))
    return len(pending)


def rollback_migration(db_path: Path | None = None, steps: int = 1) -> int:
    """
    Roll back the most recent migration(s).

    Args:
        db_path: Path to the SQLite database file. If None, uses default from settings.
        steps: Number of migrations to roll back; 0 rolls back all of them.

    Returns:
        Number of migrations rolled back.
    """
    backend = get_backend(_get_db_uri(db_path))
    migrations = read_migrations(str(get_migrations_dir()))

    with backend.lock():
        # Most recent first.
        applied = list(backend.to_rollback(migrations))
        selected = applied[:steps] if steps > 0 else applied
        for migration in selected:
            logger.info("Rolling back migration", migration=migration.id)
            backend.rollback_one(migration)

    logger.info("Migrations rolled back", count=len(selected))
    return len(selected)
