"""Connections to the roster SQLite database."""

import sqlite3
from pathlib import Path

import structlog

from tennis_roster.utils.config import get_settings

logger = structlog.get_logger(__name__)

# Applied to every roster connection. A writer waiting on another process's
# BEGIN IMMEDIATE retries for busy_timeout milliseconds before failing.
_PRAGMAS = (
    "PRAGMA journal_mode = WAL",
    "PRAGMA synchronous = NORMAL",
    "PRAGMA busy_timeout = 5000",
)


def get_db_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """
    Open the roster database, creating its parent directory if needed.

    The connection is in autocommit mode (the record store issues its own
    BEGIN IMMEDIATE/COMMIT), may be shared across threads behind the store's
    lock, and returns ``sqlite3.Row`` rows.

    Raises:
        RuntimeError: If the file cannot be created, opened or configured.
    """
    db_path = Path(db_path or get_settings().db_path)

    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), isolation_level=None, check_same_thread=False)
    except (OSError, sqlite3.Error) as e:
        raise RuntimeError(f"Cannot open roster database '{db_path}': {e}") from e

    conn.row_factory = sqlite3.Row
    try:
        for pragma in _PRAGMAS:
            conn.execute(pragma)
    except sqlite3.Error as e:
        conn.close()
        raise RuntimeError(f"Cannot configure roster database '{db_path}': {e}") from e

    logger.debug("Roster database opened", db_path=str(db_path))
    return conn


def init_database(db_path: Path | None = None) -> None:
    """Create the roster database file and bring its schema up to date."""
    from tennis_roster.schema.migrations import run_migrations  # noqa: PLC0415

    get_db_connection(db_path).close()
    try:
        applied = run_migrations(db_path)
    except Exception as e:
        raise RuntimeError(f"Failed to initialize roster database: {e}") from e
    logger.info("Roster database initialized", db_path=str(db_path), applied=applied)
