"""Helpers shared by CLI command groups."""

import json
from pathlib import Path
from typing import Any, NoReturn

import pydantic
import structlog
import typer

from tennis_roster.exceptions import PlayerError, PlayerErrorType, StoreError
from tennis_roster.models.player import PlayerCreate
from tennis_roster.services.players import PlayerService
from tennis_roster.store import open_store

logger = structlog.get_logger(__name__)

EXIT_CODES = {
    PlayerErrorType.NOT_FOUND: 3,
    PlayerErrorType.ALREADY_EXISTS: 4,
}


def get_service() -> PlayerService:
    """Build a player service over the configured store, exiting on failure."""
    try:
        return PlayerService(open_store())
    except StoreError as e:
        logger.error("Cannot open record store", error=str(e))
        typer.echo(f"[FAIL] Cannot open record store: {e}", err=True)
        raise typer.Exit(code=1) from e


def fail(error: PlayerError) -> NoReturn:
    """Print the error payload on stderr and exit with the code for its type."""
    typer.echo(json.dumps(error.to_dict()), err=True)
    raise typer.Exit(code=EXIT_CODES.get(error.error_type, 1)) from error


def echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def read_json(path: Path) -> Any:
    """Read a JSON file, exiting with code 1 if it is missing or malformed."""
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"[FAIL] Cannot read '{path}': {e}", err=True)
        raise typer.Exit(code=1) from e


def parse_player(document: Any, source: Path) -> PlayerCreate:
    """Validate one player document, exiting with code 1 if it is invalid."""
    try:
        return PlayerCreate.model_validate(document)
    except pydantic.ValidationError as e:
        typer.echo(f"[FAIL] Invalid player in '{source}': {e}", err=True)
        raise typer.Exit(code=1) from e
