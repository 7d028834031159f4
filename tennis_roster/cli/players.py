"""Player commands: list, show, add, update, delete, stats."""

from pathlib import Path

import typer

from tennis_roster.exceptions import PlayerError
from tennis_roster.utils.logging import log_scope

from .common import echo_json, fail, get_service, parse_player, read_json

players_app = typer.Typer(help="Player roster commands.")


@players_app.command("list")
def list_players() -> None:
    """List all players, best ranked first."""
    service = get_service()
    with log_scope(command="players.list"):
        try:
            players = service.list_players()
        except PlayerError as e:
            fail(e)
    echo_json([p.to_document() for p in players])


@players_app.command()
def show(player_id: int = typer.Argument(..., min=1, help="Player ID")) -> None:
    """Show one player."""
    service = get_service()
    with log_scope(command="players.show", player_id=player_id):
        try:
            player = service.get_player(player_id)
        except PlayerError as e:
            fail(e)
    echo_json(player.to_document())


@players_app.command()
def add(
    file: Path = typer.Argument(..., help="JSON file holding one player document"),
) -> None:
    """
    Add a player.

    Any id in the document is ignored; the roster assigns the next free id.
    """
    payload = parse_player(read_json(file), file)
    service = get_service()
    with log_scope(command="players.add"):
        try:
            player = service.add_player(payload)
        except PlayerError as e:
            fail(e)
    echo_json(player.to_document())


@players_app.command()
def update(
    player_id: int = typer.Argument(..., min=1, help="Player ID"),
    file: Path = typer.Argument(..., help="JSON file holding the replacement player document"),
) -> None:
    """Replace a player's whole record."""
    payload = parse_player(read_json(file), file)
    service = get_service()
    with log_scope(command="players.update", player_id=player_id):
        try:
            player = service.update_player(player_id, payload)
        except PlayerError as e:
            fail(e)
    echo_json(player.to_document())


@players_app.command()
def delete(player_id: int = typer.Argument(..., min=1, help="Player ID")) -> None:
    """Delete a player."""
    service = get_service()
    with log_scope(command="players.delete", player_id=player_id):
        try:
            service.delete_player(player_id)
        except PlayerError as e:
            fail(e)
    typer.echo(f"[OK] Player {player_id} deleted")


@players_app.command()
def stats() -> None:
    """Show the best country by win ratio, average BMI and median height."""
    service = get_service()
    with log_scope(command="players.stats"):
        try:
            result = service.get_statistics()
        except PlayerError as e:
            fail(e)
    echo_json(result.model_dump(by_alias=True))
