"""Tests for player CLI commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tennis_roster.cli import app

runner = CliRunner()


@pytest.fixture
def seeded(cli_env, roster):
    """Write the sample roster as the configured JSON document."""
    cli_env.write_text(
        json.dumps({"players": [p.to_document() for p in roster]}),
        encoding="utf-8",
    )
    return cli_env


@pytest.fixture
def player_file(tmp_path, new_player):
    path = tmp_path / "serena.json"
    path.write_text(json.dumps({**new_player.to_document(), "id": 50}), encoding="utf-8")
    return path


def test_players_list_sorted_by_rank(seeded):
    result = runner.invoke(app, ["players", "list"])

    assert result.exit_code == 0
    players = json.loads(result.stdout)
    assert [p["data"]["rank"] for p in players] == [1, 2, 3]
    assert players[0]["lastName"] == "Djokovic"


def test_players_list_empty_roster(cli_env):
    result = runner.invoke(app, ["players", "list"])

    assert result.exit_code == 3
    assert "NotFound" in result.output


def test_players_show(seeded):
    result = runner.invoke(app, ["players", "show", "3"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["lastName"] == "Nadal"


def test_players_show_not_found(seeded):
    result = runner.invoke(app, ["players", "show", "99"])

    assert result.exit_code == 3
    assert '"playerId": 99' in result.output


def test_players_add_assigns_next_id(seeded, player_file):
    result = runner.invoke(app, ["players", "add", str(player_file)])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["id"] == 4

    stored = json.loads(seeded.read_text(encoding="utf-8"))["players"]
    assert [p["id"] for p in stored] == [1, 2, 3, 4]


def test_players_add_invalid_document(cli_env, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"firstName": "Nobody"}), encoding="utf-8")

    result = runner.invoke(app, ["players", "add", str(bad)])

    assert result.exit_code == 1
    assert "Invalid player" in result.output


def test_players_add_missing_file(cli_env, tmp_path):
    result = runner.invoke(app, ["players", "add", str(tmp_path / "nope.json")])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_players_add_already_exists(seeded, player_file):
    from tennis_roster.exceptions import PlayerError

    with patch(
        "tennis_roster.services.players.PlayerService.add_player",
        side_effect=PlayerError.already_exists(4),
    ):
        result = runner.invoke(app, ["players", "add", str(player_file)])

    assert result.exit_code == 4
    assert "AlreadyExists" in result.output


def test_players_update_pins_id(seeded, player_file):
    result = runner.invoke(app, ["players", "update", "1", str(player_file)])

    assert result.exit_code == 0
    updated = json.loads(result.stdout)
    assert updated["id"] == 1
    assert updated["lastName"] == "Williams"


def test_players_update_not_found(seeded, player_file):
    result = runner.invoke(app, ["players", "update", "42", str(player_file)])

    assert result.exit_code == 3


def test_players_delete(seeded):
    result = runner.invoke(app, ["players", "delete", "2"])

    assert result.exit_code == 0
    assert "[OK]" in result.output

    result = runner.invoke(app, ["players", "show", "2"])
    assert result.exit_code == 3


def test_players_stats(cli_env, player_factory):
    cli_env.write_text(
        json.dumps(
            {
                "players": [
                    player_factory(1, country="FR", last=[1, 0, 1], weight=80000, height=180).to_document(),
                    player_factory(2, country="US", last=[0, 0, 1], weight=90000, height=190).to_document(),
                ]
            }
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["players", "stats"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "bestCountry": "FR",
        "averageBmi": 24.81,
        "medianHeight": 185.0,
    }


def test_players_stats_invalid_height(cli_env, player_factory):
    cli_env.write_text(
        json.dumps({"players": [player_factory(6, height=0).to_document()]}),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["players", "stats"])

    assert result.exit_code == 1
    assert "UpdateFailed" in result.output


def test_corrupt_roster_file(cli_env):
    cli_env.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["players", "list"])

    assert result.exit_code == 1
    assert "Cannot open record store" in result.output
