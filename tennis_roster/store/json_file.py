"""Flat JSON file record store.

The roster lives in one document shaped like ``{"players": [...]}`` with
camelCase keys. The whole document is rewritten after every mutation.
"""

import json
import os
import tempfile
from pathlib import Path

import pydantic

from tennis_roster.exceptions import RecordExistsError, RecordNotFoundError, StoreError
from tennis_roster.models.player import Player, PlayerCreate
from tennis_roster.store.base import RecordStore
from tennis_roster.store.registry import register_store


@register_store
class JsonFileRecordStore(RecordStore):
    """Record store persisting the roster to a JSON document."""

    backend = "json"

    def __init__(self, path: Path | str):
        """
        Load the roster document.

        Args:
            path: Path to the JSON document. A missing file is an empty roster;
                it is created on the first write.

        Raises:
            StoreError: If the document exists but cannot be read or validated.
        """
        super().__init__()
        self.path = Path(path)
        self._players: list[Player] = self._load()
        self.logger.debug("Roster loaded", path=str(self.path), count=len(self._players))

    def _load(self) -> list[Player]:
        if not self.path.exists():
            return []
        try:
            with self.path.open(encoding="utf-8") as f:
                document = json.load(f)
            players = [Player.model_validate(item) for item in document.get("players") or []]
        except (OSError, json.JSONDecodeError, AttributeError, pydantic.ValidationError) as e:
            raise StoreError(f"Cannot load roster from '{self.path}': {e}") from e

        seen: set[int] = set()
        for player in players:
            if player.id in seen:
                raise RecordExistsError(player.id)
            seen.add(player.id)
        return players

    def _save(self, players: list[Player]) -> None:
        """Write ``players`` atomically: a temp file in the same directory, then os.replace."""
        document = {"players": [p.to_document() for p in players]}
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Cannot write roster to '{self.path}': {e}") from e

    def _index_of(self, player_id: int) -> int | None:
        for index, player in enumerate(self._players):
            if player.id == player_id:
                return index
        return None

    def list_all(self) -> list[Player]:
        with self.lock:
            return [p.model_copy(deep=True) for p in self._players]

    def get_by_id(self, player_id: int) -> Player | None:
        with self.lock:
            index = self._index_of(player_id)
            return self._players[index].model_copy(deep=True) if index is not None else None

    def insert(self, player: PlayerCreate) -> Player:
        with self.lock:
            new_id = self.next_id([p.id for p in self._players])
            if self._index_of(new_id) is not None:
                raise RecordExistsError(new_id)
            stored = player.to_player(new_id)
            players = [*self._players, stored]
            self._save(players)
            self._players = players
            self.logger.debug("Record inserted", player_id=new_id)
            return stored.model_copy(deep=True)

    def replace(self, player_id: int, player: PlayerCreate) -> Player:
        with self.lock:
            index = self._index_of(player_id)
            if index is None:
                raise RecordNotFoundError(player_id)
            stored = player.to_player(player_id)
            players = list(self._players)
            players[index] = stored
            self._save(players)
            self._players = players
            self.logger.debug("Record replaced", player_id=player_id)
            return stored.model_copy(deep=True)

    def remove(self, player_id: int) -> bool:
        with self.lock:
            index = self._index_of(player_id)
            if index is None:
                raise RecordNotFoundError(player_id)
            players = self._players[:index] + self._players[index + 1 :]
            self._save(players)
            self._players = players
            self.logger.debug("Record removed", player_id=player_id)
            return True
