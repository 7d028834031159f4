"""In-memory record store."""

from collections.abc import Iterable

from tennis_roster.exceptions import RecordExistsError, RecordNotFoundError
from tennis_roster.models.player import Player, PlayerCreate
from tennis_roster.store.base import RecordStore
from tennis_roster.store.registry import register_store


@register_store
class InMemoryRecordStore(RecordStore):
    """Lock-guarded, insertion-ordered mapping of players; nothing survives the process."""

    backend = "memory"

    def __init__(self, players: Iterable[Player] | None = None):
        super().__init__()
        self._players: dict[int, Player] = {}
        for player in players or ():
            if player.id in self._players:
                raise RecordExistsError(player.id)
            self._players[player.id] = player.model_copy(deep=True)

    def list_all(self) -> list[Player]:
        with self.lock:
            return [p.model_copy(deep=True) for p in self._players.values()]

    def get_by_id(self, player_id: int) -> Player | None:
        with self.lock:
            player = self._players.get(player_id)
            return player.model_copy(deep=True) if player is not None else None

    def insert(self, player: PlayerCreate) -> Player:
        with self.lock:
            new_id = self.next_id(list(self._players))
            if new_id in self._players:
                raise RecordExistsError(new_id)
            stored = player.to_player(new_id)
            self._players[new_id] = stored
            self.logger.debug("Record inserted", player_id=new_id)
            return stored.model_copy(deep=True)

    def replace(self, player_id: int, player: PlayerCreate) -> Player:
        with self.lock:
            if player_id not in self._players:
                raise RecordNotFoundError(player_id)
            # Assigning to an existing key keeps its position in the roster.
            stored = player.to_player(player_id)
            self._players[player_id] = stored
            self.logger.debug("Record replaced", player_id=player_id)
            return stored.model_copy(deep=True)

    def remove(self, player_id: int) -> bool:
        with self.lock:
            if self._players.pop(player_id, None) is None:
                raise RecordNotFoundError(player_id)
            self.logger.debug("Record removed", player_id=player_id)
            return True
