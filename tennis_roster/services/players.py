"""Player domain service: roster CRUD rules and aggregate statistics."""

import structlog

from tennis_roster.exceptions import (
    PlayerError,
    RecordExistsError,
    RecordNotFoundError,
    StoreError,
)
from tennis_roster.models.player import Player, PlayerCreate
from tennis_roster.models.statistics import StatisticsResult
from tennis_roster.services.statistics import average_bmi, best_country, median_height
from tennis_roster.store.base import RecordStore

logger = structlog.get_logger(__name__)


class PlayerService:
    """
    Business rules between a boundary layer and a record store.

    The service holds no state of its own between calls. Every failure is
    raised as a :class:`PlayerError`; store exceptions are caught per operation
    and re-raised as the matching error type, never passed through.

    An empty roster is an error (NotFound) for :meth:`list_players` and
    :meth:`get_statistics`, not an empty result.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self.logger = logger.bind(backend=store.backend)

    def list_players(self) -> list[Player]:
        """
        Return all players ordered by ascending rank.

        The sort is stable: players with equal rank keep their store order.

        Raises:
            PlayerError: NotFound if the roster is empty or cannot be read.
        """
        try:
            players = self.store.list_all()
        except StoreError as e:
            self.logger.error("Failed to load roster", error=str(e))
            raise PlayerError.no_players_found(str(e)) from e

        if not players:
            raise PlayerError.no_players_found()

        return sorted(players, key=lambda p: p.data.rank)

    def get_player(self, player_id: int) -> Player:
        """
        Return the player with ``player_id``.

        Raises:
            PlayerError: NotFound carrying ``player_id``.
        """
        try:
            player = self.store.get_by_id(player_id)
        except StoreError as e:
            self.logger.error("Failed to load player", player_id=player_id, error=str(e))
            raise PlayerError.not_found(player_id) from e

        if player is None:
            raise PlayerError.not_found(player_id)
        return player

    def add_player(self, payload: PlayerCreate) -> Player:
        """
        Store a new player; the store assigns its id.

        Any id carried by ``payload`` is discarded.

        Raises:
            PlayerError: AlreadyExists if the store reports an id collision,
                CreationFailed for any other store failure.
        """
        if payload.id is not None:
            self.logger.debug("Ignoring caller-supplied player id", supplied_id=payload.id)

        try:
            player = self.store.insert(payload)
        except RecordExistsError as e:
            self.logger.warning("Player id collision on insert", player_id=e.player_id)
            raise PlayerError.already_exists(e.player_id) from e
        except StoreError as e:
            self.logger.error("Failed to create player", error=str(e))
            raise PlayerError.creation_failed(str(e)) from e

        self.logger.info("Player added", player_id=player.id)
        return player

    def update_player(self, player_id: int, payload: PlayerCreate) -> Player:
        """
        Replace the whole record ``player_id`` with ``payload``.

        The stored player always carries ``player_id``, whatever id the
        payload holds.

        Raises:
            PlayerError: NotFound if no such player, UpdateFailed if the store
                fails while looking up or replacing the record.
        """
        try:
            if self.store.get_by_id(player_id) is None:
                raise PlayerError.not_found(player_id)
            player = self.store.replace(player_id, payload)
        except RecordNotFoundError as e:
            # Removed between the existence check and the replace.
            raise PlayerError.not_found(player_id) from e
        except StoreError as e:
            self.logger.error("Failed to update player", player_id=player_id, error=str(e))
            raise PlayerError.update_failed(player_id, str(e)) from e

        self.logger.info("Player updated", player_id=player_id)
        return player

    def delete_player(self, player_id: int) -> None:
        """
        Remove the player ``player_id``.

        Raises:
            PlayerError: NotFound if no such player, DeletionFailed if the store
                fails while looking up or removing the record.
        """
        try:
            if self.store.get_by_id(player_id) is None:
                raise PlayerError.not_found(player_id)
            self.store.remove(player_id)
        except RecordNotFoundError as e:
            raise PlayerError.not_found(player_id) from e
        except StoreError as e:
            self.logger.error("Failed to delete player", player_id=player_id, error=str(e))
            raise PlayerError.deletion_failed(player_id, str(e)) from e

        self.logger.info("Player deleted", player_id=player_id)

    def get_statistics(self) -> StatisticsResult:
        """
        Compute best country, average BMI and median height over the roster.

        Statistics run over the rank-sorted roster of :meth:`list_players`, so a
        best-country tie goes to the country whose first player ranks highest.

        Raises:
            PlayerError: NotFound if the roster is empty, UpdateFailed carrying
                the player id if a height makes BMI undefined.
        """
        players = self.list_players()

        try:
            result = StatisticsResult(
                best_country=best_country(players),
                average_bmi=average_bmi(players),
                median_height=median_height(players),
            )
        except PlayerError as e:
            self.logger.error("Failed to compute statistics", player_id=e.player_id, error=e.message)
            raise

        self.logger.info("Statistics computed", count=len(players), best_country=result.best_country)
        return result
