"""Record store contract for player persistence."""

import threading
from abc import ABC, abstractmethod

import structlog

from tennis_roster.models.player import Player, PlayerCreate

logger = structlog.get_logger(__name__)


class RecordStore(ABC):
    """
    Abstract base class for player record stores.

    Implementations own the durable roster and must serialize every mutating
    operation: id assignment and insert, replace and remove each run under
    ``self.lock`` so concurrent callers never observe a torn roster or receive
    the same id twice.
    """

    backend: str  # e.g., "memory", "json", "sqlite"

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.logger = logger.bind(backend=self.backend)

    @abstractmethod
    def list_all(self) -> list[Player]:
        """
        Return every stored player in store order.

        A healthy empty store returns an empty list.

        Raises:
            StoreError: If the backend cannot be read.
        """

    @abstractmethod
    def get_by_id(self, player_id: int) -> Player | None:
        """Return the player with ``player_id``, or None."""

    @abstractmethod
    def insert(self, player: PlayerCreate) -> Player:
        """
        Assign the next id and persist ``player``.

        Returns:
            The stored player carrying the id now present in the store.

        Raises:
            RecordExistsError: If the assigned id is already taken.
            StoreError: If the backend rejects the write.
        """

    @abstractmethod
    def replace(self, player_id: int, player: PlayerCreate) -> Player:
        """
        Replace the whole record ``player_id``; the payload's id is ignored.

        Raises:
            RecordNotFoundError: If no record has ``player_id``.
            StoreError: If the backend rejects the write.
        """

    @abstractmethod
    def remove(self, player_id: int) -> bool:
        """
        Remove the record ``player_id``.

        Raises:
            RecordNotFoundError: If no record has ``player_id``.
            StoreError: If the backend rejects the write.
        """

    @staticmethod
    def next_id(existing_ids: list[int]) -> int:
        """Next id to hand out: one past the highest, or 1 for an empty store."""
        return max(existing_ids, default=0) + 1
