"""Domain-specific exceptions for player operations."""

from enum import Enum
from typing import Any


class PlayerErrorType(str, Enum):
    """Closed set of business failure kinds surfaced by the player service."""

    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    CREATION_FAILED = "CreationFailed"
    UPDATE_FAILED = "UpdateFailed"
    DELETION_FAILED = "DeletionFailed"
    FORBIDDEN = "Forbidden"

    @property
    def status_code(self) -> int:
        """HTTP status a boundary layer should answer with."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    PlayerErrorType.NOT_FOUND: 404,
    PlayerErrorType.ALREADY_EXISTS: 409,
    PlayerErrorType.CREATION_FAILED: 400,
    PlayerErrorType.UPDATE_FAILED: 400,
    PlayerErrorType.DELETION_FAILED: 400,
    PlayerErrorType.FORBIDDEN: 403,
}


class PlayerError(Exception):
    """
    Business failure raised by the player service.

    Attributes:
        error_type: Taxonomy entry the boundary layer switches on.
        message: Human-readable description.
        player_id: Player the failure relates to, if any.
    """

    def __init__(self, error_type: PlayerErrorType, message: str, player_id: int | None = None):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.player_id = player_id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_type={self.error_type.value!r}, "
            f"message={self.message!r}, player_id={self.player_id!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Error payload for boundary layers."""
        return {
            "errorType": self.error_type.value,
            "message": self.message,
            "playerId": self.player_id,
        }

    @classmethod
    def not_found(cls, player_id: int) -> "PlayerError":
        return cls(PlayerErrorType.NOT_FOUND, f"Player with id {player_id} was not found.", player_id)

    @classmethod
    def no_players_found(cls, reason: str | None = None) -> "PlayerError":
        message = "No players could be loaded from the record store."
        if reason:
            message = f"{message} {reason}"
        return cls(PlayerErrorType.NOT_FOUND, message)

    @classmethod
    def already_exists(cls, player_id: int) -> "PlayerError":
        return cls(PlayerErrorType.ALREADY_EXISTS, f"A player with id {player_id} already exists.", player_id)

    @classmethod
    def creation_failed(cls, reason: str) -> "PlayerError":
        return cls(PlayerErrorType.CREATION_FAILED, f"Failed to create player: {reason}")

    @classmethod
    def update_failed(cls, player_id: int, reason: str) -> "PlayerError":
        return cls(PlayerErrorType.UPDATE_FAILED, f"Failed to update player {player_id}: {reason}", player_id)

    @classmethod
    def deletion_failed(cls, player_id: int, reason: str) -> "PlayerError":
        return cls(PlayerErrorType.DELETION_FAILED, f"Failed to delete player {player_id}: {reason}", player_id)

    @classmethod
    def access_denied(cls) -> "PlayerError":
        # Raised by boundary layers only; the service never checks permissions.
        return cls(PlayerErrorType.FORBIDDEN, "Access denied: insufficient rights for this action.")


class StoreError(Exception):
    """Raised when a record store operation fails."""

    pass


class RecordNotFoundError(StoreError):
    """Raised when replace/remove targets an id the store does not hold."""

    def __init__(self, player_id: int):
        super().__init__(f"No record with id {player_id}")
        self.player_id = player_id


class RecordExistsError(StoreError):
    """Raised when an insert collides with an id already in the store."""

    def __init__(self, player_id: int):
        super().__init__(f"A record with id {player_id} already exists")
        self.player_id = player_id
