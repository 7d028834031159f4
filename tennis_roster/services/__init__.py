"""Player domain services."""

from tennis_roster.services.players import PlayerService

__all__ = ["PlayerService"]
