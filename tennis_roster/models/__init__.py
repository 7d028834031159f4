"""Pydantic models for data validation."""

from tennis_roster.models.player import Country, Player, PlayerBase, PlayerCreate, PlayerData
from tennis_roster.models.statistics import StatisticsResult

__all__ = [
    "Country",
    "Player",
    "PlayerBase",
    "PlayerCreate",
    "PlayerData",
    "StatisticsResult",
]
