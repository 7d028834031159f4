"""Utility functions and configuration management."""

from tennis_roster.utils.config import get_settings
from tennis_roster.utils.logging import get_logger

__all__ = ["get_settings", "get_logger"]
