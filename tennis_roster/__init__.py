"""Tennis Roster - player roster management with aggregate statistics."""

__version__ = "0.1.0"
