"""Database schema and migrations."""

from tennis_roster.schema.connection import get_db_connection, init_database

__all__ = ["get_db_connection", "init_database"]
