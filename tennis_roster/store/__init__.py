"""Record stores holding the player roster."""

from tennis_roster.store.base import RecordStore
from tennis_roster.store.json_file import JsonFileRecordStore
from tennis_roster.store.memory import InMemoryRecordStore
from tennis_roster.store.registry import create_store, get_store_class, list_stores, register_store
from tennis_roster.store.sqlite import SqliteRecordStore
from tennis_roster.utils.config import Settings, get_settings


def open_store(settings: Settings | None = None) -> RecordStore:
    """
    Create the record store selected by configuration.

    Args:
        settings: Application settings. If None, uses the cached settings.

    Returns:
        Store for ``settings.store_backend``.
    """
    settings = settings or get_settings()
    if settings.store_backend == "sqlite":
        return create_store("sqlite", db_path=settings.db_path)
    if settings.store_backend == "json":
        return create_store("json", path=settings.players_file)
    return create_store(settings.store_backend)


__all__ = [
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "RecordStore",
    "SqliteRecordStore",
    "create_store",
    "get_store_class",
    "list_stores",
    "open_store",
    "register_store",
]
