"""Registry for record store backends."""

from typing import Type

from tennis_roster.store.base import RecordStore

# Registry of record store classes
_STORE_REGISTRY: dict[str, Type[RecordStore]] = {}


def register_store(cls: Type[RecordStore]) -> Type[RecordStore]:
    """
    Register a record store class.

    This is intended to be used as a decorator.

    Args:
        cls: Record store class to register.

    Returns:
        The same class (for decorator chaining).

    Example:
        @register_store
        class InMemoryRecordStore(RecordStore):
            backend = "memory"
            ...
    """
    if not getattr(cls, "backend", None):
        raise ValueError(f"Record store class {cls.__name__} must define 'backend'")

    _STORE_REGISTRY[cls.backend] = cls
    return cls


def get_store_class(backend: str) -> Type[RecordStore] | None:
    """Get a record store class by backend name, or None if unknown."""
    return _STORE_REGISTRY.get(backend)


def list_stores() -> list[str]:
    """List all registered backend names."""
    return list(_STORE_REGISTRY.keys())


def create_store(backend: str, **kwargs) -> RecordStore:
    """
    Create a record store instance by backend name.

    Args:
        backend: Backend name (e.g., "sqlite").
        **kwargs: Arguments to pass to the store constructor.

    Raises:
        KeyError: If no store is registered under ``backend``.
    """
    store_class = get_store_class(backend)
    if store_class is None:
        raise KeyError(f"No record store registered for backend={backend!r}")
    return store_class(**kwargs)
