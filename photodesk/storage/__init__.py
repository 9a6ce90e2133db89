"""Storage backends and the request-scoped storage dependency."""

from collections.abc import Generator

from photodesk.core.config import settings
from photodesk.core.database import session_scope
from photodesk.storage.base import Storage
from photodesk.storage.memory import MemStorage
from photodesk.storage.sql import SqlStorage

# Process-wide store for STORAGE_BACKEND=memory.
memory_storage = MemStorage()


def get_storage() -> Generator[Storage, None, None]:
    """Dependency yielding the configured Storage; SQL sessions roll back on error and close."""
    if settings.STORAGE_BACKEND == "memory":
        yield memory_storage
        return

    with session_scope() as db:
        yield SqlStorage(db)


__all__ = ["MemStorage", "SqlStorage", "Storage", "get_storage", "memory_storage"]
