# keyserver_core/storage/__init__.py

from .models import IdentityRecord, InsertResult
from .provider import DocumentCollection
from .providers.memory_provider import InMemoryCollection
from .providers.sqlite_provider import SQLiteCollection
from keyserver_core.constants import DEFAULT_DB_PATH, DEFAULT_STORAGE_PROVIDER
import os


def load_collection(config: dict | None = None) -> DocumentCollection:
    """
    Factory resolver for selecting the runtime document store.

    Supported providers:
        - sqlite (default)
        - memory
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("KEYSERVER_STORAGE_PROVIDER", DEFAULT_STORAGE_PROVIDER)

    if provider == "memory":
        return InMemoryCollection()

    if provider == "sqlite":
        db_path = config.get("sqlite_path") or os.getenv("KEYSERVER_DB_PATH", DEFAULT_DB_PATH)
        return SQLiteCollection(db_path)

    raise ValueError(f"Unknown storage provider: {provider}")


__all__ = [
    "IdentityRecord",
    "InsertResult",
    "DocumentCollection",
    "InMemoryCollection",
    "SQLiteCollection",
    "load_collection",
]
