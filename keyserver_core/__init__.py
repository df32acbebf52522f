"""
Keyserver Core Package
======================
Data-access layer for the user IDs attached to public keys on the keyserver.

Provides:
- IdentityStore controller (batch insert, verified lookup, removal by key)
- IdentityRecord document model
- Pluggable document collections (SQLite default, in-memory)
"""

from keyserver_core.errors import KeyserverError, PersistenceError
from keyserver_core.identity import IdentityStore
from keyserver_core.storage.models import IdentityRecord

__all__ = [
    "IdentityStore",
    "IdentityRecord",
    "KeyserverError",
    "PersistenceError",
]
