# keyserver_core/storage/provider.py
from __future__ import annotations
from typing import Any, Dict, List, Sequence
from keyserver_core.storage.models import InsertResult

Document = Dict[str, Any]


class DocumentCollection:
    """
    Generic document store consumed by the controllers.

    Every call is scoped to a named collection. Queries are plain equality
    filters, e.g. ``{"keyid": "ABCD"}`` or ``{"email": "jon@example.com"}``.
    Documents returned by ``find`` carry their store id under ``"id"``, in
    the store's natural (insertion) order.
    """

    def insert_many(self, docs: Sequence[Document], collection: str) -> InsertResult: ...
    def find(self, query: Dict[str, Any], collection: str) -> List[Document]: ...
    def delete_many(self, query: Dict[str, Any], collection: str) -> int: ...
