from typing import Any, Dict, List, Sequence
from keyserver_core.storage.models import InsertResult
from keyserver_core.storage.provider import DocumentCollection
from keyserver_core.utils import new_id


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(k in doc and doc[k] == v for k, v in query.items())


class InMemoryCollection(DocumentCollection):
    def __init__(self):
        self.collections: Dict[str, List[Dict[str, Any]]] = {}

    def insert_many(self, docs: Sequence[Dict[str, Any]], collection: str) -> InsertResult:
        bucket = self.collections.setdefault(collection, [])
        ids = []
        for doc in docs:
            stored = dict(doc)
            stored["id"] = new_id()
            bucket.append(stored)
            ids.append(stored["id"])
        return InsertResult(inserted_count=len(ids), inserted_ids=ids)

    def find(self, query: Dict[str, Any], collection: str) -> List[Dict[str, Any]]:
        return [dict(d) for d in self.collections.get(collection, []) if _matches(d, query)]

    def delete_many(self, query: Dict[str, Any], collection: str) -> int:
        bucket = self.collections.get(collection, [])
        keep = [d for d in bucket if not _matches(d, query)]
        self.collections[collection] = keep
        return len(bucket) - len(keep)

    def count(self, collection: str) -> int:
        return len(self.collections.get(collection, []))
