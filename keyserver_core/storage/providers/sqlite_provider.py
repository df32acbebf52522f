from __future__ import annotations
from typing import Any, Dict, List, Sequence, Tuple
import json, sqlite3, os, threading
from keyserver_core.storage.models import InsertResult
from keyserver_core.storage.provider import DocumentCollection
from keyserver_core.constants import DEFAULT_DB_PATH
from keyserver_core.utils import canonical_json, new_id, now_ts


class SQLiteCollection(DocumentCollection):
    """
    Document collections on top of a single SQLite table.

    Each document is stored as canonical JSON in ``body``; equality filters
    are evaluated with ``json_extract``. ``seq`` preserves insertion order.
    """

    def __init__(self, path=DEFAULT_DB_PATH):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)
        # one shared connection; every statement sequence runs under this lock
        self._lock = threading.Lock()

        self._init()

    def _init(self) -> None:
        c = self.db.cursor()
        c.execute("""CREATE TABLE IF NOT EXISTS documents(
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            collection TEXT NOT NULL,
            body TEXT NOT NULL,
            created_at TEXT NOT NULL
        )""")
        c.execute("CREATE INDEX IF NOT EXISTS idx_documents_collection ON documents(collection)")
        self.db.commit()

    @staticmethod
    def _where(query: Dict[str, Any], collection: str) -> Tuple[str, list]:
        clauses = ["collection = ?"]
        params: list = [collection]
        for field, value in query.items():
            if field == "id":
                clauses.append("id = ?")
            else:
                clauses.append("json_extract(body, ?) = ?")
                params.append(f"$.{field}")
            params.append(value)
        return " AND ".join(clauses), params

    def insert_many(self, docs: Sequence[Dict[str, Any]], collection: str) -> InsertResult:
        ids = []
        inserted = 0
        ts = now_ts()
        # one transaction per batch; any error rolls back the whole batch
        with self._lock, self.db:
            for doc in docs:
                body = {k: v for k, v in doc.items() if k != "id"}
                doc_id = new_id()
                cur = self.db.execute(
                    "INSERT INTO documents(id,collection,body,created_at) VALUES(?,?,?,?)",
                    (doc_id, collection, canonical_json(body), ts),
                )
                inserted += cur.rowcount
                ids.append(doc_id)
        return InsertResult(inserted_count=inserted, inserted_ids=ids)

    def find(self, query: Dict[str, Any], collection: str) -> List[Dict[str, Any]]:
        where, params = self._where(query, collection)
        with self._lock:
            rows = self.db.execute(f"SELECT id, body FROM documents WHERE {where} ORDER BY seq", params).fetchall()
        docs = []
        for doc_id, body in rows:
            doc = json.loads(body)
            doc["id"] = doc_id
            docs.append(doc)
        return docs

    def delete_many(self, query: Dict[str, Any], collection: str) -> int:
        where, params = self._where(query, collection)
        with self._lock:
            cur = self.db.execute(f"DELETE FROM documents WHERE {where}", params)
            self.db.commit()
        return cur.rowcount

    def close(self):
        with self._lock:
            self.db.close()
