"""
keyserver_core.identity
-----------------------
Controller for the user ID documents stored alongside public keys.

There can only be one verified user ID for an email address at any given
time. The controller does not enforce this on write; it only relies on it
when resolving the verified record.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
from keyserver_core.constants import USERID_COLLECTION
from keyserver_core.errors import PersistenceError
from keyserver_core.logger import get_logger
from keyserver_core.storage.models import IdentityRecord
from keyserver_core.storage.provider import DocumentCollection

log = get_logger("keyserver.identity")

RecordLike = Union[IdentityRecord, Mapping[str, Any]]


def _as_record(draft: RecordLike) -> IdentityRecord:
    if isinstance(draft, IdentityRecord):
        return draft
    return IdentityRecord.from_document(draft)


def _email_of(candidate: Any) -> Optional[str]:
    if isinstance(candidate, Mapping):
        return candidate.get("email")
    return getattr(candidate, "email", None)


class IdentityStore:
    """
    Handles user ID queries against the document store.
    """

    def __init__(self, collection: DocumentCollection):
        self._collection = collection

    def batch_insert(self, keyid: str, records: Sequence[RecordLike]) -> List[IdentityRecord]:
        """
        Store a list of user IDs for one key.

        ``keyid`` is stamped on every record, overriding whatever the draft
        carried. All records go to the store in a single insert.
        Returns the records with their store-assigned ids.
        """
        if not keyid:
            raise ValueError("keyid is required")

        drafts = [replace(_as_record(r), keyid=keyid, id=None) for r in records]
        res = self._collection.insert_many([d.to_document() for d in drafts], USERID_COLLECTION)

        if res.inserted_count != len(drafts) or len(res.inserted_ids) != len(drafts):
            log.error(
                f"[USERID BATCH] partial insert keyid={keyid} "
                f"expected={len(drafts)} inserted={res.inserted_count} ids={len(res.inserted_ids)}"
            )
            raise PersistenceError(
                "Failed to persist user ids",
                expected=len(drafts),
                actual=res.inserted_count,
                keyid=keyid,
            )

        log.info(f"[USERID BATCH] keyid={keyid} count={len(drafts)}")
        return [replace(d, id=doc_id) for d, doc_id in zip(drafts, res.inserted_ids)]

    def find_verified(
        self,
        keyid: Optional[str] = None,
        user_ids: Optional[Iterable[Any]] = None,
    ) -> Optional[IdentityRecord]:
        """
        Get the verified user ID either by key id or by email address.

        The key id lookup is tried first. Otherwise the candidate user IDs are
        checked one by one, in the given order, and the first email with a
        verified record wins. Returns None when nothing is verified.
        """
        if keyid:
            verified = self._first_verified({"keyid": keyid})
            if verified:
                return verified

        if user_ids:
            for uid in user_ids:
                email = _email_of(uid)
                if not email:
                    continue
                verified = self._first_verified({"email": email})
                if verified:
                    return verified

        return None

    def remove_by_key(self, keyid: str) -> None:
        """Remove all user IDs belonging to a key."""
        deleted = self._collection.delete_many({"keyid": keyid}, USERID_COLLECTION)
        log.info(f"[USERID REMOVE] keyid={keyid} deleted={deleted}")

    def _first_verified(self, query: dict) -> Optional[IdentityRecord]:
        docs = self._collection.find(query, USERID_COLLECTION)
        verified = [d for d in docs if d.get("verified") is True]
        log.debug(f"[USERID FIND] query={query} found={len(docs)} verified={len(verified)}")
        if not verified:
            return None
        if len(verified) > 1:
            # store order decides; more than one means a caller broke the uniqueness rule
            log.warning(
                f"[USERID FIND] {len(verified)} verified user ids for {query}, "
                f"using id={verified[0].get('id')}"
            )
        return IdentityRecord.from_document(verified[0])
