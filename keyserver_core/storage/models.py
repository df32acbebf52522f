# keyserver_core/storage/models.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class IdentityRecord:
    """
    Storage-level representation of a user ID claimed for a public key.

    Document shape:
        {
          "email": "jon@example.com",   # lower case
          "name": "Jon Smith",
          "keyid": "02C134D079701934",  # owning key id, upper case hex
          "nonce": "123e4567-e89b-12d3-a456-426655440000",
          "verified": false
        }

    ``id`` is assigned by the store on insert and is not part of the document body.
    """
    email: str = ""
    name: str = ""
    keyid: str = ""
    nonce: str = ""
    verified: bool = False
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("id")
        return d

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "IdentityRecord":
        return cls(
            email=doc.get("email", ""),
            name=doc.get("name", ""),
            keyid=doc.get("keyid", ""),
            nonce=doc.get("nonce", ""),
            verified=doc.get("verified") is True,
            id=doc.get("id"),
        )


@dataclass
class InsertResult:
    inserted_count: int
    inserted_ids: List[str]
