"""
keyserver_core.utils
--------------------
Lightweight helpers for identifiers, nonces, timestamping and canonical JSON serialization.
"""

from __future__ import annotations
import json, time, uuid
from typing import Any, Dict


def now_ts() -> str:
    # RFC3339 / ISO 8601 in UTC, second precision
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def new_id() -> str:
    return uuid.uuid4().hex


def new_nonce() -> str:
    # e.g. "123e4567-e89b-12d3-a456-426655440000"
    return str(uuid.uuid4())


def canonical_json(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
