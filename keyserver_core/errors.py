from __future__ import annotations


class KeyserverError(Exception):
    pass


class PersistenceError(KeyserverError):
    """
    Raised when the store acknowledges fewer (or more) documents than were
    submitted in a batch. The outcome for the unmatched documents is unknown;
    callers must reconcile before retrying.
    """

    def __init__(self, message: str, expected: int = 0, actual: int = 0, keyid: str = ""):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.keyid = keyid
