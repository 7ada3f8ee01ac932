"""Add-only set of revoked access tokens."""

import threading


class RevokedTokenRepository:
    """
    Tokens revoked before their natural expiry.

    Entries are never evicted, so a revoked token stays revoked for the life
    of the process.
    """

    def __init__(self):
        self._tokens: set[str] = set()
        self._lock = threading.Lock()

    def add(self, token: str) -> None:
        with self._lock:
            self._tokens.add(token)

    def is_revoked(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
