"""Base repository pattern for in-memory data access."""

import itertools
import threading
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

KeyType = TypeVar("KeyType", bound=Hashable)
RecordType = TypeVar("RecordType")


class BaseRepository(Generic[KeyType, RecordType]):
    """
    Base repository backed by a dict.

    Each instance owns its own map, id sequence and lock, so stores are never
    shared between applications. All repositories should inherit from this class.
    """

    def __init__(self):
        self._items: Dict[KeyType, RecordType] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def next_id(self) -> int:
        """Return the next id from a monotonic sequence."""
        with self._lock:
            return next(self._ids)

    def get(self, key: KeyType) -> Optional[RecordType]:
        """Get single record by key."""
        with self._lock:
            return self._items.get(key)

    def get_multi(self) -> List[RecordType]:
        """Get all records in insertion order."""
        with self._lock:
            return list(self._items.values())

    def exists(self, key: KeyType) -> bool:
        """Check if record exists."""
        with self._lock:
            return key in self._items

    def delete(self, key: KeyType) -> bool:
        """Delete record (hard delete)."""
        with self._lock:
            if key not in self._items:
                return False
            del self._items[key]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
