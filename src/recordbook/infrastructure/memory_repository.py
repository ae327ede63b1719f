"""In-memory implementations of RecordRepository (no DB)."""

import threading
from typing import Generic, TypeVar

R = TypeVar("R")


class InMemoryRepository(Generic[R]):
    """Stores records in a plain dict. Not thread-safe; share across threads only with external locking."""

    def __init__(self) -> None:
        self._by_id: dict[str, R] = {}

    def insert(self, key: str, record: R) -> bool:
        if key in self._by_id:
            return False
        self._by_id[key] = record
        return True

    def get(self, key: str) -> R | None:
        return self._by_id.get(key)

    def remove(self, key: str) -> bool:
        if key not in self._by_id:
            return False
        del self._by_id[key]
        return True

    def contains(self, key: str) -> bool:
        return key in self._by_id

    def count(self) -> int:
        return len(self._by_id)


class LockingRepository(InMemoryRepository[R]):
    """
    InMemoryRepository with every call made under one lock.
    Each call is atomic on its own; a sequence of calls is not.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def insert(self, key: str, record: R) -> bool:
        with self._lock:
            return super().insert(key, record)

    def get(self, key: str) -> R | None:
        with self._lock:
            return super().get(key)

    def remove(self, key: str) -> bool:
        with self._lock:
            return super().remove(key)

    def contains(self, key: str) -> bool:
        with self._lock:
            return super().contains(key)

    def count(self) -> int:
        with self._lock:
            return super().count()
