"""Fixed-size, newest-first in-memory logs."""
from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Any, Deque, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int


class BoundedLog(Generic[T]):
    """Newest-first sequence holding at most ``capacity`` entries.

    Appending past the capacity evicts the oldest entry from the tail.
    Entries exposing an ``id`` attribute are indexed for :meth:`get_by_id`.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._entries: Deque[T] = deque()
        self._index: Dict[Any, T] = {}
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, entry: T) -> None:
        with self._lock:
            self._entries.appendleft(entry)
            key = getattr(entry, "id", None)
            if key is not None:
                self._index[key] = entry
            while len(self._entries) > self._capacity:
                evicted = self._entries.pop()
                old_key = getattr(evicted, "id", None)
                if old_key is not None and self._index.get(old_key) is evicted:
                    del self._index[old_key]

    def page(self, offset: int = 0, limit: int = 100) -> Page[T]:
        offset = max(offset, 0)
        limit = max(limit, 0)
        with self._lock:
            items = list(islice(self._entries, offset, offset + limit))
            return Page(items, len(self._entries))

    def get_by_id(self, entry_id: Any) -> Optional[T]:
        with self._lock:
            return self._index.get(entry_id)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._index.clear()
            return count

    def snapshot(self) -> List[T]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())


class IdGenerator:
    """Millisecond timestamps, bumped so each id is strictly greater than the last."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = int(time.time() * 1000)
            self._last = now if now > self._last else self._last + 1
            return self._last


__all__ = ["BoundedLog", "IdGenerator", "Page"]
