"""Response Cache

Bounded, time-limited store of accepted translations keyed by the raw input.
Safe to share between the blocking and background translation paths."""

import threading
import time
from collections import OrderedDict
from typing import Callable, NamedTuple, Optional


class CacheEntry(NamedTuple):
    command: str
    created_at: float


class ResponseCache:
    """Insertion-ordered TTL cache. The oldest-inserted entries are evicted first."""

    def __init__(self, ttl: float = 300.0, max_entries: int = 100,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        """Gives back the cached command for key, or None if missing or expired."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if now - entry.created_at < self.ttl:
                return entry.command
            del self._entries[key]
        return None

    def put(self, key: str, command: str) -> None:
        """Stores command for key as the newest entry, evicting the oldest past the bound."""
        entry = CacheEntry(command, self._clock())
        with self._lock:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
