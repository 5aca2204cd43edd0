"""Simple in-memory read-through TTL cache. No Redis needed for a demo.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
the catalog may be generated twice (once per worker). That is fine here:
generation is deterministic and cheap.

Expiry is absolute from creation, never sliding. Two callers that both see
an expired entry may both regenerate; only the store itself is serialized.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

from errors import GenerationError

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    created_at: float
    ttl: float

    def is_valid(self, now: float) -> bool:
        return now < self.created_at + self.ttl


class TTLCache:
    def __init__(self, ttl_seconds: float = 60, clock: Clock = time.monotonic):
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._store: dict[str, CacheEntry] = {}

    def entry(self, key: str) -> CacheEntry | None:
        """Raw stored entry, expired or not."""
        with self._lock:
            return self._store.get(key)

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_valid(now):
                return entry.value
            del self._store[key]
        return None

    def set(self, key: str, value: Any) -> CacheEntry:
        entry = CacheEntry(value=value, created_at=self._clock(), ttl=self.ttl_seconds)
        with self._lock:
            self._store[key] = entry
        return entry

    def get_or_generate(self, key: str, generator: Callable[[], Any]) -> Any:
        """Return the cached value for key, regenerating it when absent or expired.

        A failing generator stores nothing and leaves any previous entry in
        place; the failure surfaces as GenerationError and the next call
        tries again.
        """
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)
        if entry is not None and entry.is_valid(now):
            return entry.value

        logger.info("Cache miss for %s, regenerating", key)
        try:
            value = generator()
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(str(e) or type(e).__name__) from e

        return self.set(key, value).value
