"""
In-memory cache with lazy time-based expiry.

Entries are evicted when a read finds them expired; there is no background sweeper.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """Key/value cache owned by one client instance. All keys share one TTL."""

    def __init__(self, ttl_ms: int = 30_000, clock: Optional[Callable[[], float]] = None):
        self.ttl_ms = ttl_ms
        self._clock = clock or time.monotonic
        self._entries: Dict[str, _CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache miss: {key}")
            return None
        if self._clock() > entry.expires_at:
            del self._entries[key]
            logger.debug(f"Cache entry expired: {key}")
            return None
        logger.debug(f"Cache hit: {key}")
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = _CacheEntry(value=value, expires_at=self._clock() + self.ttl_ms / 1000.0)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
