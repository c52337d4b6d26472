"""
In-memory TTL cache with wholesale invalidation.

Unlike a per-entry TTL cache, every entry shares one timestamp: once the
cache is older than its TTL the whole map is dropped the next time someone
asks for expiry to be applied. There is no background cleanup task; expiry is
applied lazily by the owner (see CampaignIndexResolver).

Each instance owns its own state, so independent owners (tests, tenants)
never see each other's entries.
"""

import threading
from typing import Dict, Iterator, Optional, Union

DEFAULT_TTL = 60.0  # seconds


class IndexCache:
    """Integer key -> integer value cache sharing a single timestamp."""

    def __init__(self, ttl: float = DEFAULT_TTL):
        """
        Initialize the cache.

        Args:
            ttl: Time-to-live in seconds for the whole map (default: 60)
        """
        self.ttl = ttl
        self._entries: Dict[int, int] = {}
        self._timestamp: float = 0.0
        self._lock = threading.Lock()

    @property
    def timestamp(self) -> float:
        """Time the current generation of entries was started (0 = never)."""
        return self._timestamp

    def get(self, key: int) -> Optional[int]:
        """Return the cached value, ignoring age."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: int, value: int) -> None:
        with self._lock:
            self._entries[key] = value

    def expire_if_stale(self, now: float) -> bool:
        """
        Drop every entry if the cache is older than its TTL.

        The check, the clear and the timestamp reset happen as one step
        under the lock.

        Returns:
            True if the cache was cleared
        """
        with self._lock:
            if now - self._timestamp > self.ttl:
                self._entries.clear()
                self._timestamp = now
                return True
            return False

    def clear(self) -> None:
        """Clear all entries and zero the timestamp."""
        with self._lock:
            self._entries.clear()
            self._timestamp = 0.0

    def stats(self, now: float) -> Dict[str, Union[int, float, bool]]:
        """Get cache statistics."""
        with self._lock:
            age = now - self._timestamp if self._timestamp else 0.0
            return {
                "entries": len(self._entries),
                "timestamp": self._timestamp,
                "age": age,
                "is_stale": now - self._timestamp > self.ttl,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            return iter(list(self._entries))
