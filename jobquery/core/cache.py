"""
Time-bounded cache of aggregated job lists.

Keyed by the fully encoded offset-0 listing URL. Each key's entry is
replaced as a whole value, so sessions working on different keys never
need to coordinate.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from jobquery.config.settings import settings
from jobquery.core.models import JobRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    jobs: Tuple[JobRecord, ...]
    created_at: float


class JobCache:
    """
    In-memory job list cache with a fixed time-to-live.

    Owned by the caller: construct it, pass it to the controller, and
    clear() it when it is no longer wanted.
    """

    def __init__(
        self,
        ttl: float = settings.CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at > self.ttl

    def _purge_expired(self, now: float) -> None:
        expired = [
            key for key, entry in self._entries.items() if self._is_expired(entry, now)
        ]
        for key in expired:
            self._entries.pop(key, None)
        if expired:
            logger.debug(f"Purged {len(expired)} expired cache entries")

    def get(self, key: str) -> Optional[List[JobRecord]]:
        """Return a copy of the cached list, or None if absent or expired."""
        now = self._clock()
        self._purge_expired(now)
        entry = self._entries.get(key)
        if entry is None:
            return None
        return list(entry.jobs)

    def set(self, key: str, value: List[JobRecord]) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._entries[key] = CacheEntry(jobs=tuple(value), created_at=now)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        self._purge_expired(self._clock())
        return len(self._entries)
