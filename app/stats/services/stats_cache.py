"""Stale-while-revalidate cache of combined project stats.

Reads never wait for the providers: a cold or expired entry is answered from
memory immediately and repopulated by a background task on the running event
loop. Entries live for the lifetime of the process.
"""

import asyncio
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from app.core.config import settings
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.stats_aggregator import StatsAggregator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class CacheEntry:
    """Last known stats for a project and when they should next be refreshed."""

    stats: Stats = field(default_factory=Stats)
    expiry: datetime = field(default_factory=_utc_now)
    refreshing: bool = False

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expiry


class StatsCache:
    """Per-project stats cache backed by a `StatsAggregator`."""

    def __init__(
        self,
        aggregator: StatsAggregator | None = None,
        ttl: timedelta | None = None,
        clock: Clock = _utc_now,
    ) -> None:
        self.aggregator = aggregator or StatsAggregator()
        self.ttl = ttl if ttl is not None else timedelta(hours=settings.STATS_CACHE_TTL_HOURS)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        # Guards entry creation and the stale -> bump expiry -> mark refreshing step
        self._lock = threading.Lock()
        self._tasks: set[asyncio.Task[None]] = set()

    def get(self, project: ProjectRef) -> Stats:
        """Return the cached stats for a project without waiting on any I/O.

        - unseen project: returns the zero value and schedules a first population;
        - expired entry: pushes the expiry forward, schedules one refresh and
          returns the previous value;
        - fresh entry: returns the cached value.

        Must be called from a running event loop, which runs the refresh tasks.
        """
        now = self._clock()

        entry = self._entries.get(project.slug)
        if entry is not None and not entry.is_expired(now):
            return entry.stats

        loop = asyncio.get_running_loop()
        with self._lock:
            entry = self._entries.get(project.slug)
            if entry is None:
                entry = CacheEntry(stats=Stats(), expiry=now + self.ttl)
                self._entries[project.slug] = entry
            elif entry.is_expired(now):
                entry.expiry = max(entry.expiry, now + self.ttl)
            else:
                # Another caller refreshed the entry while we waited for the lock
                return entry.stats

            stats = entry.stats
            if entry.refreshing:
                return stats
            entry.refreshing = True

        self._schedule_refresh(loop, project, entry)
        return stats

    def peek(self, slug: str) -> CacheEntry | None:
        """The entry for a slug, without scheduling anything."""
        return self._entries.get(slug)

    async def wait_for_refreshes(self) -> None:
        """Wait until every scheduled refresh has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _schedule_refresh(
        self, loop: asyncio.AbstractEventLoop, project: ProjectRef, entry: CacheEntry
    ) -> None:
        task = loop.create_task(self._refresh(project, entry), name=f"stats-refresh:{project.slug}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _refresh(self, project: ProjectRef, entry: CacheEntry) -> None:
        try:
            stats = await self.aggregator.get_stats_now(project)
            with self._lock:
                entry.stats = stats
        except Exception:
            logger.exception("Stats refresh failed for project %s", project.slug)
        finally:
            with self._lock:
                entry.refreshing = False


# Singleton instance
_stats_cache: StatsCache | None = None
_stats_cache_lock = threading.Lock()


def get_stats_cache() -> StatsCache:
    """Get or create the process-wide stats cache.

    FastAPI runs this sync dependency on its threadpool, so creation is locked.
    """
    global _stats_cache
    if _stats_cache is None:
        with _stats_cache_lock:
            if _stats_cache is None:
                _stats_cache = StatsCache()
    return _stats_cache
