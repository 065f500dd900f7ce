"""Fan-out over the stats providers and fold of their results."""

import asyncio
import logging
from collections.abc import Sequence
from functools import reduce

from app.core.config import settings
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers import StatsProvider, default_providers

logger = logging.getLogger(__name__)


class StatsAggregator:
    """Combines the stats every enabled provider reports for a project."""

    def __init__(
        self,
        providers: Sequence[StatsProvider] | None = None,
        provider_timeout: float | None = None,
    ) -> None:
        self.providers = list(default_providers() if providers is None else providers)
        if provider_timeout is None:
            provider_timeout = settings.STATS_PROVIDER_TIMEOUT_SECONDS
        self.provider_timeout = provider_timeout

    async def get_stats_now(self, project: ProjectRef) -> Stats:
        """Query all enabled providers concurrently and combine what they return.

        Providers that time out, fail, or have no data are skipped. Present
        results are combined left to right in registration order, starting
        from the zero value, so a project no provider knows about gets `Stats()`.
        """
        enabled = [provider for provider in self.providers if provider.is_enabled]
        results = await asyncio.gather(
            *(self._fetch_with_timeout(provider, project) for provider in enabled)
        )
        present = [stats for stats in results if stats is not None]

        logger.info(
            "Aggregated stats for project %s from %d of %d providers",
            project.slug,
            len(present),
            len(enabled),
        )
        return reduce(Stats.combine, present, Stats())

    async def _fetch_with_timeout(
        self, provider: StatsProvider, project: ProjectRef
    ) -> Stats | None:
        try:
            return await asyncio.wait_for(provider.fetch(project), timeout=self.provider_timeout)
        except TimeoutError:
            logger.warning(
                "Timed out after %.1fs fetching %s stats for project %s",
                self.provider_timeout,
                provider.name,
                project.slug,
            )
            return None
