import asyncio
from datetime import UTC, datetime, timedelta

import httpx

from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider


class FakeAggregator:
    """Stands in for StatsAggregator; returns `result` and records every call."""

    def __init__(self, result: Stats | None = None, error: Exception | None = None):
        self.result = result or Stats()
        self.error = error
        self.calls: list[str] = []

    async def get_stats_now(self, project: ProjectRef) -> Stats:
        self.calls.append(project.slug)
        if self.error is not None:
            raise self.error
        return self.result


class FakeProvider(StatsProvider):
    """Provider returning a canned result, optionally after a delay."""

    def __init__(
        self,
        name: str,
        result: Stats | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        self.name = name
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = 0

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def project_ref(slug: str = "huskhomes", **links: str) -> ProjectRef:
    return ProjectRef(slug=slug, name=slug.title(), links=dict(links))


def set_access_token_cookie(client: httpx.AsyncClient, access_token: str) -> None:
    """Set the access token cookie on the test client."""
    client.cookies.set("access_token", access_token)
