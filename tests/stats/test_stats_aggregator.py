"""
Tests for StatsAggregator - concurrent provider fan-out and result folding.
"""

import time
from unittest.mock import MagicMock, patch

import pytest

from app.stats.schemas.stats import Stats
from app.stats.services.providers import default_providers
from app.stats.services.stats_aggregator import StatsAggregator
from tests.utils.helpers import FakeProvider, project_ref


class TestDefaultProviders:
    def test_registration_order(self):
        names = [provider.name for provider in default_providers()]

        assert names == ["github", "modrinth", "spigot", "hangar", "local"]


class TestStatsAggregator:
    """Tests for StatsAggregator.get_stats_now."""

    @pytest.mark.asyncio
    async def test_combines_present_results(self):
        aggregator = StatsAggregator(
            providers=[
                FakeProvider("github", Stats(download_count=100, interactions=40)),
                FakeProvider(
                    "spigot", Stats(download_count=50, average_rating=4.0, number_of_ratings=10)
                ),
                FakeProvider(
                    "hangar", Stats(download_count=5, average_rating=5.0, number_of_ratings=30)
                ),
            ]
        )

        result = await aggregator.get_stats_now(project_ref())

        assert result.download_count == 155
        assert result.interactions == 40
        assert result.number_of_ratings == 40
        assert result.average_rating == pytest.approx(4.75)

    @pytest.mark.asyncio
    async def test_absent_results_are_skipped(self):
        aggregator = StatsAggregator(
            providers=[
                FakeProvider("github", None),
                FakeProvider("modrinth", Stats(download_count=7)),
                FakeProvider("spigot", error=RuntimeError("boom")),
            ]
        )

        result = await aggregator.get_stats_now(project_ref())

        assert result == Stats(download_count=7)

    @pytest.mark.asyncio
    async def test_zero_value_when_no_provider_has_data(self):
        aggregator = StatsAggregator(providers=[FakeProvider("github"), FakeProvider("hangar")])

        result = await aggregator.get_stats_now(project_ref())

        assert result == Stats()

    @pytest.mark.asyncio
    async def test_zero_value_without_providers(self):
        result = await StatsAggregator(providers=[]).get_stats_now(project_ref())

        assert result == Stats()

    @pytest.mark.asyncio
    async def test_slow_provider_is_treated_as_absent(self):
        slow = FakeProvider("github", Stats(download_count=1000), delay=5.0)
        fast = FakeProvider("modrinth", Stats(download_count=3))
        aggregator = StatsAggregator(providers=[slow, fast], provider_timeout=0.05)

        result = await aggregator.get_stats_now(project_ref())

        assert result == Stats(download_count=3)
        assert slow.calls == 1

    @pytest.mark.asyncio
    async def test_disabled_providers_are_not_queried(self):
        github = FakeProvider("github", Stats(download_count=10))
        hangar = FakeProvider("hangar", Stats(download_count=20))
        mock_settings = MagicMock()
        mock_settings.disabled_stats_providers = {"hangar"}

        with patch("app.stats.services.providers.base.settings", mock_settings):
            result = await StatsAggregator(providers=[github, hangar]).get_stats_now(project_ref())

        assert result == Stats(download_count=10)
        assert hangar.calls == 0

    @pytest.mark.asyncio
    async def test_providers_run_concurrently(self):
        """Two providers that each take 0.2s must finish well within their sum."""
        providers = [
            FakeProvider("github", Stats(download_count=1), delay=0.2),
            FakeProvider("hangar", Stats(download_count=2), delay=0.2),
        ]
        aggregator = StatsAggregator(providers=providers, provider_timeout=2.0)

        start = time.perf_counter()
        result = await aggregator.get_stats_now(project_ref())
        elapsed = time.perf_counter() - start

        assert result == Stats(download_count=3)
        assert elapsed < 0.38
