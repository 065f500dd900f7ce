from app.stats.services.providers.base import StatsProvider
from app.stats.services.providers.github import GitHubStatsProvider
from app.stats.services.providers.hangar import HangarStatsProvider
from app.stats.services.providers.local import LocalStatsProvider
from app.stats.services.providers.modrinth import ModrinthStatsProvider
from app.stats.services.providers.spigot import SpigotStatsProvider

__all__ = [
    "StatsProvider",
    "GitHubStatsProvider",
    "ModrinthStatsProvider",
    "SpigotStatsProvider",
    "HangarStatsProvider",
    "LocalStatsProvider",
    "default_providers",
]


def default_providers() -> list[StatsProvider]:
    """The registered providers, in the order their results are combined."""
    return [
        GitHubStatsProvider(),
        ModrinthStatsProvider(),
        SpigotStatsProvider(),
        HangarStatsProvider(),
        LocalStatsProvider(),
    ]
