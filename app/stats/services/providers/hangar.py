"""Hangar (PaperMC) stats: downloads and stars."""

from app.core.constants import HANGAR_API_URL
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider, last_path_segment


class HangarStatsProvider(StatsProvider):
    name = "hangar"

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        url = project.link_url("hangar")
        slug = last_path_segment(url) if url else None
        if slug is None:
            return None

        data = await self._get_json(f"{HANGAR_API_URL}/projects/{slug}")
        stats = data["stats"]

        return Stats(download_count=int(stats["downloads"]), interactions=int(stats["stars"]))
