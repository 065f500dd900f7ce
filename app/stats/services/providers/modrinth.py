"""Modrinth stats: project downloads."""

from app.core.config import settings
from app.core.constants import MODRINTH_API_URL
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider, last_path_segment


class ModrinthStatsProvider(StatsProvider):
    name = "modrinth"

    def __init__(self, api_token: str | None = None) -> None:
        self.api_token = settings.MODRINTH_API_TOKEN if api_token is None else api_token

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        url = project.link_url("modrinth")
        slug = last_path_segment(url) if url else None
        if slug is None:
            return None

        headers = {"Authorization": self.api_token} if self.api_token else None
        data = await self._get_json(f"{MODRINTH_API_URL}/project/{slug}", headers)

        return Stats(download_count=int(data["downloads"]))
