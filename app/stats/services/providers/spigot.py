"""SpigotMC stats via the Spiget API: downloads, likes and ratings."""

from app.core.constants import SPIGET_API_URL
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider, last_path_segment


class SpigotStatsProvider(StatsProvider):
    name = "spigot"

    @staticmethod
    def get_resource_id(project: ProjectRef) -> str | None:
        url = project.link_url("spigot")
        # Resource URLs end in "<name>.<id>/"
        return last_path_segment(url, separator=".") if url else None

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        resource_id = self.get_resource_id(project)
        if resource_id is None:
            return None

        data = await self._get_json(f"{SPIGET_API_URL}/resources/{resource_id}")
        rating = data["rating"]

        return Stats(
            download_count=int(data["downloads"]),
            interactions=int(data.get("likes", 0)),
            average_rating=float(rating["average"]),
            number_of_ratings=int(rating["count"]),
        )
