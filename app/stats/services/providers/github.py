"""GitHub stats: repository stars and release asset downloads."""

import logging

from app.core.config import settings
from app.core.constants import GITHUB_API_URL, GITHUB_MAX_RELEASE_PAGES, GITHUB_PAGE_SIZE
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider

logger = logging.getLogger(__name__)

GITHUB_URL_PREFIX = "https://github.com/"


class GitHubStatsProvider(StatsProvider):
    name = "github"

    def __init__(self, api_token: str | None = None) -> None:
        self.api_token = settings.GITHUB_API_TOKEN if api_token is None else api_token

    @staticmethod
    def get_repository_id(project: ProjectRef) -> str | None:
        """`https://github.com/Owner/Repo` -> `Owner/Repo`."""
        url = (project.github or "").strip()
        if not url:
            return None
        repository = url.replace(GITHUB_URL_PREFIX, "").strip("/")
        if repository.endswith(".git"):
            repository = repository[: -len(".git")]
        return repository or None

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        repository = self.get_repository_id(project)
        if repository is None:
            return None

        repo = await self._get_json(f"{GITHUB_API_URL}/repos/{repository}", self._headers())
        downloads = await self._count_release_downloads(repository)

        return Stats(interactions=int(repo["stargazers_count"]), download_count=downloads)

    async def _count_release_downloads(self, repository: str) -> int:
        total = 0
        for page in range(1, GITHUB_MAX_RELEASE_PAGES + 1):
            releases = await self._get_json(
                f"{GITHUB_API_URL}/repos/{repository}/releases"
                f"?per_page={GITHUB_PAGE_SIZE}&page={page}",
                self._headers(),
            )
            for release in releases:
                total += sum(int(asset.get("download_count", 0)) for asset in release["assets"])
            if len(releases) < GITHUB_PAGE_SIZE:
                break
        else:
            logger.warning(
                "Stopped counting GitHub downloads for %s after %d pages",
                repository,
                GITHUB_MAX_RELEASE_PAGES,
            )
        return total
