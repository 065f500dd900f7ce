"""Base class for external stats providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from app.core.config import settings
from app.core.constants import REGISTRY_HTTP_TIMEOUT_SECONDS, REGISTRY_USER_AGENT
from app.stats.schemas.stats import ProjectRef, Stats

logger = logging.getLogger(__name__)


def last_path_segment(url: str, separator: str = "/") -> str | None:
    """Extract the id at the end of a registry URL.

    `https://hangar.papermc.io/William278/HuskHomes/` -> `HuskHomes`;
    with separator "." `https://www.spigotmc.org/resources/huskhomes.83767/` -> `83767`.
    """
    trimmed = url.strip().rstrip("/")
    if separator not in trimmed:
        return None
    segment = trimmed.rsplit(separator, 1)[1]
    return segment or None


class StatsProvider(ABC):
    """A source of popularity stats for a project.

    Subclasses implement `_fetch`; callers use `fetch`, which never raises:
    missing data and every failure are reported as None.
    """

    name: str = "provider"

    @property
    def is_enabled(self) -> bool:
        return self.name not in settings.disabled_stats_providers

    async def fetch(self, project: ProjectRef) -> Stats | None:
        """Fetch stats for a project, or None if the provider has nothing for it."""
        try:
            return await self._fetch(project)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Got %s fetching %s stats for project %s",
                e.response.status_code,
                self.name,
                project.slug,
            )
        except httpx.RequestError as e:
            logger.warning(
                "Connection error fetching %s stats for project %s: %s",
                self.name,
                project.slug,
                str(e),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Malformed %s response for project %s: %s", self.name, project.slug, str(e)
            )
        except Exception:
            logger.error(
                "Unexpected error fetching %s stats for project %s",
                self.name,
                project.slug,
                exc_info=True,
            )
        return None

    @abstractmethod
    async def _fetch(self, project: ProjectRef) -> Stats | None:
        """Provider-specific lookup; may raise, `fetch` converts failures to None."""

    async def _get_json(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """GET a registry endpoint and decode its JSON body."""
        async with httpx.AsyncClient(timeout=REGISTRY_HTTP_TIMEOUT_SECONDS) as client:
            response = await client.get(
                url,
                headers={
                    "Accept": "application/json",
                    "User-Agent": REGISTRY_USER_AGENT,
                    **(headers or {}),
                },
            )
            response.raise_for_status()
            return response.json()
