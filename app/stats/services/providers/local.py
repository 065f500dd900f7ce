"""Downloads served by this backend, summed across a project's versions."""

import asyncio

from sqlalchemy.orm import Session, sessionmaker

from app.db.session import SessionLocal
from app.projects.repository import VersionRepository
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.providers.base import StatsProvider


class LocalStatsProvider(StatsProvider):
    name = "local"

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self.session_factory = session_factory or SessionLocal

    async def _fetch(self, project: ProjectRef) -> Stats | None:
        # Sync ORM query, kept off the event loop
        downloads = await asyncio.to_thread(self._sum_downloads, project.slug)
        if downloads is None:
            return None
        return Stats(download_count=downloads)

    def _sum_downloads(self, slug: str) -> int | None:
        db = self.session_factory()
        try:
            return VersionRepository(db).sum_download_count(slug)
        finally:
            db.close()
