"""Project stats routes."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.constants import PROJECT_SLUG_MAX_LENGTH, PROJECT_SLUG_PATTERN
from app.core.schemas import ErrorResponse
from app.db.session import get_db
from app.projects.repository import ProjectRepository
from app.stats.schemas.stats import ProjectRef, Stats
from app.stats.services.stats_cache import StatsCache, get_stats_cache

router = APIRouter(tags=["project-stats"])


@router.get(
    "/projects/{project_slug}/stats",
    response_model=Stats,
    responses={404: {"model": ErrorResponse, "description": "The project was not found."}},
)
async def get_project_stats(
    project_slug: str = Path(
        ...,
        max_length=PROJECT_SLUG_MAX_LENGTH,
        pattern=PROJECT_SLUG_PATTERN,
        description="The slug of the project to get stats for.",
    ),
    db: Session = Depends(get_db),
    cache: StatsCache = Depends(get_stats_cache),
) -> Stats:
    """
    Get combined download, rating and interaction stats for a project.

    Served from memory; values are refreshed in the background every few hours,
    so a project seen for the first time reports zeros until its stats arrive.
    """
    project = ProjectRepository(db).find_project(project_slug)
    return cache.get(ProjectRef.from_project(project))
