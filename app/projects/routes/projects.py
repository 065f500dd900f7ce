"""Project routes."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.constants import PROJECT_SLUG_MAX_LENGTH, PROJECT_SLUG_PATTERN
from app.core.schemas import ErrorResponse
from app.db.session import get_db
from app.projects.repository import ProjectRepository
from app.projects.schemas.project import ProjectResponse
from app.stats.schemas.stats import ProjectRef
from app.stats.services.stats_cache import StatsCache, get_stats_cache

router = APIRouter(tags=["projects"])


@router.get(
    "/projects/{project_slug}",
    response_model=ProjectResponse,
    responses={404: {"model": ErrorResponse, "description": "The project was not found."}},
)
async def get_project(
    project_slug: str = Path(
        ..., max_length=PROJECT_SLUG_MAX_LENGTH, pattern=PROJECT_SLUG_PATTERN
    ),
    db: Session = Depends(get_db),
    cache: StatsCache = Depends(get_stats_cache),
) -> ProjectResponse:
    """Get a project, including its cached stats."""
    project = ProjectRepository(db).find_project(project_slug)
    stats = cache.get(ProjectRef.from_project(project))
    return ProjectResponse.from_project(project, stats)
