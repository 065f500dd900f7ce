from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.exceptions import ProjectNotFoundError
from app.core.repository import BaseRepository
from app.projects.models.project import Project, Version


class ProjectRepository(BaseRepository[Project]):
    def __init__(self, db: Session):
        super().__init__(db, Project)

    def find_project(self, slug: str) -> Project:
        """Get a project by slug.

        Raises:
            ProjectNotFoundError: If no project has the given slug.
        """
        project = self.get_by_id(slug)
        if project is None:
            raise ProjectNotFoundError(slug)
        return project

    def list_restricted_projects(self) -> list[Project]:
        """Projects that can be purchased, in listing order."""
        return (
            self.db.query(Project)
            .filter(Project.restricted.is_(True))
            .order_by(Project.sort_weight, Project.slug)
            .all()
        )


class VersionRepository(BaseRepository[Version]):
    def __init__(self, db: Session):
        super().__init__(db, Version)

    def sum_download_count(self, project_slug: str) -> int | None:
        """Total local downloads across a project's versions, None if it has none."""
        result = (
            self.db.query(func.sum(Version.download_count))
            .filter(Version.project_slug == project_slug)
            .scalar()
        )
        return int(result) if result is not None else None
