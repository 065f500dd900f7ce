"""Base repository pattern implementation.

This module provides a generic repository that domain-specific
repositories build on.
"""

from typing import Any, Generic, TypeVar, cast

from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic repository with common read operations.

    Example:
        ```python
        class ProjectRepository(BaseRepository[Project]):
            def __init__(self, db: Session):
                super().__init__(db, Project)

            def list_restricted_projects(self) -> list[Project]:
                return self.db.query(self.model).filter(self.model.restricted.is_(True)).all()
        ```
    """

    def __init__(self, db: Session, model: type[ModelType]):
        """Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy session.
            model: The model class this repository operates on.
        """
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Get a single entity by primary key.

        Works for any single-column primary key (slugs, integers).

        Args:
            entity_id: The primary key value.

        Returns:
            The entity if found, None otherwise.
        """
        return cast(ModelType | None, self.db.get(self.model, entity_id))
