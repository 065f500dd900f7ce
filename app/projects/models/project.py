from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.constants import PROJECT_SLUG_MAX_LENGTH
from app.db.session import Base


class Project(Base):
    """A published software project.

    Attributes:
        slug: Unique slug ID (primary key), e.g. "huskhomes"
        name: Display name used for chart series and listings
        restricted: Whether the project is sold (purchases grant access to it)
        hidden: Whether the project is hidden from public listings
        github: GitHub repository URL, if the project is open source
        sort_weight: Ordering weight in listings
    """

    __tablename__ = "projects"

    slug: Mapped[str] = mapped_column(String(PROJECT_SLUG_MAX_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    tagline: Mapped[str | None] = mapped_column(default=None)
    restricted: Mapped[bool] = mapped_column(default=False, index=True)
    hidden: Mapped[bool] = mapped_column(default=False)
    github: Mapped[str | None] = mapped_column(String(256), default=None)
    sort_weight: Mapped[int] = mapped_column(default=1)

    # Relationships
    links = relationship(
        "ProjectLink",
        back_populates="project",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProjectLink.id",
    )
    versions = relationship("Version", back_populates="project", cascade="all, delete-orphan")

    def get_link_url(self, link_id: str) -> str | None:
        """Return the URL of the first link with the given id (e.g. "spigot")."""
        for link in self.links:
            if link.link_id == link_id:
                return str(link.url)
        return None

    def __repr__(self) -> str:
        return f"<Project(slug={self.slug}, restricted={self.restricted})>"


class ProjectLink(Base):
    """External link of a project; registry links drive the stats providers."""

    __tablename__ = "project_links"
    __table_args__ = (UniqueConstraint("project_slug", "link_id", name="uq_project_link_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_slug: Mapped[str] = mapped_column(
        ForeignKey("projects.slug", ondelete="CASCADE"), index=True
    )
    link_id: Mapped[str] = mapped_column(String(64))  # spigot, modrinth, hangar, ...
    url: Mapped[str] = mapped_column(String(255))

    project = relationship("Project", back_populates="links")

    def __repr__(self) -> str:
        return f"<ProjectLink(project={self.project_slug}, id={self.link_id})>"


class Version(Base):
    """A released version hosted by this service, with its local download counter."""

    __tablename__ = "versions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_slug: Mapped[str] = mapped_column(
        ForeignKey("projects.slug", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(64))
    download_count: Mapped[int] = mapped_column(default=0)

    project = relationship("Project", back_populates="versions")

    def __repr__(self) -> str:
        return f"<Version(project={self.project_slug}, name={self.name})>"
