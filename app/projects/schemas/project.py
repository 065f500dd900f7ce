"""Project schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.projects.models.project import Project
from app.stats.schemas.stats import Stats


class ProjectLinkResponse(BaseModel):
    id: str = Field(description="Link id, e.g. 'spigot' or 'modrinth'")
    url: str


class ProjectResponse(BaseModel):
    """A project with its cached popularity stats."""

    slug: str
    name: str
    tagline: str | None = None
    restricted: bool
    github: str | None = None
    links: list[ProjectLinkResponse] = Field(default_factory=list)
    stats: Stats

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_project(cls, project: Project, stats: Stats) -> "ProjectResponse":
        return cls(
            slug=project.slug,
            name=project.name,
            tagline=project.tagline,
            restricted=project.restricted,
            github=project.github,
            links=[ProjectLinkResponse(id=link.link_id, url=link.url) for link in project.links],
            stats=stats,
        )
