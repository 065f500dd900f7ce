"""Stats schemas - combined popularity metrics for a project."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from app.projects.models.project import Project


class Stats(BaseModel):
    """A collection of statistics for a project.

    Instances are immutable snapshots; `Stats()` is the zero value and the
    identity element of `combine`.
    """

    download_count: int = Field(
        default=0, ge=0, description="The number of times the project has been downloaded"
    )
    average_rating: float = Field(
        default=0.0, ge=0.0, le=5.0, description="The average star rating of the project, out of 5"
    )
    number_of_ratings: int = Field(
        default=0, ge=0, description="The number of ratings the project has received"
    )
    interactions: int = Field(
        default=0,
        ge=0,
        description="The number of positive interactions (stars, likes) the project has received",
    )

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def combine(self, other: "Stats") -> "Stats":
        """Merge two snapshots: counters add, ratings are weighted by their counts."""
        number_of_ratings = self.number_of_ratings + other.number_of_ratings
        if other.number_of_ratings <= 0:
            average_rating = self.average_rating
        else:
            average_rating = (
                self.average_rating * self.number_of_ratings
                + other.average_rating * other.number_of_ratings
            ) / number_of_ratings

        return Stats(
            download_count=self.download_count + other.download_count,
            average_rating=min(max(average_rating, 0.0), 5.0),
            number_of_ratings=number_of_ratings,
            interactions=self.interactions + other.interactions,
        )


@dataclass(frozen=True)
class ProjectRef:
    """Snapshot of the project fields stats providers read.

    Detached from the ORM so refresh tasks can outlive the request's session.
    """

    slug: str
    name: str
    github: str | None = None
    links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_project(cls, project: "Project") -> "ProjectRef":
        links: dict[str, str] = {}
        for link in project.links:
            links.setdefault(link.link_id, link.url)
        return cls(slug=project.slug, name=project.name, github=project.github, links=links)

    def link_url(self, link_id: str) -> str | None:
        return self.links.get(link_id)
