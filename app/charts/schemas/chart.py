"""Chart schemas - client-renderable line charts."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Axis(BaseModel):
    """An axis of a chart."""

    type: str = Field(description="Axis type, 'category' or 'value'")
    labels: list[str] | None = Field(default=None, description="Category labels, oldest first")
    boundary_gap: bool = False

    model_config = _camel_config


class Series(BaseModel):
    """A data point series for a chart."""

    name: str
    type: str
    stack: str | None = None
    data: list[float] = Field(default_factory=list, description="One value per x-axis label")

    model_config = _camel_config


class Chart(BaseModel):
    """A chart containing axes and data for visualisation."""

    x_axis: Axis
    y_axis: Axis
    series: list[Series]
    total_value: str = Field(description="Currency-formatted sum of all charted amounts")

    model_config = _camel_config
