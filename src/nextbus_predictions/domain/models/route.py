"""Route domain models."""

from dataclasses import dataclass, field

from nextbus_predictions.domain.models.direction import Direction
from nextbus_predictions.domain.models.path import Path
from nextbus_predictions.domain.models.stop import Stop


@dataclass(frozen=True)
class Route:
    """Represents a transit line operated by an agency."""

    tag: str
    title: str
    short_title: str | None = None


@dataclass(frozen=True)
class RouteDetail(Route):
    """A fully resolved route with its master stop list, directions and paths."""

    stops: list[Stop] = field(default_factory=list)
    directions: list[Direction] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    color: str = ""
    opposite_color: str = ""
    lat_min: float | None = None
    lat_max: float | None = None
    lon_min: float | None = None
    lon_max: float | None = None

    def find_direction(self, direction_tag: str) -> Direction | None:
        """Return the direction with the given tag, if the route has one."""
        for direction in self.directions:
            if direction.tag == direction_tag:
                return direction
        return None
