"""Path domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A single coordinate of a path polyline."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Path:
    """A polyline segment used to draw a route."""

    points: list[Point] = field(default_factory=list)
