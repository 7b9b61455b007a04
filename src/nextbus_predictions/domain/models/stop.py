"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """Represents a physical stop on a route."""

    tag: str
    title: str
    latitude: float
    longitude: float
    stop_id: str | None = None  # Public stop code, shared across routes
    short_title: str | None = None
