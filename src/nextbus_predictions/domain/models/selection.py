"""Selection domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """Tags chosen for a prediction lookup, one per directory level."""

    agency_tag: str
    route_tag: str
    direction_tag: str
    stop_tag: str
