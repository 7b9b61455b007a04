"""Vehicle location domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleLocation:
    """Last reported position of a vehicle on a route."""

    id: str
    route_tag: str
    direction_tag: str | None
    latitude: float
    longitude: float
    seconds_since_report: int
    predictable: bool
    heading: int | None = None
    speed_km_hr: float | None = None
