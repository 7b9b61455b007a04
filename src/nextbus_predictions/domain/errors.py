"""Errors raised by the NextBus prediction client."""

from nextbus_predictions.domain.models.error_details import ErrorDetails


class NextBusError(Exception):
    """Base error for everything the prediction client raises."""


class ServiceError(NextBusError):
    """Raised when the web service cannot be reached or answers with a failure."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(details.reason)
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code

    @property
    def should_retry(self) -> bool:
        return self.details.should_retry


class DocumentParseError(ServiceError):
    """Raised when the response body is not a well-formed XML document."""


class DirectionNotFoundError(NextBusError):
    """Raised when a route has no direction with the requested tag."""

    def __init__(self, direction_tag: str, route_tag: str) -> None:
        super().__init__(f"Direction {direction_tag!r} not found on route {route_tag!r}")
        self.direction_tag = direction_tag
        self.route_tag = route_tag


class DataConsistencyError(NextBusError):
    """Raised when a direction references a stop missing from the route's stop list."""

    def __init__(self, stop_tag: str, direction_tag: str, route_tag: str) -> None:
        super().__init__(
            f"Direction {direction_tag!r} on route {route_tag!r} references "
            f"unknown stop {stop_tag!r}"
        )
        self.stop_tag = stop_tag
        self.direction_tag = direction_tag
        self.route_tag = route_tag
