"""Transit directory port."""

from typing import Protocol

from nextbus_predictions.domain.models.agency import Agency
from nextbus_predictions.domain.models.direction import Direction
from nextbus_predictions.domain.models.prediction import Prediction
from nextbus_predictions.domain.models.route import Route
from nextbus_predictions.domain.models.stop import Stop


class TransitDirectory(Protocol):
    """Port for browsing agencies, routes, directions and stops."""

    async def list_agencies(self) -> list[Agency]:
        """List all agencies."""
        ...

    async def list_routes(self, agency_tag: str) -> list[Route]:
        """List the routes of an agency."""
        ...

    async def list_directions_for_route(self, agency_tag: str, route_tag: str) -> list[Direction]:
        """List the directions of a route."""
        ...

    async def list_stops_for_route(self, agency_tag: str, route_tag: str) -> list[Stop]:
        """List every stop of a route."""
        ...

    async def list_stops_for_direction(
        self, agency_tag: str, route_tag: str, direction_tag: str
    ) -> list[Stop]:
        """List the stops served by a direction, in travel order."""
        ...

    async def get_stop_predictions_for_direction(
        self, agency_tag: str, route_tag: str, stop_tag: str, direction_tag: str
    ) -> list[Prediction]:
        """Get predictions at a stop for one direction."""
        ...
