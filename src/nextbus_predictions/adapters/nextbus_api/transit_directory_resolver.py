"""Transit directory resolver built on the NextBus feed.

Turns feed documents into domain objects and performs the lookups the feed
itself does not offer: the stops of a single direction and the predictions of
a single direction at a stop.
"""

import logging
from typing import Any

from nextbus_predictions.adapters.nextbus_api.constants import (
    PARAM_AGENCY,
    PARAM_ROUTE,
    PARAM_SINCE,
    PARAM_STOP,
    Command,
)
from nextbus_predictions.adapters.nextbus_api.normalizer import to_list
from nextbus_predictions.domain.errors import (
    DataConsistencyError,
    DirectionNotFoundError,
    ServiceError,
)
from nextbus_predictions.domain.models import (
    Agency,
    Direction,
    ErrorDetails,
    Path,
    Point,
    Prediction,
    Route,
    RouteDetail,
    Stop,
    StopRef,
    VehicleLocation,
)
from nextbus_predictions.domain.ports.document_client import DocumentClient

logger = logging.getLogger(__name__)


def _to_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).lower() == "true"


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _entries(value: Any) -> list[dict[str, Any]]:
    """Normalize a document field to a list of element mappings."""
    entries = []
    for entry in to_list(value):
        if isinstance(entry, dict):
            entries.append(entry)
        else:
            logger.debug(f"Skipping element without attributes: {entry!r}")
    return entries


def _tagged_entries(value: Any) -> list[dict[str, Any]]:
    """Normalize a document field to element mappings that carry a tag."""
    entries = []
    for entry in _entries(value):
        if entry.get("tag"):
            entries.append(entry)
        else:
            logger.debug(f"Skipping element without tag: {entry!r}")
    return entries


class TransitDirectoryResolver:
    """Resolves agencies, routes, directions, stops and predictions.

    Every call fetches a fresh document; nothing is cached between calls.
    """

    def __init__(self, client: DocumentClient) -> None:
        """Initialize with the client used to fetch feed documents.

        Args:
            client: Anything that can issue a feed command and return the
                parsed document, usually a NextBusHttpClient.
        """
        self._client = client

    async def list_agencies(self) -> list[Agency]:
        """List all agencies served by the feed."""
        document = await self._client.request(Command.AGENCY_LIST)
        return [self._build_agency(entry) for entry in _tagged_entries(document.get("agency"))]

    async def list_routes(self, agency_tag: str) -> list[Route]:
        """List the routes of an agency.

        An unknown agency usually yields an empty list rather than an error.

        Raises:
            ValueError: If agency_tag is empty.
        """
        if not agency_tag:
            raise ValueError("agency_tag must be provided.")

        document = await self._client.request(Command.ROUTE_LIST, {PARAM_AGENCY: agency_tag})
        return [self._build_route(entry) for entry in _tagged_entries(document.get("route"))]

    async def get_route_detail(self, agency_tag: str, route_tag: str) -> RouteDetail:
        """Get a route with its stops, directions and paths.

        Raises:
            ServiceError: If the response holds no route.
        """
        document = await self._client.request(
            Command.ROUTE_CONFIG, {PARAM_AGENCY: agency_tag, PARAM_ROUTE: route_tag}
        )
        routes = _entries(document.get("route"))
        if not routes:
            raise ServiceError(
                ErrorDetails(reason=f"No configuration returned for route {route_tag!r}")
            )
        return self._build_route_detail(routes[0])

    async def list_stops_for_route(self, agency_tag: str, route_tag: str) -> list[Stop]:
        """List the master stops of a route."""
        return (await self.get_route_detail(agency_tag, route_tag)).stops

    async def list_directions_for_route(self, agency_tag: str, route_tag: str) -> list[Direction]:
        """List the directions of a route."""
        return (await self.get_route_detail(agency_tag, route_tag)).directions

    async def list_paths_for_route(self, agency_tag: str, route_tag: str) -> list[Path]:
        """List the path polylines of a route."""
        return (await self.get_route_detail(agency_tag, route_tag)).paths

    async def list_stops_for_direction(
        self, agency_tag: str, route_tag: str, direction_tag: str
    ) -> list[Stop]:
        """List the stops a direction serves, in the direction's order.

        Duplicated references are kept.

        Raises:
            DirectionNotFoundError: If the route has no such direction.
            DataConsistencyError: If the direction references a stop that is
                not in the route's stop list.
        """
        route = await self.get_route_detail(agency_tag, route_tag)

        direction = route.find_direction(direction_tag)
        if direction is None:
            raise DirectionNotFoundError(direction_tag, route_tag)

        stops_by_tag = {stop.tag: stop for stop in route.stops}
        stops = []
        for stop_ref in direction.stop_refs:
            stop = stops_by_tag.get(stop_ref.tag)
            if stop is None:
                logger.warning(
                    f"Direction {direction_tag} on route {route_tag} ({agency_tag}) "
                    f"references unknown stop {stop_ref.tag}"
                )
                raise DataConsistencyError(stop_ref.tag, direction_tag, route_tag)
            stops.append(stop)
        return stops

    async def get_stop_predictions(
        self, agency_tag: str, route_tag: str, stop_tag: str
    ) -> list[Prediction]:
        """Get predictions at a stop across all directions.

        An empty list means no vehicle is currently in transit.
        """
        document = await self._client.request(
            Command.PREDICTIONS,
            {PARAM_AGENCY: agency_tag, PARAM_ROUTE: route_tag, PARAM_STOP: stop_tag},
        )

        predictions = []
        for stop_predictions in _entries(document.get("predictions")):
            for direction in _entries(stop_predictions.get("direction")):
                direction_title = direction.get("title", "")
                predictions.extend(
                    self._build_prediction(entry, direction_title)
                    for entry in _entries(direction.get("prediction"))
                )
        return predictions

    async def get_stop_predictions_for_direction(
        self, agency_tag: str, route_tag: str, stop_tag: str, direction_tag: str
    ) -> list[Prediction]:
        """Get predictions at a stop for a single direction."""
        predictions = await self.get_stop_predictions(agency_tag, route_tag, stop_tag)
        return [p for p in predictions if p.direction_tag == direction_tag]

    async def list_vehicle_locations(
        self, agency_tag: str, route_tag: str, since_epoch_ms: int = 0
    ) -> list[VehicleLocation]:
        """List vehicles on a route that reported since the given time."""
        document = await self._client.request(
            Command.VEHICLE_LOCATIONS,
            {
                PARAM_AGENCY: agency_tag,
                PARAM_ROUTE: route_tag,
                PARAM_SINCE: str(since_epoch_ms),
            },
        )
        return [
            self._build_vehicle_location(entry, route_tag)
            for entry in _entries(document.get("vehicle"))
        ]

    @staticmethod
    def _build_agency(entry: dict[str, Any]) -> Agency:
        tag = entry.get("tag", "")
        return Agency(
            tag=tag,
            title=entry.get("title") or tag,
            region_title=entry.get("regionTitle", ""),
            short_title=entry.get("shortTitle"),
        )

    @staticmethod
    def _build_route(entry: dict[str, Any]) -> Route:
        tag = entry.get("tag", "")
        return Route(tag=tag, title=entry.get("title") or tag, short_title=entry.get("shortTitle"))

    @staticmethod
    def _build_stop(entry: dict[str, Any]) -> Stop:
        tag = entry.get("tag", "")
        return Stop(
            tag=tag,
            title=entry.get("title") or tag,
            latitude=_to_float(entry.get("lat")) or 0.0,
            longitude=_to_float(entry.get("lon")) or 0.0,
            stop_id=entry.get("stopId"),
            short_title=entry.get("shortTitle"),
        )

    @staticmethod
    def _build_direction(entry: dict[str, Any]) -> Direction:
        tag = entry.get("tag", "")
        return Direction(
            tag=tag,
            title=entry.get("title") or entry.get("name") or tag,
            name=entry.get("name", ""),
            use_for_ui=_to_bool(entry.get("useForUI"), default=True),
            stop_refs=[StopRef(tag=ref.get("tag", "")) for ref in _entries(entry.get("stop"))],
        )

    @staticmethod
    def _build_path(entry: dict[str, Any]) -> Path:
        points = []
        for point in _entries(entry.get("point")):
            latitude = _to_float(point.get("lat"))
            longitude = _to_float(point.get("lon"))
            if latitude is not None and longitude is not None:
                points.append(Point(latitude=latitude, longitude=longitude))
        return Path(points=points)

    def _build_route_detail(self, entry: dict[str, Any]) -> RouteDetail:
        route = self._build_route(entry)
        return RouteDetail(
            tag=route.tag,
            title=route.title,
            short_title=route.short_title,
            stops=[self._build_stop(stop) for stop in _tagged_entries(entry.get("stop"))],
            directions=[
                self._build_direction(direction)
                for direction in _tagged_entries(entry.get("direction"))
            ],
            paths=[self._build_path(path) for path in _entries(entry.get("path"))],
            color=entry.get("color", ""),
            opposite_color=entry.get("oppositeColor", ""),
            lat_min=_to_float(entry.get("latMin")),
            lat_max=_to_float(entry.get("latMax")),
            lon_min=_to_float(entry.get("lonMin")),
            lon_max=_to_float(entry.get("lonMax")),
        )

    @staticmethod
    def _build_prediction(entry: dict[str, Any], direction_title: str) -> Prediction:
        return Prediction(
            minutes=_to_int(entry.get("minutes")),
            seconds=_to_int(entry.get("seconds")),
            epoch_time=_to_int(entry.get("epochTime")),
            direction_tag=entry.get("dirTag", ""),
            direction_title=direction_title,
            trip_tag=entry.get("tripTag"),
            vehicle=entry.get("vehicle"),
            block=entry.get("block"),
            is_departure=_to_bool(entry.get("isDeparture")),
            affected_by_layover=_to_bool(entry.get("affectedByLayover")),
            is_schedule_based=_to_bool(entry.get("isScheduleBased")),
            delayed=_to_bool(entry.get("delayed")),
        )

    @staticmethod
    def _build_vehicle_location(entry: dict[str, Any], route_tag: str) -> VehicleLocation:
        speed = _to_float(entry.get("speedKmHr"))
        heading = _to_int(entry.get("heading"), default=-1)
        return VehicleLocation(
            id=entry.get("id", ""),
            route_tag=entry.get("routeTag", route_tag),
            direction_tag=entry.get("dirTag"),
            latitude=_to_float(entry.get("lat")) or 0.0,
            longitude=_to_float(entry.get("lon")) or 0.0,
            seconds_since_report=_to_int(entry.get("secsSinceReport")),
            predictable=_to_bool(entry.get("predictable")),
            heading=heading if heading >= 0 else None,
            speed_km_hr=speed,
        )
