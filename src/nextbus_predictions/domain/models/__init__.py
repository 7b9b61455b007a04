"""Domain models for NextBus predictions."""

from nextbus_predictions.domain.models.agency import Agency
from nextbus_predictions.domain.models.direction import Direction, StopRef
from nextbus_predictions.domain.models.error_details import ErrorDetails
from nextbus_predictions.domain.models.path import Path, Point
from nextbus_predictions.domain.models.prediction import Prediction
from nextbus_predictions.domain.models.route import Route, RouteDetail
from nextbus_predictions.domain.models.selection import Selection
from nextbus_predictions.domain.models.stop import Stop
from nextbus_predictions.domain.models.vehicle_location import VehicleLocation

__all__ = [
    "Agency",
    "Direction",
    "ErrorDetails",
    "Path",
    "Point",
    "Prediction",
    "Route",
    "RouteDetail",
    "Selection",
    "Stop",
    "StopRef",
    "VehicleLocation",
]
