"""Domain layer - transit directory models, errors and ports."""

from nextbus_predictions.domain.errors import (
    DataConsistencyError,
    DirectionNotFoundError,
    DocumentParseError,
    NextBusError,
    ServiceError,
)
from nextbus_predictions.domain.models import (
    Agency,
    Direction,
    Prediction,
    Route,
    RouteDetail,
    Stop,
)
from nextbus_predictions.domain.ports import (
    ChoicePrompt,
    DocumentClient,
    TransitDirectory,
)

__all__ = [
    "Agency",
    "ChoicePrompt",
    "DataConsistencyError",
    "Direction",
    "DirectionNotFoundError",
    "DocumentClient",
    "DocumentParseError",
    "NextBusError",
    "Prediction",
    "Route",
    "RouteDetail",
    "ServiceError",
    "Stop",
    "TransitDirectory",
]
