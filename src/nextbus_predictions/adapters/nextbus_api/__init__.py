"""NextBus XML feed adapters."""

from nextbus_predictions.adapters.nextbus_api.constants import WEB_SERVICES_URI, Command
from nextbus_predictions.adapters.nextbus_api.http_client import NextBusHttpClient
from nextbus_predictions.adapters.nextbus_api.normalizer import parse_document, to_list
from nextbus_predictions.adapters.nextbus_api.transit_directory_resolver import (
    TransitDirectoryResolver,
)

__all__ = [
    "Command",
    "NextBusHttpClient",
    "TransitDirectoryResolver",
    "WEB_SERVICES_URI",
    "parse_document",
    "to_list",
]
