"""Constants for the NextBus adapter.

Uses the NextBus public XML feed.
API Documentation: https://retro.umoiq.com/xmlFeedDocs/NextBusXMLFeed.pdf

No authentication required.
"""

from enum import StrEnum

# Single endpoint; the command query parameter selects the operation
WEB_SERVICES_URI = "http://webservices.nextbus.com/service/publicXMLFeed"


class Command(StrEnum):
    """Commands understood by the web service."""

    AGENCY_LIST = "agencyList"
    ROUTE_LIST = "routeList"
    ROUTE_CONFIG = "routeConfig"
    PREDICTIONS = "predictions"
    PREDICTIONS_FOR_MULTI_STOPS = "predictionsForMultiStops"
    SCHEDULE = "schedule"
    MESSAGES = "messages"
    VEHICLE_LOCATIONS = "vehicleLocations"


# Query parameter names
PARAM_COMMAND = "command"
PARAM_AGENCY = "a"
PARAM_ROUTE = "r"
PARAM_STOP = "s"
PARAM_SINCE = "t"  # vehicleLocations: epoch ms of the last poll

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/xml",
}

# Key under which element text is kept when the element also has attributes or children
TEXT_KEY = "_text"

# In-band error report element
ERROR_ELEMENT = "Error"
