"""Adapters layer - external system integrations."""

from nextbus_predictions.adapters.config import AppConfig
from nextbus_predictions.adapters.console import ConsolePrompt
from nextbus_predictions.adapters.nextbus_api import (
    NextBusHttpClient,
    TransitDirectoryResolver,
)

__all__ = [
    "AppConfig",
    "ConsolePrompt",
    "NextBusHttpClient",
    "TransitDirectoryResolver",
]
