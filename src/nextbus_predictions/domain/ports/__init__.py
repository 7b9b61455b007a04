"""Ports (interfaces) for the ports-and-adapters architecture."""

from nextbus_predictions.domain.ports.choice_prompt import ChoicePrompt
from nextbus_predictions.domain.ports.document_client import DocumentClient
from nextbus_predictions.domain.ports.transit_directory import TransitDirectory

__all__ = [
    "ChoicePrompt",
    "DocumentClient",
    "TransitDirectory",
]
