"""Application layer - use cases."""

from nextbus_predictions.application.services import PredictionLookupService, format_minutes

__all__ = ["PredictionLookupService", "format_minutes"]
