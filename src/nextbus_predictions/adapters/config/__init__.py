"""Configuration adapters."""

from nextbus_predictions.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
