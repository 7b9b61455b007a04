"""NextBus real-time prediction client."""

__version__ = "0.1.0"
