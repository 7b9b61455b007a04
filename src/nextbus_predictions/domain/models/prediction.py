"""Prediction domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prediction:
    """A real-time arrival estimate for a stop."""

    minutes: int
    seconds: int
    epoch_time: int  # Milliseconds since the epoch
    direction_tag: str
    direction_title: str = ""
    trip_tag: str | None = None
    vehicle: str | None = None
    block: str | None = None
    is_departure: bool = False
    affected_by_layover: bool = False
    is_schedule_based: bool = False
    delayed: bool = False
