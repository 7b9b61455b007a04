"""Agency domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agency:
    """Represents a transit operator served by the prediction service."""

    tag: str
    title: str
    region_title: str = ""
    short_title: str | None = None
