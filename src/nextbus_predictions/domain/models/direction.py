"""Direction domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StopRef:
    """Reference to a stop in the route's master stop list."""

    tag: str


@dataclass(frozen=True)
class Direction:
    """One travel direction of a route and the ordered stops it serves."""

    tag: str
    title: str
    name: str = ""
    use_for_ui: bool = True
    stop_refs: list[StopRef] = field(default_factory=list)
