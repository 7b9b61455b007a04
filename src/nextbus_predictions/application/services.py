"""Application services (use cases) for prediction lookups."""

import logging
from typing import TYPE_CHECKING

from nextbus_predictions.domain.models import Prediction, Selection

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nextbus_predictions.domain.ports import ChoicePrompt, TransitDirectory


def format_minutes(predictions: list[Prediction]) -> str:
    """Summarize predictions as a single line for the terminal."""
    if not predictions:
        return "None in transit"
    return "Minutes remaining: " + ", ".join(str(p.minutes) for p in predictions)


class PredictionLookupService:
    """Walks agency, route, direction and stop, then fetches predictions.

    Each step lists its choices from the directory and asks the prompt,
    unless the tag for that step was supplied up front.
    """

    def __init__(self, directory: "TransitDirectory", prompt: "ChoicePrompt") -> None:
        """Initialize with the directory to browse and the prompt to ask."""
        self._directory = directory
        self._prompt = prompt

    async def _choose_agency(self) -> str:
        agencies = await self._directory.list_agencies()
        return self._prompt.choose(
            "Choose a transit agency",
            [(f"{agency.title} ({agency.tag})", agency.tag) for agency in agencies],
        )

    async def _choose_route(self, agency_tag: str) -> str:
        routes = await self._directory.list_routes(agency_tag)
        return self._prompt.choose("Choose a route", [(r.title, r.tag) for r in routes])

    async def _choose_direction(self, agency_tag: str, route_tag: str) -> str:
        directions = await self._directory.list_directions_for_route(agency_tag, route_tag)
        # Directions flagged useForUI=false are branches riders should not pick
        visible = [d for d in directions if d.use_for_ui] or directions
        return self._prompt.choose("Choose a direction", [(d.title, d.tag) for d in visible])

    async def _choose_stop(self, agency_tag: str, route_tag: str, direction_tag: str) -> str:
        stops = await self._directory.list_stops_for_direction(
            agency_tag, route_tag, direction_tag
        )
        return self._prompt.choose("Choose a stop", [(s.title, s.tag) for s in stops])

    async def select(
        self,
        agency: str | None = None,
        route: str | None = None,
        direction: str | None = None,
        stop: str | None = None,
    ) -> Selection:
        """Resolve a full selection, prompting only for the missing tags."""
        agency_tag = agency or await self._choose_agency()
        route_tag = route or await self._choose_route(agency_tag)
        direction_tag = direction or await self._choose_direction(agency_tag, route_tag)
        stop_tag = stop or await self._choose_stop(agency_tag, route_tag, direction_tag)

        logger.debug(f"Selected {agency_tag}/{route_tag}/{direction_tag}/{stop_tag}")
        return Selection(
            agency_tag=agency_tag,
            route_tag=route_tag,
            direction_tag=direction_tag,
            stop_tag=stop_tag,
        )

    async def lookup(
        self,
        agency: str | None = None,
        route: str | None = None,
        direction: str | None = None,
        stop: str | None = None,
    ) -> tuple[Selection, list[Prediction]]:
        """Resolve a selection and fetch the predictions for its direction."""
        selection = await self.select(agency, route, direction, stop)
        predictions = await self._directory.get_stop_predictions_for_direction(
            selection.agency_tag,
            selection.route_tag,
            selection.stop_tag,
            selection.direction_tag,
        )
        return selection, predictions
