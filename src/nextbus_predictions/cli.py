"""Command line interface for NextBus predictions."""

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable
from dataclasses import asdict
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp

from nextbus_predictions.adapters.config import AppConfig
from nextbus_predictions.adapters.console import ConsolePrompt
from nextbus_predictions.adapters.nextbus_api import NextBusHttpClient, TransitDirectoryResolver
from nextbus_predictions.application.services import PredictionLookupService, format_minutes
from nextbus_predictions.domain.errors import NextBusError

if TYPE_CHECKING:
    from argparse import Namespace

    from nextbus_predictions.domain.models import Agency, Direction, Prediction, Route, Stop
    from nextbus_predictions.domain.ports import TransitDirectory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _TimedDirectory:
    """Bounds every directory call by a timeout; prompts in between are not timed."""

    def __init__(self, directory: "TransitDirectory", timeout_seconds: float) -> None:
        self._directory = directory
        self._timeout_seconds = timeout_seconds

    async def _timed(self, call: Awaitable[T]) -> T:
        return await asyncio.wait_for(call, timeout=self._timeout_seconds)

    async def list_agencies(self) -> list["Agency"]:
        return await self._timed(self._directory.list_agencies())

    async def list_routes(self, agency_tag: str) -> list["Route"]:
        return await self._timed(self._directory.list_routes(agency_tag))

    async def list_directions_for_route(
        self, agency_tag: str, route_tag: str
    ) -> list["Direction"]:
        return await self._timed(self._directory.list_directions_for_route(agency_tag, route_tag))

    async def list_stops_for_route(self, agency_tag: str, route_tag: str) -> list["Stop"]:
        return await self._timed(self._directory.list_stops_for_route(agency_tag, route_tag))

    async def list_stops_for_direction(
        self, agency_tag: str, route_tag: str, direction_tag: str
    ) -> list["Stop"]:
        return await self._timed(
            self._directory.list_stops_for_direction(agency_tag, route_tag, direction_tag)
        )

    async def get_stop_predictions_for_direction(
        self, agency_tag: str, route_tag: str, stop_tag: str, direction_tag: str
    ) -> list["Prediction"]:
        return await self._timed(
            self._directory.get_stop_predictions_for_direction(
                agency_tag, route_tag, stop_tag, direction_tag
            )
        )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _print_json(items: Any) -> None:
    print(json.dumps(items, indent=2, ensure_ascii=False))


def _print_choices(entries: list[Any], output_json: bool) -> None:
    """Print tag/title entries as JSON or as an aligned table."""
    if output_json:
        _print_json([asdict(entry) for entry in entries])
        return

    if not entries:
        print("Nothing found.", file=sys.stderr)
        return

    width = max(len(entry.tag) for entry in entries)
    for entry in entries:
        print(f"  {entry.tag:<{width}}  {entry.title}")


async def _run_predict(
    directory: "TransitDirectory", config: AppConfig, args: "Namespace"
) -> None:
    """Handle the predict command."""
    service = PredictionLookupService(directory, ConsolePrompt())
    selection, predictions = await service.lookup(
        agency=args.agency or config.agency,
        route=args.route or config.route,
        direction=args.direction or config.direction,
        stop=args.stop or config.stop,
    )

    if args.json:
        _print_json(
            {
                "selection": asdict(selection),
                "predictions": [asdict(prediction) for prediction in predictions],
            }
        )
    else:
        print(format_minutes(predictions))


async def _run_command(
    directory: "TransitDirectory", config: AppConfig, args: "Namespace"
) -> None:
    """Dispatch a parsed command to the resolver."""
    if args.command == "agencies":
        _print_choices(await directory.list_agencies(), args.json)

    elif args.command == "routes":
        _print_choices(await directory.list_routes(args.agency), args.json)

    elif args.command == "directions":
        directions = await directory.list_directions_for_route(args.agency, args.route)
        _print_choices(directions, args.json)

    elif args.command == "stops":
        if args.direction:
            stops = await directory.list_stops_for_direction(
                args.agency, args.route, args.direction
            )
        else:
            stops = await directory.list_stops_for_route(args.agency, args.route)
        _print_choices(stops, args.json)

    elif args.command == "predict":
        await _run_predict(directory, config, args)


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="NextBus real-time predictions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pick agency, route, direction and stop interactively
  nextbus-predictions predict

  # Skip the prompts you already know the answer to
  nextbus-predictions predict --agency sf-muni --route N

  # Browse the directory
  nextbus-predictions agencies
  nextbus-predictions routes sf-muni
  nextbus-predictions directions sf-muni N
  nextbus-predictions stops sf-muni N --direction N____O_F00
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    agencies_parser = subparsers.add_parser("agencies", help="List transit agencies")
    agencies_parser.add_argument("--json", action="store_true", help="Output as JSON")

    routes_parser = subparsers.add_parser("routes", help="List routes of an agency")
    routes_parser.add_argument("agency", help="Agency tag (e.g., sf-muni)")
    routes_parser.add_argument("--json", action="store_true", help="Output as JSON")

    directions_parser = subparsers.add_parser("directions", help="List directions of a route")
    directions_parser.add_argument("agency", help="Agency tag")
    directions_parser.add_argument("route", help="Route tag")
    directions_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stops_parser = subparsers.add_parser("stops", help="List stops of a route or direction")
    stops_parser.add_argument("agency", help="Agency tag")
    stops_parser.add_argument("route", help="Route tag")
    stops_parser.add_argument("--direction", help="Only stops served by this direction tag")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    predict_parser = subparsers.add_parser(
        "predict", help="Show arrival predictions, prompting for anything not given"
    )
    predict_parser.add_argument("--agency", help="Agency tag")
    predict_parser.add_argument("--route", help="Route tag")
    predict_parser.add_argument("--direction", help="Direction tag")
    predict_parser.add_argument("--stop", help="Stop tag")
    predict_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    _configure_logging(config.log_level)

    try:
        async with aiohttp.ClientSession() as session:
            logger.debug(f"Using NextBus endpoint {config.base_url}")
            client = NextBusHttpClient(session=session, base_url=config.base_url)
            directory = _TimedDirectory(
                TransitDirectoryResolver(client), config.request_timeout_seconds
            )
            await _run_command(directory, config, args)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except EOFError:
        print("\nNo input left to answer the prompt.", file=sys.stderr)
        sys.exit(1)
    except TimeoutError:
        print(
            f"Error: no answer within {config.request_timeout_seconds:g} seconds",
            file=sys.stderr,
        )
        sys.exit(1)
    except (NextBusError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
