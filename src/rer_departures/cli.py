"""Command line access to the schedule: station search, departures and journeys."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import aiohttp

from rer_departures.adapters.config import AppConfig
from rer_departures.adapters.navitia_api import (
    MissingCredentialsError,
    NavitiaApiError,
    adapt_payload,
)
from rer_departures.application.services import JourneyNormalizer
from rer_departures.bootstrap import build_schedule_service
from rer_departures.domain.models import NormalizedDeparture


def format_record(record: NormalizedDeparture) -> str:
    """Format one record as a single line, e.g. '14:30  VICK  Versailles  +5 min'."""
    if record.delay_minutes > 0:
        status = f"+{record.delay_minutes} min"
    elif record.has_realtime:
        status = "à l'heure"
    else:
        status = ""
    arrival = f" -> {record.arrival_time}" if record.arrival_time else ""
    line = f"{record.departure_time}{arrival}  {record.mission:<6}  {record.destination}  {status}"
    return line.rstrip()


def print_records(records: list[NormalizedDeparture], as_json: bool) -> None:
    """Print records as JSON or as one line each."""
    if as_json:
        print(
            json.dumps(
                [record.model_dump(mode="json") for record in records], indent=2, ensure_ascii=False
            )
        )
        return
    if not records:
        print("No trains found.", file=sys.stderr)
        return
    for record in records:
        print(format_record(record))


def normalize_file(path: str, config: AppConfig) -> list[NormalizedDeparture]:
    """Normalize a saved Navitia response (journeys or departures shape)."""
    payload: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    normalizer = JourneyNormalizer(config.to_line_configuration())
    return normalizer.normalize(adapt_payload(payload))


async def run_command(args: Any, config: AppConfig) -> None:
    """Run a subcommand that needs the Navitia API."""
    async with aiohttp.ClientSession() as session:
        service = build_schedule_service(config, session)

        if args.command == "search":
            stations = await service.search_stations(args.query)
            if args.json:
                print(
                    json.dumps(
                        [{"id": s.id, "name": s.name} for s in stations],
                        indent=2,
                        ensure_ascii=False,
                    )
                )
                return
            if not stations:
                print(f"No stations found for '{args.query}'", file=sys.stderr)
                sys.exit(1)
            print(f"\nFound {len(stations)} station(s):\n")
            for station in stations:
                print(f"  {station.name}")
                print(f"    ID: {station.id}")
                print()

        elif args.command == "departures":
            print_records(await service.get_departures(args.stop_area), args.json)

        elif args.command == "journeys":
            print_records(
                await service.get_journeys(args.origin, args.destination, args.count), args.json
            )


def build_parser() -> Any:
    """Build the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="RER departures from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  rer-departures search "Versailles"

  # Next departures at the default origin
  rer-departures departures

  # Journeys between two stop areas
  rer-departures journeys stop_area:SNCF:87758011 stop_area:SNCF:87393843

  # Normalize a saved Navitia response
  rer-departures normalize response.json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Next departures of the line")
    departures_parser.add_argument(
        "stop_area", nargs="?", default=None, help="Stop area ID (default: configured origin)"
    )
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    journeys_parser = subparsers.add_parser("journeys", help="Journeys between two stop areas")
    journeys_parser.add_argument("origin", nargs="?", default=None, help="Origin stop area ID")
    journeys_parser.add_argument(
        "destination", nargs="?", default=None, help="Destination stop area ID"
    )
    journeys_parser.add_argument("--count", type=int, default=None, help="Number of journeys")
    journeys_parser.add_argument("--json", action="store_true", help="Output as JSON")

    normalize_parser = subparsers.add_parser(
        "normalize", help="Normalize a saved Navitia response file"
    )
    normalize_parser.add_argument("path", help="Path to a JSON response")
    normalize_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        if args.command == "normalize":
            print_records(normalize_file(args.path, config), args.json)
        else:
            await run_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except MissingCredentialsError:
        print("Error: set NAVITIA_API_KEY (or SNCF_API_KEY) first.", file=sys.stderr)
        sys.exit(2)
    except NavitiaApiError as e:
        print(f"Error: Navitia API unavailable: {e}", file=sys.stderr)
        sys.exit(3)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
