"""Command line interface for inspecting a configured subway network."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from subway_network.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_network.adapters.memory import (
    InMemoryLineRepository,
    InMemorySectionRepository,
    InMemoryStationRepository,
)
from subway_network.application.results import capture
from subway_network.application.services import (
    FareService,
    LineService,
    SectionService,
    StationService,
)
from subway_network.domain.errors import SectionNotConnectableError, SubwayError
from subway_network.domain.models import (
    Line,
    LineConfiguration,
    NetworkConfiguration,
    distance_fare,
)

logger = logging.getLogger(__name__)


class Network:
    """Services wired to a fresh set of in-memory repositories."""

    def __init__(self) -> None:
        """Create the repositories and the services using them."""
        section_repository = InMemorySectionRepository()
        station_repository = InMemoryStationRepository()
        line_repository = InMemoryLineRepository(section_repository)

        self.stations = StationService(station_repository)
        self.lines = LineService(line_repository, section_repository, station_repository)
        self.sections = SectionService(line_repository, section_repository, station_repository)
        self.fares = FareService()


async def _build_line(
    network: Network, line_config: LineConfiguration, station_ids: dict[str, int]
) -> Line:
    """Create a line from its configuration.

    Sections may be listed in any order; a section that does not connect yet is
    retried after the others until a full pass makes no progress.
    """
    first, *pending = line_config.sections
    line = await network.lines.create(
        name=line_config.name,
        color=line_config.color,
        up_station_id=station_ids[first.up],
        down_station_id=station_ids[first.down],
        distance_meters=first.distance,
        extra_fare=line_config.extra_fare,
    )
    line_id = line.saved_id

    while pending:
        not_connected = []
        for section in pending:
            result = await capture(
                network.sections.add(
                    line_id, station_ids[section.up], station_ids[section.down], section.distance
                )
            )
            error = result.error
            if error is None:
                continue
            if error.code != SectionNotConnectableError.code:
                raise ValueError(
                    f"Line '{line_config.name}': cannot add {section.up} -> {section.down}: "
                    f"{error.reason}"
                )
            not_connected.append(section)

        if len(not_connected) == len(pending):
            names = ", ".join(f"{s.up} -> {s.down}" for s in not_connected)
            raise ValueError(f"Line '{line_config.name}': sections never connect: {names}")
        pending = not_connected

    return await network.lines.find_by_id(line_id)


async def build_network(config: NetworkConfiguration) -> tuple[Network, list[Line]]:
    """Load a network configuration into in-memory repositories."""
    network = Network()
    station_ids: dict[str, int] = {}
    for name in config.station_names:
        station = await network.stations.create(name)
        station_ids[name] = station.saved_id

    lines = [await _build_line(network, line_config, station_ids) for line_config in config.lines]
    logger.info(f"Built {len(lines)} line(s) over {len(station_ids)} station(s)")
    return network, lines


def describe_line(line: Line, fare_service: FareService) -> dict[str, Any]:
    """Summarize a line for display."""
    distance = line.total_distance()
    fare = fare_service.end_to_end(line)
    return {
        "id": line.id,
        "name": line.name,
        "color": line.color,
        "extra_fare": line.extra_fare.value,
        "stations": [station.name for station in line.stations],
        "sections": [
            {"up": s.up.name, "down": s.down.name, "distance": s.distance.meters}
            for s in line.sections
        ],
        "distance_km": distance.kilometers if distance else 0.0,
        "fare": fare.value if fare else None,
    }


def _print_line(summary: dict[str, Any]) -> None:
    print(f"\n{summary['name']} ({summary['color']})")
    print(f"  {' - '.join(summary['stations'])}")
    print(f"  Distance: {summary['distance_km']:.3f} km")
    print(f"  End-to-end fare: {summary['fare']} (extra fare {summary['extra_fare']})")


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Subway network helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fare for a 12.5 km trip
  subway-network fare 12.5

  # Show the lines of the configured network
  subway-network show --config network.example.toml
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Fare command
    fare_parser = subparsers.add_parser("fare", help="Calculate the fare for a distance")
    fare_parser.add_argument("distance", type=float, help="Distance in kilometers")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show the configured lines")
    show_parser.add_argument("--config", help="Network TOML file (defaults to NETWORK_FILE)")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        app_config = AppConfig()
        app_config.configure_logging()

        if args.command == "fare":
            print(distance_fare.calculate(args.distance).value)

        elif args.command == "show":
            if args.config:
                app_config.network_file = args.config
            network_config = NetworkConfigurationLoader.load(app_config)
            network, lines = await build_network(network_config)
            summaries = [describe_line(line, network.fares) for line in lines]
            if args.json:
                print(json.dumps(summaries, indent=2, ensure_ascii=False))
            else:
                if not summaries:
                    print("No lines configured.", file=sys.stderr)
                    sys.exit(1)
                for summary in summaries:
                    _print_line(summary)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (SubwayError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
