"""
Command line entry point for the Amtraker client.

This module sets up logging, resolves the configuration and runs one query
against the API, printing a short text summary.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .api.amtrak_api_manager import AmtrakAPIException, AmtrakAPIFactory, AmtrakClient
from .managers.config_manager import (
    AmtrakerConfig,
    AmtrakerConfigFactory,
    ConfigManager,
    ConfigurationError,
)
from .models.train_data import Train, TrainStatus
from .version import __description__, get_version_text

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    TrainStatus.ENROUTE: "Train {train_id} is enroute to {name} station",
    TrainStatus.STATION: "Train {train_id} is currently at {name} station",
    TrainStatus.DEPARTED: "Train {train_id} has departed {name} station",
    TrainStatus.UNKNOWN: "The status of train {train_id} at {name} station is unknown",
}


def setup_logging(verbose: bool = False) -> None:
    """Setup console logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("amtraker").setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="amtraker",
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=get_version_text())
    p.add_argument("--base-url", help="Override the API base URL")
    p.add_argument("--config", help="Path to a JSON configuration file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="command", required=True)

    trains = sub.add_parser("trains", help="List tracked trains")
    trains.add_argument("--route", help="Only show trains on this route, e.g. Keystone")

    train = sub.add_parser("train", help="Show one train by id or number")
    train.add_argument("train_id", help="Train id such as 612-5 or number such as 612")
    train.add_argument("--station", help="Report the train status at this station code")

    stations = sub.add_parser("stations", help="List stations")
    stations.add_argument("--state", help="Only show stations in this state, e.g. PA")

    station = sub.add_parser("station", help="Show one station by code")
    station.add_argument("station_code", help="Station code such as PHL")

    return p


def resolve_config(args: argparse.Namespace) -> AmtrakerConfig:
    """Build the client configuration from the file and command line options."""
    if args.config:
        config = ConfigManager(args.config).load_config()
    else:
        config = AmtrakerConfigFactory.create_default_config()

    if args.base_url:
        try:
            config = AmtrakerConfigFactory.create_custom_config(
                args.base_url,
                timeout_seconds=config.timeout_seconds,
                user_agent=config.user_agent,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid base URL: {e}")
    return config


def describe_train_at_station(train: Train, station_code: str) -> str:
    """Describe where a train is relative to one of its stations."""
    station = train.find_station(station_code)
    if station is None:
        return f'{station_code} station was not found in the "{train.train_id}" route'
    return STATUS_MESSAGES[station.status].format(
        train_id=train.train_id, name=station.name
    )


async def run_command(client: AmtrakClient, args: argparse.Namespace) -> List[str]:
    """Run the selected query and return the lines to print."""
    if args.command == "trains":
        response = await client.trains()
        if args.route:
            trains = response.trains_on_route(args.route)
        else:
            trains = response.all_trains()
        return [train.format_next_stop() for train in trains]

    if args.command == "train":
        response = await client.train(args.train_id)
        if not response:
            return [f'Train "{args.train_id}" is not currently in the Amtrak network']
        trains = response.all_trains()
        if not trains:
            return [f'Train "{args.train_id}" response was empty']
        if args.station:
            return [describe_train_at_station(train, args.station) for train in trains]
        return [train.format_next_stop() for train in trains]

    if args.command == "stations":
        response = await client.stations()
        if args.state:
            stations = response.stations_in_state(args.state)
        else:
            stations = list(response.values())
        return [f'Station "{station.name}" ({station.code}) is in {station.state}' for station in stations]

    if args.command == "station":
        response = await client.station(args.station_code)
        if not response:
            return [f'Station "{args.station_code}" was not found']
        return [
            f'Current train scheduled for station "{station.name}": {station.format_trains()}'
            for station in response.values()
        ]

    raise ValueError(f"Unknown command: {args.command}")


async def _run(config: AmtrakerConfig, args: argparse.Namespace) -> List[str]:
    async with AmtrakAPIFactory.create_client(config) as client:
        return await run_command(client, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger.debug(f"Running {args.command} command")

    try:
        config = resolve_config(args)
        lines = asyncio.run(_run(config, args))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except (AmtrakAPIException, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
