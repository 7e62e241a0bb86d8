"""Interactive command-line entry point.

Loads the three datasets once, then repeatedly asks for two countries
and prints the cheapest border-to-border route between them until the
user types EXIT.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import ValidationError

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, RoadTripError
from .services import RoadTripService

EXIT_COMMAND = "EXIT"

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="iroadtrip",
        description="Cheapest land route between two countries",
    )
    parser.add_argument(
        "borders",
        nargs="?",
        help="Border-adjacency file (default: borders.txt in the data directory)",
    )
    parser.add_argument(
        "capdist",
        nargs="?",
        help="Capital-distance CSV file (default: capdist.csv in the data directory)",
    )
    parser.add_argument(
        "state_name",
        nargs="?",
        help="Country-identity TSV file (default: state_name.tsv in the data dir)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from IRT_LOG_LEVEL)",
    )
    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Apply command-line dataset paths and log level on top of the environment.

    Raises:
        ConfigurationError: If the environment or the arguments hold invalid
            settings.
    """
    try:
        config = get_config()
        if args.log_level:
            observability = ObservabilityConfig(level=args.log_level)
            config = config.model_copy(update={"observability": observability})
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", cause=e)

    overrides = {
        name: str(Path(value).resolve())
        for name, value in (
            ("borders_file", args.borders),
            ("capdist_file", args.capdist),
            ("state_name_file", args.state_name),
        )
        if value
    }
    if not overrides:
        return config

    datasets = config.datasets.model_copy(update=overrides)
    return config.model_copy(update={"datasets": datasets})


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )


def prompt_country(
    label: str,
    service: RoadTripService,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> Optional[str]:
    """Ask until a known country is entered; None means the user quit."""
    while True:
        try:
            answer = input_fn(
                f"Enter the name of the {label} country (type {EXIT_COMMAND} to quit): "
            ).strip()
        except EOFError:
            return None

        if answer.upper() == EXIT_COMMAND:
            return None
        if service.is_valid_country(answer):
            return answer
        print_fn("Invalid country name. Please enter a valid country name.")
        suggestion = service.suggest_country(answer)
        if suggestion:
            print_fn(f"Did you mean {suggestion}?")


def run_interactive(
    service: RoadTripService,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> None:
    """Serve route queries until the user types EXIT."""
    while True:
        origin = prompt_country("first", service, input_fn, print_fn)
        if origin is None:
            return
        destination = prompt_country("second", service, input_fn, print_fn)
        if destination is None:
            return

        route = service.shortest_path(origin, destination)
        print_fn(service.format_result(route))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        configure_logging(config)
        service = Container.create_default(config).resolve(RoadTripService)
    except RoadTripError as e:
        logger.error("Startup failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_interactive(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
