"""Fleet catalog demonstration entry point.

Builds one of the configured fleet scenarios, prints it as built, sorts it
by range and prints it again, then prints the aircraft whose fuel
consumption falls inside the scenario's filter bounds.

Typical usage:
    python -m fleetcatalog.main
    python -m fleetcatalog.main --scenario preset
    python -m fleetcatalog.main --config config/fleet.yaml --min-fuel 5 --max-fuel 9
"""

import argparse
import sys
from typing import TextIO

from fleetcatalog.core.config import ConfigError, ConfigLoader
from fleetcatalog.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    set_console_level,
)
from fleetcatalog.fleet.builder import FleetBuilder
from fleetcatalog.fleet.collection import Fleet
from fleetcatalog.fleet.factory import FleetError
from fleetcatalog.fleet.shared import reset_shared_fleet, shared_fleet

logger = get_logger(__name__)


def build_scenario_fleet(config: ConfigLoader, name: str) -> Fleet:
    """Build the fleet described by a named scenario.

    Scenarios marked ``shared`` are built into the process-wide shared
    fleet, which is emptied first; others produce a caller-owned fleet.

    Args:
        config: Loaded configuration.
        name: Scenario name under ``scenarios``.

    Returns:
        The built fleet.

    Raises:
        ConfigError: If the scenario is missing or malformed.
        UnknownAircraftKindError: If an entry names an unknown kind.
    """
    scenario = config.get_section(f"scenarios.{name}")
    entries = scenario.get("aircraft", [])

    target = None
    if scenario.get("shared", False):
        reset_shared_fleet()
        target = shared_fleet()

    return FleetBuilder.from_config(entries, target=target).build()


def _fuel_bound(config: ConfigLoader, name: str, key: str, default: float) -> float:
    """Read one fuel filter bound of a scenario.

    Raises:
        ConfigError: If the bound is present but not a number.
    """
    value = config.get(f"scenarios.{name}.fuel_filter.{key}", default)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ConfigError(f"Scenario '{name}' has invalid fuel_filter.{key}: {value!r}")
    return value


def run_scenario(
    config: ConfigLoader,
    name: str,
    min_fuel: float | None = None,
    max_fuel: float | None = None,
    out: TextIO | None = None,
) -> Fleet:
    """Build a scenario fleet and print its three reports.

    Args:
        config: Loaded configuration.
        name: Scenario name under ``scenarios``.
        min_fuel: Lower fuel bound, overriding the scenario's ``fuel_filter.min``.
        max_fuel: Upper fuel bound, overriding the scenario's ``fuel_filter.max``.
        out: Stream for the report (defaults to stdout).

    Returns:
        The fleet, left sorted by range.
    """
    out = out or sys.stdout

    if min_fuel is None:
        min_fuel = _fuel_bound(config, name, "min", 0)
    if max_fuel is None:
        max_fuel = _fuel_bound(config, name, "max", float("inf"))

    fleet = build_scenario_fleet(config, name)
    title = config.get(f"scenarios.{name}.title", name)

    print(f"=== {title} ===", file=out)
    print(fleet.format_report("As built"), file=out)
    print(f"Total capacity: {fleet.total_capacity()}", file=out)

    fleet.sort_by_range_descending()
    print(fleet.format_report("Sorted by range (descending)"), file=out)

    matches = Fleet(fleet.find_by_fuel_consumption(min_fuel, max_fuel))
    logger.info("%d of %d aircraft within fuel bounds [%s, %s]", len(matches), len(fleet), min_fuel, max_fuel)
    print(matches.format_report(f"Fuel consumption between {min_fuel:g} and {max_fuel:g} per 100 km"), file=out)

    return fleet


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Fleet catalog - build and query an airline fleet")

    parser.add_argument(
        "--scenario",
        default="configured",
        help="Scenario to run (built-in: configured, preset)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="YAML file merged over the built-in scenarios",
    )

    parser.add_argument(
        "--min-fuel",
        type=float,
        help="Lower fuel consumption bound per 100 km",
    )

    parser.add_argument(
        "--max-fuel",
        type=float,
        help="Upper fuel consumption bound per 100 km",
    )

    parser.add_argument(
        "--log-config",
        type=str,
        help="Logging configuration YAML file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.log_config)
        if args.verbose:
            set_console_level("DEBUG")

        config = ConfigLoader.defaults()
        if args.config:
            config.merge(ConfigLoader.load(args.config))

        run_scenario(config, args.scenario, args.min_fuel, args.max_fuel)
        return 0
    except (FleetError, ConfigError, LoggingError) as e:
        logger.error("%s", e)
        return 1
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
