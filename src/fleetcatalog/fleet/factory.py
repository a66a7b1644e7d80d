"""Aircraft factory.

Maps a kind selector to a constructed Aircraft. Selectors are either an
AircraftKind or a string matched case-insensitively against the kind
values ("passenger", "cargo", "private").

Typical usage:
    from fleetcatalog.fleet.factory import create_aircraft

    liner = create_aircraft("Passenger")  # preset values
    freighter = create_aircraft("cargo", capacity=60000)  # preset range and fuel
"""

from fleetcatalog.core.logging_system import get_logger
from fleetcatalog.fleet.aircraft import PRESETS, Aircraft, AircraftKind, Preset

logger = get_logger(__name__)


class FleetError(Exception):
    """Base class for fleet catalog errors."""


class UnknownAircraftKindError(FleetError, ValueError):
    """Raised when a selector names no known aircraft kind.

    Attributes:
        selector: The selector that failed to match.
    """

    def __init__(self, selector: object) -> None:
        self.selector = selector
        known = ", ".join(kind.value for kind in AircraftKind)
        super().__init__(f"Unknown aircraft kind: {selector!r} (expected one of: {known})")


def resolve_kind(selector: str | AircraftKind) -> AircraftKind:
    """Resolve a selector to an AircraftKind.

    Args:
        selector: Kind enum member or its name in any letter case.

    Returns:
        The matching AircraftKind.

    Raises:
        UnknownAircraftKindError: If nothing matches.
    """
    if isinstance(selector, AircraftKind):
        return selector

    if isinstance(selector, str):
        try:
            return AircraftKind(selector.lower())
        except ValueError:
            pass

    logger.warning("Rejected aircraft kind selector: %r", selector)
    raise UnknownAircraftKindError(selector)


def preset_for(selector: str | AircraftKind) -> Preset:
    """Get the preset values for a kind.

    Raises:
        UnknownAircraftKindError: If the selector matches no kind.
    """
    return PRESETS[resolve_kind(selector)]


def create_aircraft(
    selector: str | AircraftKind,
    capacity: int | None = None,
    flight_range_km: float | None = None,
    fuel_consumption_per_100km: float | None = None,
) -> Aircraft:
    """Create an aircraft of the selected kind.

    Supplied values are used as-is, without range checks. Each omitted
    value falls back to the kind's preset.

    Args:
        selector: Kind enum member or case-insensitive kind name.
        capacity: Seats or cargo mass units.
        flight_range_km: Range in kilometres.
        fuel_consumption_per_100km: Fuel burned per 100 km.

    Returns:
        New Aircraft instance.

    Raises:
        UnknownAircraftKindError: If the selector matches no kind.

    Examples:
        >>> create_aircraft("private").capacity
        10
        >>> create_aircraft("PASSENGER", 200, 5000, 30).fuel_consumption_per_100km
        30
    """
    kind = resolve_kind(selector)
    preset = PRESETS[kind]

    aircraft = Aircraft(
        kind=kind,
        capacity=preset.capacity if capacity is None else capacity,
        flight_range_km=preset.flight_range_km if flight_range_km is None else flight_range_km,
        fuel_consumption_per_100km=(
            preset.fuel_consumption_per_100km
            if fuel_consumption_per_100km is None
            else fuel_consumption_per_100km
        ),
    )

    logger.debug("Created %s", aircraft)
    return aircraft
