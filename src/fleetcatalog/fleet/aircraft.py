"""Aircraft records for the fleet catalog.

Every aircraft is a single immutable record tagged with its kind. Kinds
differ only in their display label and in the preset values used when a
caller does not supply capacity, range or fuel consumption.

Typical usage:
    from fleetcatalog.fleet.aircraft import Aircraft, AircraftKind

    jet = Aircraft(AircraftKind.PRIVATE, capacity=10, flight_range_km=6000,
                   fuel_consumption_per_100km=20)
    print(jet.describe())
"""

from dataclasses import dataclass
from enum import Enum


class AircraftKind(Enum):
    """Closed set of aircraft categories.

    The value is the lowercase selector accepted by the factory.
    """

    PASSENGER = "passenger"
    CARGO = "cargo"
    PRIVATE = "private"

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return _LABELS[self]


_LABELS = {
    AircraftKind.PASSENGER: "Passenger plane",
    AircraftKind.CARGO: "Cargo plane",
    AircraftKind.PRIVATE: "Private jet",
}


@dataclass(frozen=True)
class Aircraft:
    """A single aircraft in a fleet.

    Instances are flat values: fields are fixed at construction. Two
    aircraft with identical fields are equal but remain separate fleet
    members when both are added.

    Attributes:
        kind: Aircraft category.
        capacity: Passenger seats, or cargo mass units for cargo planes.
        flight_range_km: Maximum range in kilometres.
        fuel_consumption_per_100km: Fuel burned per 100 km.

    Examples:
        >>> liner = Aircraft(AircraftKind.PASSENGER, 180, 5000, 8.5)
        >>> liner.label
        'Passenger plane'
    """

    kind: AircraftKind
    capacity: int
    flight_range_km: float
    fuel_consumption_per_100km: float

    @property
    def label(self) -> str:
        return self.kind.label

    def describe(self) -> str:
        """Format the aircraft as one report line.

        Returns:
            Line with label, capacity, range and fuel consumption.
        """
        return (
            f"{self.label}: capacity {self.capacity}, "
            f"range {self.flight_range_km:g} km, "
            f"fuel {self.fuel_consumption_per_100km:g} per 100 km"
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Preset:
    """Default capacity, range and fuel consumption for one kind."""

    capacity: int
    flight_range_km: float
    fuel_consumption_per_100km: float


PRESETS: dict[AircraftKind, Preset] = {
    AircraftKind.PASSENGER: Preset(180, 5000.0, 8.5),
    AircraftKind.CARGO: Preset(50000, 4000.0, 12.0),
    AircraftKind.PRIVATE: Preset(10, 3000.0, 5.5),
}
