"""Fleet domain package.

Typical usage:
    from fleetcatalog.fleet import FleetBuilder, create_aircraft

    fleet = FleetBuilder().add(create_aircraft("private")).add_many("cargo", 2).build()
    print(fleet.total_capacity())
"""

from fleetcatalog.fleet.aircraft import PRESETS, Aircraft, AircraftKind, Preset
from fleetcatalog.fleet.builder import FleetBuilder
from fleetcatalog.fleet.collection import Fleet
from fleetcatalog.fleet.factory import (
    FleetError,
    UnknownAircraftKindError,
    create_aircraft,
    preset_for,
    resolve_kind,
)
from fleetcatalog.fleet.shared import reset_shared_fleet, shared_fleet

__all__ = [
    "PRESETS",
    "Aircraft",
    "AircraftKind",
    "Fleet",
    "FleetBuilder",
    "FleetError",
    "Preset",
    "UnknownAircraftKindError",
    "create_aircraft",
    "preset_for",
    "reset_shared_fleet",
    "resolve_kind",
    "shared_fleet",
]
