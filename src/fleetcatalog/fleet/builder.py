"""Fleet builder for assembling fleets one aircraft or one batch at a time.

The FleetBuilder accumulates aircraft through chainable add calls and
hands the result out as a Fleet. It can also be fed scenario entries
read from YAML configuration.

Typical usage:
    fleet = (
        FleetBuilder()
        .add(create_aircraft("passenger", 200, 5000, 30))
        .add_many("cargo", 2)
        .build()
    )
"""

from typing import Any

from fleetcatalog.core.config import ConfigError
from fleetcatalog.core.logging_system import get_logger
from fleetcatalog.fleet.aircraft import Aircraft, AircraftKind
from fleetcatalog.fleet.collection import Fleet
from fleetcatalog.fleet.factory import create_aircraft, resolve_kind

logger = get_logger(__name__)

_FIELD_KEYS = ("capacity", "flight_range_km", "fuel_consumption_per_100km")


class FleetBuilder:
    """Builder for constructing fleets.

    Without a target, the builder keeps its own list and every
    :meth:`build` returns a fresh Fleet owned by the caller. With a target
    (for instance the shared fleet), adds go straight into that fleet and
    :meth:`build` returns that same instance.

    Examples:
        >>> fleet = FleetBuilder().add_many("passenger", 3).add_many("private", 1).build()
        >>> len(fleet)
        4
    """

    def __init__(self, target: Fleet | None = None) -> None:
        """Initialize fleet builder.

        Args:
            target: Existing fleet to build into. When None, the builder
                accumulates privately.
        """
        self._target = target
        self._fleet = target if target is not None else Fleet()

    def add(self, aircraft: Aircraft) -> "FleetBuilder":
        """Append a single pre-built aircraft.

        Returns:
            This builder, for chaining.
        """
        self._fleet.add(aircraft)
        return self

    def add_many(self, selector: str | AircraftKind, count: int) -> "FleetBuilder":
        """Append ``count`` preset aircraft of one kind.

        A count of zero or less appends nothing.

        Args:
            selector: Kind enum member or case-insensitive kind name.
            count: Number of aircraft to create.

        Returns:
            This builder, for chaining.

        Raises:
            UnknownAircraftKindError: If the selector matches no kind,
                even when ``count`` is zero.
        """
        # Unknown kinds fail even for empty batches.
        kind = resolve_kind(selector)

        for _ in range(count):
            self._fleet.add(create_aircraft(kind))

        logger.debug("Added %d x %s", max(count, 0), kind.value)
        return self

    def add_entries(self, entries: list[dict[str, Any]]) -> "FleetBuilder":
        """Append aircraft described by scenario configuration entries.

        Each entry is a mapping with a ``kind`` and optionally ``count``
        (default 1) and any of ``capacity``, ``flight_range_km`` and
        ``fuel_consumption_per_100km``. Entries without numeric fields
        use the kind's preset values.

        Args:
            entries: List of entry mappings.

        Returns:
            This builder, for chaining.

        Raises:
            ConfigError: If an entry is not a mapping, lacks ``kind`` or has
                a non-integer ``count``.
            UnknownAircraftKindError: If an entry names an unknown kind.

        Examples:
            >>> builder.add_entries([
            ...     {"kind": "passenger", "capacity": 200,
            ...      "flight_range_km": 5000, "fuel_consumption_per_100km": 30},
            ...     {"kind": "cargo", "count": 2},
            ... ])
        """
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ConfigError(f"Aircraft entry {index} must be a mapping, got {entry!r}")

            kind = entry.get("kind")
            if not kind:
                raise ConfigError(f"Aircraft entry {index} missing 'kind' field")

            count = entry.get("count", 1)
            if not isinstance(count, int) or isinstance(count, bool):
                raise ConfigError(f"Aircraft entry {index} has invalid count: {count!r}")

            fields = {key: entry[key] for key in _FIELD_KEYS if key in entry}
            if not fields:
                self.add_many(kind, count)
                continue

            for _ in range(count):
                self.add(create_aircraft(kind, **fields))

        return self

    @classmethod
    def from_config(cls, entries: list[dict[str, Any]], target: Fleet | None = None) -> "FleetBuilder":
        """Create a builder pre-filled from scenario configuration entries.

        Args:
            entries: Entry mappings, see :meth:`add_entries`.
            target: Optional fleet to build into.

        Returns:
            The populated builder.
        """
        if not isinstance(entries, list):
            raise ConfigError(f"Aircraft entries must be a list, got {type(entries).__name__}")

        logger.debug("Building from %d configuration entries", len(entries))
        return cls(target).add_entries(entries)

    def build(self) -> Fleet:
        """Return the accumulated fleet in insertion order.

        Returns:
            The target fleet itself when one was given, otherwise a new
            Fleet holding a copy of the accumulated aircraft.
        """
        fleet = self._target if self._target is not None else self._fleet.copy()

        logger.info(
            "Fleet built with %d aircraft (total capacity %d)",
            len(fleet),
            fleet.total_capacity(),
        )
        return fleet
