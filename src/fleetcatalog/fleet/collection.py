"""Fleet collection and its queries.

A Fleet is an ordered list of aircraft. It grows by appending, can be
reordered by range, and answers capacity and fuel-consumption queries.

Typical usage:
    fleet = FleetBuilder().add_many("passenger", 3).build()
    fleet.total_capacity()  # 540
    fleet.sort_by_range_descending()
    thrifty = fleet.find_by_fuel_consumption(6, 10)
"""

from collections.abc import Iterable, Iterator

from fleetcatalog.fleet.aircraft import Aircraft


class Fleet:
    """Ordered collection of aircraft.

    Duplicate aircraft are separate members. There is no removal; the only
    mutations are :meth:`add` and :meth:`sort_by_range_descending`.

    Examples:
        >>> fleet = Fleet([create_aircraft("cargo"), create_aircraft("private")])
        >>> fleet.total_capacity()
        50010
    """

    def __init__(self, aircraft: Iterable[Aircraft] = ()) -> None:
        self._aircraft: list[Aircraft] = list(aircraft)

    def add(self, aircraft: Aircraft) -> None:
        """Append an aircraft at the end of the fleet."""
        self._aircraft.append(aircraft)

    @property
    def aircraft(self) -> list[Aircraft]:
        """Copy of the members in current order."""
        return list(self._aircraft)

    def copy(self) -> "Fleet":
        """Return an independent fleet with the same members in the same order."""
        return Fleet(self._aircraft)

    def total_capacity(self) -> int:
        """Sum of capacity over all members (0 for an empty fleet)."""
        return sum(aircraft.capacity for aircraft in self._aircraft)

    def sort_by_range_descending(self) -> None:
        """Reorder the fleet in place by range, longest first.

        The sort is stable: aircraft with equal range keep their relative
        order, so sorting twice gives the same order as sorting once.
        """
        self._aircraft.sort(key=lambda aircraft: aircraft.flight_range_km, reverse=True)

    def find_by_fuel_consumption(self, min_consumption: float, max_consumption: float) -> list[Aircraft]:
        """Find aircraft whose fuel consumption lies within inclusive bounds.

        Args:
            min_consumption: Lower bound per 100 km (inclusive).
            max_consumption: Upper bound per 100 km (inclusive).

        Returns:
            Matching aircraft in fleet order. Empty when nothing matches,
            including when the lower bound exceeds the upper bound.
        """
        return [
            aircraft
            for aircraft in self._aircraft
            if min_consumption <= aircraft.fuel_consumption_per_100km <= max_consumption
        ]

    def describe(self) -> list[str]:
        """One report line per aircraft, in fleet order."""
        return [aircraft.describe() for aircraft in self._aircraft]

    def format_report(self, title: str) -> str:
        """Format a titled listing of the fleet.

        Args:
            title: Heading line.

        Returns:
            Multi-line text: heading, one line per aircraft (or a
            placeholder when empty).
        """
        lines = [f"{title}:"]
        if self._aircraft:
            lines.extend(f"  {line}" for line in self.describe())
        else:
            lines.append("  (no aircraft)")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._aircraft)

    def __iter__(self) -> Iterator[Aircraft]:
        return iter(self._aircraft)

    def __getitem__(self, index: int) -> Aircraft:
        return self._aircraft[index]

    def __repr__(self) -> str:
        return f"Fleet({self._aircraft!r})"
