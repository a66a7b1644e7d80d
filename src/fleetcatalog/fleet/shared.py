"""Process-wide shared fleet.

Callers that need one fleet visible across the whole process ask for it
explicitly through :func:`shared_fleet`. The instance is created at most
once; creation is guarded by a lock, later reads and writes of its
contents are not.

Typical usage:
    from fleetcatalog.fleet.shared import shared_fleet

    FleetBuilder(shared_fleet()).add_many("cargo", 2)
    shared_fleet().total_capacity()  # 100000
"""

import threading

from fleetcatalog.core.logging_system import get_logger
from fleetcatalog.fleet.collection import Fleet

logger = get_logger(__name__)

_shared_fleet: Fleet | None = None
_lock = threading.Lock()


def shared_fleet() -> Fleet:
    """Get the shared fleet, creating it on first use.

    Returns:
        The same Fleet instance on every call until :func:`reset_shared_fleet`.
    """
    global _shared_fleet

    if _shared_fleet is None:
        with _lock:
            if _shared_fleet is None:
                _shared_fleet = Fleet()
                logger.debug("Created shared fleet")

    return _shared_fleet


def reset_shared_fleet() -> None:
    """Drop the shared fleet so the next access starts empty."""
    global _shared_fleet

    with _lock:
        _shared_fleet = None
