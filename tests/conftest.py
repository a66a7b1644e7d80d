"""Pytest configuration and fixtures for all tests."""

import pytest

from fleetcatalog.core.logging_system import initialize_logging
from fleetcatalog.fleet.builder import FleetBuilder
from fleetcatalog.fleet.collection import Fleet
from fleetcatalog.fleet.factory import create_aircraft
from fleetcatalog.fleet.shared import reset_shared_fleet


@pytest.fixture(autouse=True)
def clean_shared_fleet():
    """Start and finish every test with no shared fleet."""
    reset_shared_fleet()
    yield
    reset_shared_fleet()


@pytest.fixture(autouse=True)
def default_logging():
    """Put logging back to its default configuration after every test."""
    yield
    initialize_logging()


@pytest.fixture
def configured_fleet() -> Fleet:
    """Fleet of three caller-configured aircraft, one of each kind."""
    return (
        FleetBuilder()
        .add(create_aircraft("passenger", 200, 5000, 30))
        .add(create_aircraft("cargo", 50000, 4000, 50))
        .add(create_aircraft("private", 10, 6000, 20))
        .build()
    )


@pytest.fixture
def preset_fleet() -> Fleet:
    """Fleet of 3 passenger, 2 cargo and 1 private aircraft with preset values."""
    return FleetBuilder().add_many("passenger", 3).add_many("cargo", 2).add_many("private", 1).build()
