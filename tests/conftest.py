"""
Shared fixtures: a fresh store with services, users of each role and the
JST101 / JST102 pair flown by plane JST1A.
"""

from datetime import datetime, timedelta

import pytest

from airport_ops.services import AuthService, FlightService
from airport_ops.store import EntityStore
from airport_ops.utils.config import reset_config

T0 = datetime(2025, 3, 14, 9, 0)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Isolate every test from AIRPORT_* variables and any local .env file."""
    for name in (
        "AIRPORT_LOG_LEVEL",
        "AIRPORT_DEBUG",
        "AIRPORT_DATETIME_FORMAT",
        "AIRPORT_DISPLAY_FORMAT",
        "AIRPORT_STRICT_PLANE_IDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def flight_service(store):
    return FlightService(store)


@pytest.fixture
def auth(store):
    return AuthService(store.users)


@pytest.fixture
def manager(auth):
    return auth.register_manager("Mia Manager", 40, "mia@airport.test", "0400000001", "Manager123", "1001")


@pytest.fixture
def traveller(auth):
    return auth.register_traveller("Tom Traveller", 30, "tom@airport.test", "0400000002", "Traveller1")


@pytest.fixture
def other_traveller(auth):
    return auth.register_traveller("Ann Other", 28, "ann@airport.test", "0400000004", "Another12")


@pytest.fixture
def flyer(auth):
    return auth.register_frequent_flyer(
        "Fay Flyer", 35, "fay@airport.test", "0400000003", "Frequent12", "123456", 500
    )


@pytest.fixture
def jst_flights(flight_service, manager):
    """Arrival JST101 from Sydney and departure JST102 to Melbourne on plane JST1A."""
    arrival = flight_service.register_arrival(manager, "JST", "JST101", "Sydney", "JST1A", T0)
    departure = flight_service.register_departure(
        manager, "JST", "JST102", "Melbourne", "JST1A", T0 + timedelta(minutes=180)
    )
    return arrival, departure
