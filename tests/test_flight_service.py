"""
Tests for the flight service entry points: registration, listing, booking
and delays, including the end-to-end JST scenarios.
"""

from datetime import datetime, timedelta

import pytest

from airport_ops.exceptions import (
    DuplicateResourceError,
    InvalidInputError,
    PermissionDeniedError,
    SeatConflictError,
)
from airport_ops.models import Direction, FlightStatus
from airport_ops.services import FlightService, check_flight_ids
from airport_ops.store import EntityStore

T0 = datetime(2025, 3, 14, 9, 0)


class TestCheckFlightIds:
    """Airline, flight code, plane id and city must agree."""

    def test_valid(self):
        check_flight_ids("JST", "JST101", "Sydney", "JST1A")

    @pytest.mark.parametrize("airline,code,city,plane,message", [
        ("XXX", "JST101", "Sydney", "JST1A", "Invalid Airline Code"),
        ("JST", "JST10", "Sydney", "JST1A", "Invalid Flight ID"),
        ("JST", "JST101", "Sydney", "JST1X", "Invalid Plane ID"),
        ("JST", "QFA101", "Sydney", "JST1A", "Airline code mismatch"),
        ("JST", "JST101", "Sydney", "QFA1A", "Airline code mismatch"),
        ("JST", "JST101", "Brisbane", "JST1A", "Invalid City"),
    ])
    def test_invalid(self, airline, code, city, plane, message):
        with pytest.raises(InvalidInputError, match=message):
            check_flight_ids(airline, code, city, plane)


class TestRegistration:
    """Flight registration by managers."""

    def test_register_arrival(self, flight_service, manager):
        flight = flight_service.register_arrival(manager, "QFA", "QFA123", "Perth", "QFA4A", T0)

        assert flight.direction == Direction.ARRIVAL
        assert flight.other_city == "Perth"
        assert flight.status == FlightStatus.SCHEDULED
        assert flight_service.get_flight("QFA123", Direction.ARRIVAL) is flight

    def test_register_departure(self, flight_service, manager):
        flight = flight_service.register_departure(manager, "VOZ", "VOZ555", "Adelaide", "VOZ5D", T0)
        assert flight_service.get_flight("VOZ555", Direction.DEPARTURE) is flight

    def test_requires_manager(self, flight_service, traveller):
        with pytest.raises(PermissionDeniedError):
            flight_service.register_arrival(None, "QFA", "QFA123", "Perth", "QFA4A", T0)
        with pytest.raises(PermissionDeniedError):
            flight_service.register_arrival(traveller, "QFA", "QFA123", "Perth", "QFA4A", T0)
        assert list(flight_service.list_flights()) == []

    def test_invalid_ids_not_stored(self, flight_service, manager):
        with pytest.raises(InvalidInputError):
            flight_service.register_arrival(manager, "QFA", "JST123", "Perth", "QFA4A", T0)
        assert list(flight_service.list_flights()) == []

    def test_duplicate_plane(self, flight_service, manager):
        flight_service.register_arrival(manager, "QFA", "QFA123", "Perth", "QFA4A", T0)
        with pytest.raises(DuplicateResourceError):
            flight_service.register_arrival(manager, "QFA", "QFA124", "Sydney", "QFA4A", T0)

    def test_strict_plane_ids_from_config(self, monkeypatch, manager):
        """A service built without a store follows AIRPORT_STRICT_PLANE_IDS."""
        monkeypatch.setenv("AIRPORT_STRICT_PLANE_IDS", "true")
        service = FlightService()
        service.register_arrival(manager, "JST", "JST101", "Sydney", "JST1A", T0)
        with pytest.raises(DuplicateResourceError):
            service.register_departure(manager, "JST", "JST102", "Melbourne", "JST1A", T0)

    def test_delay_requires_manager(self, flight_service, traveller, jst_flights):
        with pytest.raises(PermissionDeniedError):
            flight_service.delay_arrival(traveller, "JST101", 10)
        with pytest.raises(PermissionDeniedError):
            flight_service.delay_departure(None, "JST102", 10)
        assert jst_flights[0].delay_minutes == 0


class TestListing:
    """Time-ordered listings."""

    def test_ordered_by_effective_time(self, flight_service, manager):
        flight_service.register_departure(manager, "QFA", "QFA900", "Perth", "QFA9D", T0 + timedelta(hours=2))
        flight_service.register_arrival(manager, "VOZ", "VOZ100", "Adelaide", "VOZ1A", T0)
        flight_service.register_arrival(manager, "RXA", "RXA300", "Rockhampton", "RXA3A", T0 + timedelta(hours=1))

        codes = [f.flight_code for f in flight_service.list_flights()]
        assert codes == ["VOZ100", "RXA300", "QFA900"]

        flight_service.delay_arrival(manager, "VOZ100", 150)
        codes = [f.flight_code for f in flight_service.list_flights()]
        assert codes == ["RXA300", "QFA900", "VOZ100"]

    def test_flights_by_direction(self, flight_service, jst_flights):
        arrival, departure = jst_flights
        grouped = flight_service.flights_by_direction()
        assert grouped[Direction.ARRIVAL] == [arrival]
        assert grouped[Direction.DEPARTURE] == [departure]


class TestScenarios:
    """End-to-end behaviour across registration, booking and delays."""

    def test_delay_cascade(self, flight_service, manager, jst_flights):
        flight_service.delay_arrival(manager, "JST101", 30)
        departure = flight_service.get_flight("JST102", Direction.DEPARTURE)

        assert departure.effective_time == T0 + timedelta(minutes=210)
        assert departure.status == FlightStatus.DELAYED

    def test_seat_contention(self, flight_service, traveller, other_traveller, flyer, jst_flights):
        first = flight_service.book_arrival(traveller, "JST101", "2B")
        assert first.seat_code == "2B"

        with pytest.raises(SeatConflictError):
            flight_service.book_arrival(other_traveller, "JST101", "2B")

        ticket = flight_service.book_arrival(flyer, "JST101", "2B")
        assert ticket.seat_code == "2B"
        assert flight_service.seat_of(traveller, "JST101", Direction.ARRIVAL) == "2C"
        assert flight_service.seat_of(flyer, "JST101", Direction.ARRIVAL) == "2B"
        # the displaced traveller's ticket still records the seat it was issued for
        assert flight_service.tickets_for_user(traveller.email)[0].seat_code == "2B"

    def test_round_trip_points(self, flight_service, flyer, jst_flights):
        flight_service.book_arrival(flyer, "JST101")
        flight_service.book_departure(flyer, "JST102")
        tickets = flight_service.tickets_for_user("FAY@airport.test")

        assert [t.points_earned for t in tickets] == [1200, 1750]
        assert flyer.points == 500 + 2950

    def test_seat_of_unknown_flight(self, flight_service, traveller):
        assert flight_service.seat_of(traveller, "JST999", Direction.ARRIVAL) is None

    def test_services_share_store(self):
        store = EntityStore()
        service = FlightService(store)
        assert service.bookings.store is store
        assert service.delays.store is store
