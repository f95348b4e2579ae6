"""
Flight service: the entry points the command shell calls.

Wires the entity store, booking coordinator and delay propagator together
and adds flight registration with its identifier consistency checks.
"""

import logging
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from ..exceptions import InvalidInputError, PermissionDeniedError
from ..models.enums import Direction
from ..models.flight import FlightModel
from ..models.ticket import TicketModel
from ..models.user import UserModel, is_flight_manager
from ..store import EntityStore
from ..utils import validators
from ..utils.config import get_config
from .booking_coordinator import BookingCoordinator
from .delay_propagator import DelayPropagator
from .seat_allocator import SeatAllocator

logger = logging.getLogger(__name__)


def check_flight_ids(airline: str, flight_code: str, city: str, plane_id: str) -> None:
    """
    Check that airline, flight code, plane id and city agree with each other.

    Raises:
        InvalidInputError: Naming the first field that fails
    """
    if not validators.valid_airline_code(airline):
        raise InvalidInputError("Invalid Airline Code")
    if not validators.valid_flight_code(flight_code):
        raise InvalidInputError("Invalid Flight ID")
    if not validators.valid_plane_id(plane_id):
        raise InvalidInputError("Invalid Plane ID")
    if airline != flight_code[:3] or airline != plane_id[:3]:
        raise InvalidInputError("Airline code mismatch")
    if not validators.valid_city(city):
        raise InvalidInputError("Invalid City")


def require_manager(manager: Optional[UserModel]) -> None:
    if not is_flight_manager(manager):
        raise PermissionDeniedError("Only flight managers can manage flights")


class FlightService:
    """
    Facade over flight registration, booking, delays and listings.

    Features:
    - Arrival and departure registration by flight managers
    - Seat booking with frequent flyer displacement
    - Arrival delays cascading to the aircraft's departures
    - Flight listing ordered by current effective time
    """

    def __init__(self, store: Optional[EntityStore] = None):
        """
        Initialize the flight service.

        Args:
            store: Entity store to operate on; a new one is created using the
                configured plane id policy when omitted
        """
        if store is None:
            store = EntityStore(strict_plane_ids=get_config().strict_plane_ids)
        self.store = store
        self.bookings = BookingCoordinator(store, SeatAllocator())
        self.delays = DelayPropagator(store)

    # Flight management

    def register_flight(
        self,
        manager: Optional[UserModel],
        direction: Direction,
        airline: str,
        flight_code: str,
        city: str,
        plane_id: str,
        time: datetime,
    ) -> FlightModel:
        require_manager(manager)
        check_flight_ids(airline, flight_code, city, plane_id)

        flight = FlightModel(
            airline=airline,
            flight_code=flight_code,
            direction=direction,
            other_city=city,
            plane_id=plane_id,
            scheduled_time=time,
        )
        self.store.flights.add(flight)
        logger.info("%s registered %s flight %s (%s, plane %s) at %s",
                    manager.email, direction.value, flight_code, city, plane_id, time)
        return flight

    def register_arrival(self, manager, airline, flight_code, from_city, plane_id, time) -> FlightModel:
        return self.register_flight(manager, Direction.ARRIVAL, airline, flight_code, from_city, plane_id, time)

    def register_departure(self, manager, airline, flight_code, to_city, plane_id, time) -> FlightModel:
        return self.register_flight(manager, Direction.DEPARTURE, airline, flight_code, to_city, plane_id, time)

    def delay_arrival(self, manager: Optional[UserModel], flight_code: str, minutes: int) -> List[FlightModel]:
        require_manager(manager)
        return self.delays.delay_arrival(flight_code, minutes)

    def delay_departure(self, manager: Optional[UserModel], flight_code: str, minutes: int) -> FlightModel:
        require_manager(manager)
        return self.delays.delay_departure(flight_code, minutes)

    # Queries

    def get_flight(self, flight_code: str, direction: Direction) -> Optional[FlightModel]:
        return self.store.flights.get(flight_code, direction)

    def list_flights(self) -> Iterator[FlightModel]:
        return self.store.flights.list_by_time()

    def flights_by_direction(self) -> Dict[Direction, List[FlightModel]]:
        grouped: Dict[Direction, List[FlightModel]] = {d: [] for d in Direction}
        for flight in self.list_flights():
            grouped[flight.direction].append(flight)
        return grouped

    def tickets_for_user(self, email: str) -> List[TicketModel]:
        return self.bookings.tickets_for_user(email)

    def seat_of(self, user: UserModel, flight_code: str, direction: Direction) -> Optional[str]:
        """Current seat of user on a flight, which may differ from their ticket after displacement."""
        flight = self.store.flights.get(flight_code, direction)
        return flight.seat_of(user.email) if flight else None

    # Bookings

    def book_arrival(self, user: UserModel, flight_code: str, seat: Optional[str] = None) -> TicketModel:
        return self.bookings.book_arrival(user, flight_code, seat)

    def book_departure(self, user: UserModel, flight_code: str, seat: Optional[str] = None) -> TicketModel:
        return self.bookings.book_departure(user, flight_code, seat)
