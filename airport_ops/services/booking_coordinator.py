"""
Booking coordinator: turns a booking request into an issued ticket.

A user holds at most one arrival and one departure ticket, in either order.
A departure booked after an arrival must leave strictly after that arrival's
current effective time.
"""

import logging
from typing import List, Optional

from ..exceptions import (
    AlreadyBookedError,
    InvalidInputError,
    NotFoundError,
    OrderingViolationError,
)
from ..models.enums import Direction
from ..models.flight import FlightModel
from ..models.ticket import TicketModel
from ..models.user import UserModel, earns_points
from ..store import EntityStore
from ..utils.reference_data import points_for_city
from .seat_allocator import SeatAllocator

logger = logging.getLogger(__name__)


class BookingCoordinator:
    """
    Validates booking state, plans the seat and issues the ticket.

    Nothing is written until every check has passed: seat map, points
    balance and ticket store change together or not at all.
    """

    def __init__(self, store: EntityStore, allocator: Optional[SeatAllocator] = None):
        self.store = store
        self.allocator = allocator or SeatAllocator()

    def book_arrival(self, user: UserModel, flight_code: str, seat: Optional[str] = None) -> TicketModel:
        return self.book(user, flight_code, Direction.ARRIVAL, seat)

    def book_departure(self, user: UserModel, flight_code: str, seat: Optional[str] = None) -> TicketModel:
        return self.book(user, flight_code, Direction.DEPARTURE, seat)

    def book(
        self,
        user: UserModel,
        flight_code: str,
        direction: Direction,
        seat: Optional[str] = None,
    ) -> TicketModel:
        """
        Book a seat for user on the flight identified by code and direction.

        Raises:
            NotFoundError: If no such flight exists
            AlreadyBookedError: If the user already holds a ticket this direction
            OrderingViolationError: If a departure is not after the held arrival
            InvalidInputError, SeatConflictError, CapacityExceededError: From
                seat allocation
        """
        flight = self.store.flights.get(flight_code, direction)
        if flight is None:
            raise NotFoundError(f"{direction.value.capitalize()} flight {flight_code} not found")

        self.check_user_booking(user, flight)
        assignment = self.allocator.allocate(flight, user, seat)
        points = self.points_for(user, flight)

        assignment.apply(flight, user.email)
        if assignment.displaces:
            logger.info("%s displaced from %s to %s on %s by %s",
                        assignment.displaced_email, assignment.seat,
                        assignment.displaced_to, flight.flight_code, user.email)
        return self._issue_ticket(user, flight, assignment.seat, points)

    def check_user_booking(self, user: UserModel, flight: FlightModel) -> None:
        """Enforce one ticket per direction and arrival-before-departure."""
        tickets = self.store.tickets.for_user(user.email)
        held = {t.direction: t for t in tickets}

        if flight.direction in held:
            article = "an" if flight.direction == Direction.ARRIVAL else "a"
            raise AlreadyBookedError(f"User already has {article} {flight.direction.value} flight")

        arrival_ticket = held.get(Direction.ARRIVAL)
        if flight.direction == Direction.DEPARTURE and arrival_ticket is not None:
            arrival = self.store.flights.get(arrival_ticket.flight_code, Direction.ARRIVAL)
            arrival_time = arrival.effective_time if arrival else arrival_ticket.effective_time
            if flight.effective_time <= arrival_time:
                logger.debug("Departure %s at %s refused for %s arriving at %s",
                             flight.flight_code, flight.effective_time, user.email, arrival_time)
                raise OrderingViolationError("Departing Flight Must be After the Arrival Flight")

    def points_for(self, user: UserModel, flight: FlightModel) -> int:
        """Points a booking earns: the flight city's value for frequent flyers, else 0."""
        if not earns_points(user):
            return 0
        try:
            return points_for_city(flight.other_city)
        except KeyError:
            raise InvalidInputError(f"Invalid City {flight.other_city!r}")

    def _issue_ticket(self, user: UserModel, flight: FlightModel, seat: str, points: int) -> TicketModel:
        if points:
            user.frequent_flyer.points += points

        ticket = TicketModel(
            user_email=user.email,
            flight_code=flight.flight_code,
            direction=flight.direction,
            seat_code=seat,
            other_city=flight.other_city,
            effective_time=flight.effective_time,
            points_earned=points,
        )
        self.store.tickets.add(ticket)
        logger.info("Issued %s to %s for %s %s seat %s (+%d points)",
                    ticket.ticket_id, user.email, flight.direction.value,
                    flight.flight_code, seat, points)
        return ticket

    def tickets_for_user(self, email: str) -> List[TicketModel]:
        return self.store.tickets.for_user(email)
