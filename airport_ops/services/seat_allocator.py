"""
Seat allocation on a flight's fixed seat grid.

This module decides which seat a booking gets:
- Auto-assignment takes the first free seat in row-major order
- A requested free seat is granted as is
- A requested held seat goes to a frequent flyer, whose arrival pushes the
  current holder to the next free seat scanning forward from their old seat

Allocation only plans the change. The flight's seat map is untouched until
the caller applies the returned SeatAssignment, so a failed booking leaves
nothing behind.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import CapacityExceededError, InvalidInputError, SeatConflictError
from ..models.flight import FlightModel
from ..models.user import UserModel, has_displacement_privilege
from ..utils.reference_data import all_seats
from ..utils.validators import normalize_seat, valid_seat

logger = logging.getLogger(__name__)


@dataclass
class SeatAssignment:
    """Planned seat for a booking and, if any, the traveller it displaces."""
    seat: str
    displaced_email: Optional[str] = None
    displaced_to: Optional[str] = None

    @property
    def displaces(self) -> bool:
        return self.displaced_email is not None

    def apply(self, flight: FlightModel, email: str) -> None:
        """Write the planned seats into the flight's seat map."""
        bookings = dict(flight.bookings)
        bookings[self.seat] = email
        if self.displaced_email is not None:
            bookings[self.displaced_to] = self.displaced_email
        flight.bookings = bookings


class SeatAllocator:
    """Stateless seat planner for 10 x 4 seat flights."""

    def __init__(self):
        self.seat_order: List[str] = list(all_seats())

    def first_free_seat(self, flight: FlightModel) -> str:
        """
        Return the first unoccupied seat in row-major order.

        Raises:
            CapacityExceededError: If every seat is taken
        """
        for seat in self.seat_order:
            if not flight.is_seat_taken(seat):
                return seat
        raise CapacityExceededError(f"Flight {flight.flight_code} is full")

    def next_incremental_seat(self, flight: FlightModel, original: str) -> Optional[str]:
        """
        Return the first free seat after original, wrapping from 10D to 1A.

        The scan stops when it comes back round to original.
        """
        start = self.seat_order.index(original)
        count = len(self.seat_order)
        for offset in range(1, count):
            candidate = self.seat_order[(start + offset) % count]
            if not flight.is_seat_taken(candidate):
                return candidate
        return None

    def allocate(
        self,
        flight: FlightModel,
        user: UserModel,
        requested: Optional[str] = None,
    ) -> SeatAssignment:
        """
        Plan the seat for user on flight.

        Args:
            flight: Flight being booked
            user: Booking user; decides whether a held seat can be taken
            requested: Seat code wanted, or None/blank for auto-assignment

        Returns:
            SeatAssignment: Seat for the user and any displacement

        Raises:
            InvalidInputError: If the requested seat code is malformed
            SeatConflictError: If the seat is held and the user may not displace
            CapacityExceededError: If no seat is left for the user or the
                displaced traveller
        """
        if requested is None or not requested.strip():
            return SeatAssignment(seat=self.first_free_seat(flight))

        seat = normalize_seat(requested)
        if not valid_seat(seat):
            raise InvalidInputError(f"Invalid seat {requested!r}")

        holder = flight.bookings.get(seat)
        if holder is None:
            return SeatAssignment(seat=seat)

        if not has_displacement_privilege(user):
            logger.debug("Seat %s on %s refused to %s: held by another traveller",
                         seat, flight.flight_code, user.email)
            raise SeatConflictError(
                "Seat already taken. Choose another seat or use auto-assign."
            )

        moved_to = self.next_incremental_seat(flight, seat)
        if moved_to is None:
            raise CapacityExceededError("Cannot reassign displaced traveller; flight full")
        return SeatAssignment(seat=seat, displaced_email=holder, displaced_to=moved_to)
