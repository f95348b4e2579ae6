"""
Delay propagation for arrivals and the departures flown by the same aircraft.

An aircraft that lands late leaves late: delaying an arrival adds the same
number of minutes to every departure sharing its plane id.
"""

import logging
from typing import List

from ..exceptions import InvalidInputError, NotFoundError
from ..models.enums import Direction, FlightStatus
from ..models.flight import FlightModel
from ..store import EntityStore

logger = logging.getLogger(__name__)


class DelayPropagator:
    """Applies delays to flights held in the entity store."""

    def __init__(self, store: EntityStore):
        self.store = store

    @staticmethod
    def _check_minutes(minutes: int) -> None:
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
            raise InvalidInputError(f"Delay must be a positive number of minutes, got {minutes!r}")

    @staticmethod
    def _delay(flight: FlightModel, minutes: int) -> None:
        flight.delay_minutes += minutes
        flight.status = FlightStatus.DELAYED

    def _find(self, flight_code: str, direction: Direction) -> FlightModel:
        flight = self.store.flights.get(flight_code, direction)
        if flight is None:
            raise NotFoundError(f"{direction.value.capitalize()} flight {flight_code} not found")
        return flight

    def delay_arrival(self, flight_code: str, minutes: int) -> List[FlightModel]:
        """
        Delay an arrival and every departure flown by the same aircraft.

        Args:
            flight_code: Code of the arrival flight
            minutes: Positive number of minutes to add

        Returns:
            List[FlightModel]: The linked departures that were delayed

        Raises:
            InvalidInputError: If minutes is not a positive integer
            NotFoundError: If no arrival with that code exists
        """
        self._check_minutes(minutes)
        arrival = self._find(flight_code, Direction.ARRIVAL)
        linked = self.store.flights.find_by_plane(arrival.plane_id, Direction.DEPARTURE)

        self._delay(arrival, minutes)
        for departure in linked:
            self._delay(departure, minutes)

        logger.info("Arrival %s delayed %d min (total %d); %d linked departure(s) adjusted",
                    arrival.flight_code, minutes, arrival.delay_minutes, len(linked))
        return linked

    def delay_departure(self, flight_code: str, minutes: int) -> FlightModel:
        """Delay a single departure; nothing cascades from a departure."""
        self._check_minutes(minutes)
        departure = self._find(flight_code, Direction.DEPARTURE)
        self._delay(departure, minutes)
        logger.info("Departure %s delayed %d min (total %d)",
                    departure.flight_code, minutes, departure.delay_minutes)
        return departure
