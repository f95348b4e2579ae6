"""
In-memory flight store.

Flights are keyed by (flight code, direction). Plane ids are tracked per
direction so one aircraft can be linked to at most one arrival and one
departure; strict mode makes them unique across both directions.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..exceptions import DuplicateResourceError
from ..models.enums import Direction
from ..models.flight import FlightModel

logger = logging.getLogger(__name__)


class FlightStore:
    """Keyed flight collection enforcing code and plane id uniqueness."""

    def __init__(self, strict_plane_ids: bool = False):
        self.strict_plane_ids = strict_plane_ids
        self._flights: Dict[Tuple[str, Direction], FlightModel] = {}
        self._plane_ids: Dict[Direction, Set[str]] = {d: set() for d in Direction}

    def __len__(self) -> int:
        return len(self._flights)

    def _plane_in_use(self, plane_id: str, direction: Direction) -> bool:
        plane = plane_id.upper()
        if self.strict_plane_ids:
            return any(plane in planes for planes in self._plane_ids.values())
        return plane in self._plane_ids[direction]

    def add(self, flight: FlightModel) -> None:
        """
        Insert a flight.

        Raises:
            DuplicateResourceError: If the plane id is already in use or the
                flight code is already registered for this direction
        """
        if self._plane_in_use(flight.plane_id, flight.direction):
            raise DuplicateResourceError(f"Plane {flight.plane_id} is already assigned to a flight")
        if flight.key in self._flights:
            raise DuplicateResourceError(
                f"{flight.direction.value.capitalize()} flight {flight.flight_code} already exists"
            )
        self._flights[flight.key] = flight
        self._plane_ids[flight.direction].add(flight.plane_id.upper())
        logger.debug("Stored %s flight %s", flight.direction.value, flight.flight_code)

    def get(self, flight_code: str, direction: Direction) -> Optional[FlightModel]:
        return self._flights.get((flight_code.upper(), direction))

    def list_by_time(self) -> Iterator[FlightModel]:
        """
        Yield flights by ascending effective time.

        The order is recomputed on every call since delays move flights.
        """
        yield from sorted(self._flights.values(), key=lambda f: f.effective_time)

    def find_by_plane(self, plane_id: str, direction: Optional[Direction] = None) -> List[FlightModel]:
        """Return flights flown by plane_id, optionally only one direction."""
        plane = plane_id.upper()
        return [
            f for f in self._flights.values()
            if f.plane_id.upper() == plane and (direction is None or f.direction == direction)
        ]
