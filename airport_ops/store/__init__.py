"""
Entity store for flights, tickets and users.

All records live in memory for the lifetime of the process. The services
receive an EntityStore explicitly and never keep copies of its records.
"""

from .flights import FlightStore
from .tickets import TicketStore
from .users import UserStore


class EntityStore:
    """Owns the flight, ticket and user collections."""

    def __init__(self, strict_plane_ids: bool = False):
        self.flights = FlightStore(strict_plane_ids=strict_plane_ids)
        self.tickets = TicketStore()
        self.users = UserStore()


__all__ = [
    'EntityStore',
    'FlightStore',
    'TicketStore',
    'UserStore',
]
