"""
Business logic services for the airport operations simulator.

This module contains the seat allocator, booking coordinator, delay
propagator, the flight service facade and user authentication.
"""

from .seat_allocator import SeatAllocator, SeatAssignment
from .booking_coordinator import BookingCoordinator
from .delay_propagator import DelayPropagator
from .flight_service import FlightService, check_flight_ids
from .auth_service import AuthService, hash_password

__all__ = [
    'SeatAllocator',
    'SeatAssignment',
    'BookingCoordinator',
    'DelayPropagator',
    'FlightService',
    'check_flight_ids',
    'AuthService',
    'hash_password',
]
