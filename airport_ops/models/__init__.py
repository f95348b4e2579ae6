"""
Airport operations Pydantic models package.

This package contains the Pydantic v2 models for users, flights and tickets
used throughout the simulator for validation and type safety.
"""

# Enums
from .enums import (
    Direction,
    FlightStatus,
    UserRole,
)

from .user import (
    FrequentFlyerProfile,
    ManagerProfile,
    UserModel,
    has_displacement_privilege,
    earns_points,
    is_flight_manager,
)

from .flight import FlightModel
from .ticket import TicketModel

__all__ = [
    # Enums
    "Direction",
    "FlightStatus",
    "UserRole",

    # Users
    "FrequentFlyerProfile",
    "ManagerProfile",
    "UserModel",
    "has_displacement_privilege",
    "earns_points",
    "is_flight_manager",

    # Flights and tickets
    "FlightModel",
    "TicketModel",
]
