"""
Enums for the airport operations simulator.

This module contains the enumeration types shared by the models, stores and
services for consistent data validation.
"""

from enum import Enum


class Direction(str, Enum):
    """Whether a flight lands at or leaves from the airport."""
    ARRIVAL = "arrival"
    DEPARTURE = "departure"


class FlightStatus(str, Enum):
    """Flight status enumeration for tracking flight states."""
    SCHEDULED = "scheduled"
    DELAYED = "delayed"


class UserRole(str, Enum):
    """Role tag of a registered user."""
    TRAVELLER = "traveller"
    FREQUENT_FLYER = "frequent_flyer"
    FLIGHT_MANAGER = "flight_manager"
