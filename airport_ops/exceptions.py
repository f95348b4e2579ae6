"""
Exception hierarchy for the airport operations simulator.

Every failure raised by the stores and services derives from AirportError so
the command shell can report any of them the same way.
"""


class AirportError(Exception):
    """Base exception for all airport operation failures."""
    pass


class DuplicateResourceError(AirportError):
    """A flight, plane id or email is already registered."""
    pass


class NotFoundError(AirportError):
    """An unknown flight or user was referenced."""
    pass


class AlreadyBookedError(AirportError):
    """The user already holds a ticket in the requested direction."""
    pass


class OrderingViolationError(AirportError):
    """A departure would leave at or before the user's arrival."""
    pass


class InvalidInputError(AirportError):
    """A seat, flight, plane, airline, city or user field is malformed."""
    pass


class SeatConflictError(AirportError):
    """The requested seat is held and the user may not displace its holder."""
    pass


class CapacityExceededError(AirportError):
    """No free seat is left for an auto-assignment or a displaced traveller."""
    pass


class PermissionDeniedError(AirportError):
    """A flight management operation was attempted without a flight manager."""
    pass


class AuthenticationError(AirportError):
    """Email and password do not match a registered user."""
    pass
