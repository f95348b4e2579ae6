"""
Flight model for the airport operations simulator.

A flight is identified by its code and direction and owns the seat map of
the aircraft flying it.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional
from pydantic import BaseModel, Field, ConfigDict

from .enums import Direction, FlightStatus


class FlightModel(BaseModel):
    """
    Arrival or departure flight with its delay state and seat bookings.

    other_city is the origin of an arrival and the destination of a departure.
    bookings maps seat codes (e.g. '2B') to the email of the seated user.
    """
    model_config = ConfigDict(validate_assignment=True)

    airline: str = Field(..., max_length=3, description="Airline code")
    flight_code: str = Field(..., description="Flight code (e.g. 'JST101')")
    direction: Direction
    other_city: str = Field(..., description="Origin or destination city")
    plane_id: str = Field(..., description="Aircraft identifier")
    scheduled_time: datetime = Field(..., description="Scheduled arrival or departure time")
    delay_minutes: int = Field(default=0, ge=0, description="Accumulated delay in minutes")
    status: FlightStatus = Field(default=FlightStatus.SCHEDULED, description="Current flight status")
    bookings: Dict[str, str] = Field(default_factory=dict, description="Seat code to user email")

    @property
    def effective_time(self) -> datetime:
        """Scheduled time plus accumulated delay."""
        return self.scheduled_time + timedelta(minutes=self.delay_minutes)

    @property
    def key(self) -> tuple:
        return (self.flight_code.upper(), self.direction)

    def is_seat_taken(self, seat: str) -> bool:
        return seat in self.bookings

    def seat_of(self, email: str) -> Optional[str]:
        """Return the seat currently held by email, if any."""
        for seat, holder in self.bookings.items():
            if holder.lower() == email.lower():
                return seat
        return None
