"""
Ticket model for the airport operations simulator.
"""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .enums import Direction
from ..utils.config import get_config


def new_ticket_id() -> str:
    return f"T-{uuid.uuid4().hex[:12]}"


class TicketModel(BaseModel):
    """
    Issued ticket for one seat on one flight.

    Tickets are immutable. The flight time and city are captured when the
    ticket is issued and are not refreshed by later delays.
    """
    model_config = ConfigDict(frozen=True)

    ticket_id: str = Field(default_factory=new_ticket_id, description="Generated ticket id")
    user_email: str = Field(..., description="Owner email")
    flight_code: str
    direction: Direction
    seat_code: str = Field(..., max_length=3, description="Seat code (e.g. '10D')")
    other_city: str
    effective_time: datetime = Field(..., description="Flight time when the ticket was issued")
    points_earned: int = Field(default=0, ge=0)

    def time_string(self, fmt: Optional[str] = None) -> str:
        if fmt is None:
            fmt = get_config().datetime_format
        return self.effective_time.strftime(fmt)
