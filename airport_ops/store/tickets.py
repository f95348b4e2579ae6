"""
In-memory ticket store.
"""

from typing import Dict, List

from ..models.ticket import TicketModel


class TicketStore:
    """Issued tickets keyed by ticket id."""

    def __init__(self):
        self._tickets: Dict[str, TicketModel] = {}

    def __len__(self) -> int:
        return len(self._tickets)

    def add(self, ticket: TicketModel) -> None:
        self._tickets[ticket.ticket_id] = ticket

    def for_user(self, email: str) -> List[TicketModel]:
        """Tickets owned by email, matched ignoring case, in issue order."""
        wanted = email.lower()
        return [t for t in self._tickets.values() if t.user_email.lower() == wanted]
