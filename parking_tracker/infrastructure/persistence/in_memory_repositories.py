from typing import Dict, List, Optional

from parking_tracker.application.repositories import AbstractTicketRepository
from parking_tracker.domain.entities import Ticket


class InMemoryTicketRepository(AbstractTicketRepository):
    """Active tickets keyed by registration. Closed tickets are dropped on removal."""

    def __init__(self):
        self._tickets: Dict[str, Ticket] = {}

    def get_active_by_registration(self, registration: str) -> Optional[Ticket]:
        return self._tickets.get(registration)

    def add(self, ticket: Ticket) -> Ticket:
        self._tickets[ticket.registration] = ticket
        return ticket

    def remove(self, registration: str) -> Optional[Ticket]:
        return self._tickets.pop(registration, None)

    def get_active_tickets(self) -> List[Ticket]:
        return sorted(self._tickets.values(), key=lambda ticket: ticket.id)

    def count_active(self) -> int:
        return len(self._tickets)
