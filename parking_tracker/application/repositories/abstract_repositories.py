from abc import ABC, abstractmethod
from typing import List, Optional

from parking_tracker.domain.entities import Ticket


class AbstractTicketRepository(ABC):
    @abstractmethod
    def get_active_by_registration(self, registration: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    def add(self, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    def remove(self, registration: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    def get_active_tickets(self) -> List[Ticket]:
        pass

    @abstractmethod
    def count_active(self) -> int:
        pass
