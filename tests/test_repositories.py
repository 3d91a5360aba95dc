from parking_tracker.domain.common import VehicleCategory
from parking_tracker.domain.entities import Ticket
from parking_tracker.infrastructure.persistence.in_memory_repositories import InMemoryTicketRepository


def make_ticket(ticket_id, registration):
    return Ticket(ticket_id, registration, VehicleCategory.CAR, 1, ticket_id - 1000)


def test_add_and_get(ticket_repo):
    ticket = ticket_repo.add(make_ticket(1001, "ABC-1"))
    assert ticket_repo.get_active_by_registration("ABC-1") is ticket
    assert ticket_repo.get_active_by_registration("OTHER") is None
    assert ticket_repo.count_active() == 1


def test_remove(ticket_repo):
    ticket = ticket_repo.add(make_ticket(1001, "ABC-1"))
    assert ticket_repo.remove("ABC-1") is ticket
    assert ticket_repo.remove("ABC-1") is None
    assert ticket_repo.count_active() == 0


def test_active_tickets_sorted_by_id():
    repo = InMemoryTicketRepository()
    repo.add(make_ticket(1003, "C"))
    repo.add(make_ticket(1001, "A"))
    repo.add(make_ticket(1002, "B"))
    assert [ticket.id for ticket in repo.get_active_tickets()] == [1001, 1002, 1003]
