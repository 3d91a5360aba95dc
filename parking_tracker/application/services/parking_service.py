from datetime import datetime, timezone
from itertools import count
from typing import Optional, List, Dict
from loguru import logger

from parking_tracker.application.repositories import AbstractTicketRepository
from parking_tracker.config.settings_env import Settings, settings as default_settings
from parking_tracker.domain.billing import calculate_charge
from parking_tracker.domain.common import VehicleCategory
from parking_tracker.domain.entities import Vehicle, ParkingFloor, Ticket
from parking_tracker.domain.errors import NoSlotAvailableError, VehicleNotFoundError, VehicleAlreadyParkedError
from parking_tracker.infrastructure.persistence.in_memory_repositories import InMemoryTicketRepository


class ParkingService:
    """Coordinates floors, active tickets and revenue for one facility."""

    def __init__(
        self,
        ticket_repo: Optional[AbstractTicketRepository] = None,
        num_floors: Optional[int] = None,
        car_slots_per_floor: Optional[int] = None,
        bike_slots_per_floor: Optional[int] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or default_settings
        self.ticket_repo = ticket_repo if ticket_repo is not None else InMemoryTicketRepository()

        num_floors = self.config.PARKING_FLOORS if num_floors is None else num_floors
        car_slots = self.config.CAR_SLOTS_PER_FLOOR if car_slots_per_floor is None else car_slots_per_floor
        bike_slots = self.config.BIKE_SLOTS_PER_FLOOR if bike_slots_per_floor is None else bike_slots_per_floor

        self._floors: List[ParkingFloor] = [
            ParkingFloor(number, car_slots, bike_slots) for number in range(1, num_floors + 1)
        ]
        self._ticket_ids = count(self.config.FIRST_TICKET_ID)
        self._total_revenue = 0.0

    @property
    def floors(self) -> List[ParkingFloor]:
        return list(self._floors)

    @property
    def total_revenue(self) -> float:
        return self._total_revenue

    def park(self, category: VehicleCategory, registration: str) -> Ticket:
        existing_ticket = self.ticket_repo.get_active_by_registration(registration)
        if existing_ticket:
            logger.warning(f"Rejected entry for {registration}: already holds ticket {existing_ticket.id}")
            raise VehicleAlreadyParkedError(registration, existing_ticket.id)

        vehicle = Vehicle(registration=registration, category=category)

        # Lowest floor first, then lowest slot id within the floor
        for floor in self._floors:
            slot = floor.find_available_slot(vehicle.category)
            if slot and floor.assign_vehicle(slot.id, vehicle):
                ticket = Ticket(
                    id=next(self._ticket_ids),
                    registration=registration,
                    category=vehicle.category,
                    floor=floor.number,
                    slot_id=slot.id,
                    entry_time=datetime.now(timezone.utc),
                )
                self.ticket_repo.add(ticket)
                logger.info(f"Vehicle {registration} parked at slot {floor.number}-{slot.id:02d}, ticket {ticket.id}")
                return ticket

        logger.warning(f"No {vehicle.category.value} slot available for {registration}")
        raise NoSlotAvailableError(vehicle.category)

    def unpark(self, registration: str) -> Ticket:
        ticket = self.ticket_repo.get_active_by_registration(registration)
        if not ticket:
            logger.warning(f"Exit requested for unknown vehicle {registration}")
            raise VehicleNotFoundError(registration)

        ticket.close(datetime.now(timezone.utc))
        ticket.amount_paid = calculate_charge(
            ticket.category,
            ticket.duration_hours(),
            car_rate=self.config.CAR_HOURLY_RATE,
            bike_rate=self.config.BIKE_HOURLY_RATE,
            daily_max=self.config.DAILY_MAX_CHARGE,
            min_charge_hours=self.config.MIN_CHARGE_HOURS,
        )
        self._total_revenue += ticket.amount_paid

        self._floors[ticket.floor - 1].release_slot(ticket.slot_id)
        self.ticket_repo.remove(registration)

        logger.info(f"Vehicle {registration} exited. Amount: ${ticket.amount_paid:.2f}")
        return ticket

    def get_parking_status(self) -> Dict:
        total_slots = sum(floor.total_count for floor in self._floors)
        occupied_slots = sum(floor.occupied_count for floor in self._floors)

        floors = [
            {
                "floor": floor.number,
                "total": floor.total_count,
                "occupied": floor.occupied_count,
                "available": floor.available_count,
            }
            for floor in self._floors
        ]

        occupancy_rate = (occupied_slots / total_slots * 100) if total_slots > 0 else 0

        return {
            "total_slots": total_slots,
            "occupied_slots": occupied_slots,
            "available_slots": total_slots - occupied_slots,
            "occupancy_rate": round(occupancy_rate, 2),
            "total_revenue": round(self._total_revenue, 2),
            "floors": floors,
        }

    def get_active_tickets(self) -> List[Ticket]:
        return self.ticket_repo.get_active_tickets()

    def get_ticket(self, registration: str) -> Optional[Ticket]:
        return self.ticket_repo.get_active_by_registration(registration)
