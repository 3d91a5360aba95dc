from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from parking_tracker.domain.common import VehicleCategory, SlotStatus
from parking_tracker.domain.errors import SlotNotOccupiedError, TicketAlreadyClosedError


@dataclass(frozen=True)
class Vehicle:
    registration: str
    category: VehicleCategory


class ParkingSlot:
    def __init__(
        self, id: int, floor: int, allowed_category: VehicleCategory, status: SlotStatus = SlotStatus.FREE
    ):
        self.id = id
        self.floor = floor
        self.allowed_category = allowed_category
        self.status = status
        self.vehicle: Optional[Vehicle] = None
        self.occupied_since: Optional[datetime] = None

    @property
    def is_occupied(self) -> bool:
        return self.status == SlotStatus.OCCUPIED

    def is_compatible(self, category: VehicleCategory) -> bool:
        return self.status == SlotStatus.FREE and self.allowed_category == category

    def assign(self, vehicle: Vehicle) -> bool:
        if not self.is_compatible(vehicle.category):
            return False
        self.vehicle = vehicle
        self.status = SlotStatus.OCCUPIED
        self.occupied_since = datetime.now(timezone.utc)
        return True

    def release(self) -> Vehicle:
        if not self.is_occupied:
            raise SlotNotOccupiedError(self.floor, self.id)
        vehicle, self.vehicle = self.vehicle, None
        self.status = SlotStatus.FREE
        self.occupied_since = None
        return vehicle

    def __repr__(self) -> str:
        return f"ParkingSlot(floor={self.floor}, id={self.id}, {self.allowed_category.value}, {self.status.value})"


class ParkingFloor:
    """A floor of slots: car slots first, then bike slots, ids starting at 1."""

    def __init__(self, number: int, car_slots: int, bike_slots: int):
        self.number = number
        self.slots: List[ParkingSlot] = []
        self._occupied = 0

        slot_id = 1
        for _ in range(car_slots):
            self.slots.append(ParkingSlot(slot_id, number, VehicleCategory.CAR))
            slot_id += 1
        for _ in range(bike_slots):
            self.slots.append(ParkingSlot(slot_id, number, VehicleCategory.BIKE))
            slot_id += 1

    def get_slot(self, slot_id: int) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        return None

    def find_available_slot(self, category: VehicleCategory) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.is_compatible(category):
                return slot
        return None

    def assign_vehicle(self, slot_id: int, vehicle: Vehicle) -> bool:
        slot = self.get_slot(slot_id)
        if slot is None or not slot.assign(vehicle):
            return False
        self._occupied += 1
        return True

    def release_slot(self, slot_id: int) -> Optional[Vehicle]:
        slot = self.get_slot(slot_id)
        if slot is None or not slot.is_occupied:
            return None
        self._occupied -= 1
        return slot.release()

    @property
    def occupied_count(self) -> int:
        return self._occupied

    @property
    def total_count(self) -> int:
        return len(self.slots)

    @property
    def available_count(self) -> int:
        return self.total_count - self._occupied


class Ticket:
    def __init__(
        self,
        id: int,
        registration: str,
        category: VehicleCategory,
        floor: int,
        slot_id: int,
        entry_time: Optional[datetime] = None,
    ):
        self.id = id
        self.registration = registration
        self.category = category
        self.floor = floor
        self.slot_id = slot_id
        self.entry_time = entry_time or datetime.now(timezone.utc)
        self.exit_time: Optional[datetime] = None
        self.is_active = True
        self.amount_paid: Optional[float] = None

    def close(self, now: Optional[datetime] = None) -> None:
        if not self.is_active:
            raise TicketAlreadyClosedError(self.id)
        self.exit_time = now or datetime.now(timezone.utc)
        self.is_active = False

    def duration_hours(self, now: Optional[datetime] = None) -> float:
        """Hours parked so far, or the whole stay once the ticket is closed."""
        if self.is_active:
            end_time = now or datetime.now(timezone.utc)
        else:
            end_time = self.exit_time
        return (end_time - self.entry_time).total_seconds() / 3600

    def formatted_entry_time(self) -> str:
        return self.entry_time.astimezone().strftime("%Y-%m-%d %H:%M:%S")

    def __repr__(self) -> str:
        return f"Ticket(id={self.id}, registration={self.registration!r}, slot={self.floor}-{self.slot_id:02d})"
