from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime
from typing import Optional, List

from parking_tracker.domain.common import VehicleCategory


class VehicleEntry(BaseModel):
    registration: str = Field(..., min_length=1)
    category: VehicleCategory = VehicleCategory.CAR

    @field_validator('registration', mode='before')
    def strip_registration(cls, v):  # pylint: disable=no-self-argument
        return v.strip() if isinstance(v, str) else v


class VehicleExit(BaseModel):
    registration: str = Field(..., min_length=1)

    @field_validator('registration', mode='before')
    def strip_registration(cls, v):  # pylint: disable=no-self-argument
        return v.strip() if isinstance(v, str) else v


class TicketResponse(BaseModel):
    id: int
    registration: str
    category: VehicleCategory
    floor: int = Field(..., ge=1)
    slot_id: int = Field(..., ge=1)
    entry_time: datetime
    exit_time: Optional[datetime] = None
    is_active: bool
    amount_paid: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentInfo(BaseModel):
    ticket_id: int
    registration: str
    entry_time: datetime
    exit_time: datetime
    duration_hours: float
    billable_hours: float
    amount_due: float


class FloorStatus(BaseModel):
    floor: int
    total: int
    occupied: int
    available: int


class ParkingStatus(BaseModel):
    total_slots: int
    occupied_slots: int
    available_slots: int
    occupancy_rate: float
    total_revenue: float
    floors: List[FloorStatus]
