class ParkingError(ValueError):
    """Base class for parking domain errors."""


class NoSlotAvailableError(ParkingError):
    def __init__(self, category):
        self.category = category
        super().__init__(f"No available {category.value} slots")


class VehicleNotFoundError(ParkingError):
    def __init__(self, registration: str):
        self.registration = registration
        super().__init__(f"No active ticket for vehicle {registration}")


class VehicleAlreadyParkedError(ParkingError):
    def __init__(self, registration: str, ticket_id: int):
        self.registration = registration
        self.ticket_id = ticket_id
        super().__init__(f"Vehicle {registration} is already in the parking (ticket {ticket_id})")


class SlotNotOccupiedError(ParkingError):
    def __init__(self, floor: int, slot_id: int):
        self.floor = floor
        self.slot_id = slot_id
        super().__init__(f"Slot {floor}-{slot_id:02d} is not occupied")


class TicketAlreadyClosedError(ParkingError):
    def __init__(self, ticket_id: int):
        self.ticket_id = ticket_id
        super().__init__(f"Ticket {ticket_id} is already closed")
