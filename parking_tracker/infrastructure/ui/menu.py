import sys
from typing import Optional, TextIO

from loguru import logger
from pydantic import ValidationError

from parking_tracker.application.services.parking_service import ParkingService
from parking_tracker.domain.billing import billable_hours
from parking_tracker.domain.common import VehicleCategory
from parking_tracker.domain.errors import NoSlotAvailableError, VehicleNotFoundError, VehicleAlreadyParkedError
from parking_tracker.infrastructure.api.schemas.parking import VehicleEntry, VehicleExit, PaymentInfo, ParkingStatus

MENU = (
    "\n===== SMART PARKING SYSTEM =====\n"
    "1. Park Vehicle\n"
    "2. Unpark Vehicle\n"
    "3. View Status\n"
    "4. Exit\n"
    "Select option: "
)


class ParkingMenu:
    """Sequential text menu over a ParkingService.

    Any option other than 1, 2 or 3 (including non-numeric input and end of
    input) ends the loop.
    """

    def __init__(self, service: ParkingService, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def _prompt_number(self, text: str) -> Optional[int]:
        """Read a numeric option; None for end of input or non-numeric text."""
        answer = self._prompt(text)
        if answer is None:
            return None
        try:
            return int(answer)
        except ValueError:
            return None

    def run(self) -> int:
        self._write("Welcome to Smart Parking System")
        actions = {
            1: self.park_vehicle,
            2: self.unpark_vehicle,
            3: self.display_status,
        }
        while True:
            choice = self._prompt_number(MENU)
            action = actions.get(choice)
            if action is None:
                logger.debug(f"Leaving menu on input {choice!r}")
                return 0
            action()

    def park_vehicle(self) -> None:
        self._write("\n--- PARK VEHICLE ---")
        rates = self.service.config
        type_choice = self._prompt_number(
            f"1. Car (${rates.CAR_HOURLY_RATE:g}/hr)\n2. Bike (${rates.BIKE_HOURLY_RATE:g}/hr)\nSelect type: "
        )
        category = VehicleCategory.CAR if type_choice == 1 else VehicleCategory.BIKE
        registration = self._prompt("Enter Registration Number: ")

        try:
            entry = VehicleEntry(registration=registration or "", category=category)
        except ValidationError:
            self._write("Invalid registration number.")
            return

        try:
            ticket = self.service.park(entry.category, entry.registration)
        except VehicleAlreadyParkedError:
            self._write(f"Vehicle {entry.registration} is already parked.")
            return
        except NoSlotAvailableError:
            self._write("No slots available.")
            return

        self._write(f"Vehicle parked. Ticket ID: {ticket.id}")
        self._write(f"Slot: floor {ticket.floor}, slot {ticket.slot_id} (entered {ticket.formatted_entry_time()})")

    def unpark_vehicle(self) -> None:
        self._write("\n--- UNPARK VEHICLE ---")
        registration = self._prompt("Enter Registration Number: ")

        try:
            exit_data = VehicleExit(registration=registration or "")
        except ValidationError:
            self._write("Vehicle not found.")
            return

        try:
            ticket = self.service.unpark(exit_data.registration)
        except VehicleNotFoundError:
            self._write("Vehicle not found.")
            return

        duration = ticket.duration_hours()
        payment = PaymentInfo(
            ticket_id=ticket.id,
            registration=ticket.registration,
            entry_time=ticket.entry_time,
            exit_time=ticket.exit_time,
            duration_hours=round(duration, 2),
            billable_hours=billable_hours(duration, self.service.config.MIN_CHARGE_HOURS),
            amount_due=ticket.amount_paid,
        )
        self._write(f"Parking charge: ${payment.amount_due:.2f}")
        self._write(f"Duration: {payment.duration_hours:.2f} h, billed {payment.billable_hours:g} h")

    def display_status(self) -> None:
        status = ParkingStatus(**self.service.get_parking_status())
        self._write(f"\nTotal Slots: {status.total_slots}")
        self._write(f"Occupied: {status.occupied_slots}")
        self._write(f"Available: {status.available_slots}")
        for floor in status.floors:
            self._write(f"  Floor {floor.floor}: {floor.occupied}/{floor.total} occupied, {floor.available} available")
        self._write(f"Revenue collected: ${status.total_revenue:.2f}")
