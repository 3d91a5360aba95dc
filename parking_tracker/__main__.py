import sys

from parking_tracker.shared.utils import logger
from parking_tracker.application.services.parking_service import ParkingService
from parking_tracker.infrastructure.ui.menu import ParkingMenu


def main() -> int:
    service = ParkingService()
    logger.debug(f"Facility ready: {service.get_parking_status()['total_slots']} slots")
    return ParkingMenu(service).run()


if __name__ == "__main__":
    sys.exit(main())
