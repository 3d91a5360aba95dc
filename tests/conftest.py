import pytest
from freezegun import freeze_time
from datetime import datetime, timedelta, timezone

from parking_tracker.application.services.parking_service import ParkingService
from parking_tracker.config.settings_env import Settings
from parking_tracker.domain.common import VehicleCategory
from parking_tracker.infrastructure.persistence.in_memory_repositories import InMemoryTicketRepository


@pytest.fixture
def test_settings():
    """Provide test settings matching the default facility layout."""
    return Settings(
        DEV_MODE=False,
        PARKING_FLOORS=3,
        CAR_SLOTS_PER_FLOOR=10,
        BIKE_SLOTS_PER_FLOOR=5,
        CAR_HOURLY_RATE=20.0,
        BIKE_HOURLY_RATE=10.0,
        DAILY_MAX_CHARGE=200.0,
        MIN_CHARGE_HOURS=1.0,
        FIRST_TICKET_ID=1001,
    )


@pytest.fixture
def ticket_repo():
    return InMemoryTicketRepository()


@pytest.fixture
def parking_service(test_settings, ticket_repo):
    """A 3 floor x (10 car, 5 bike) facility."""
    return ParkingService(ticket_repo=ticket_repo, config=test_settings)


@pytest.fixture
def small_service(test_settings):
    """Two floors with a single car slot and a single bike slot each."""
    return ParkingService(num_floors=2, car_slots_per_floor=1, bike_slots_per_floor=1, config=test_settings)


@pytest.fixture
def parked_vehicle(parking_service):
    """A car that entered two hours ago."""
    with freeze_time(datetime.now(timezone.utc) - timedelta(hours=2)):
        ticket = parking_service.park(VehicleCategory.CAR, "PARKED-123")
    return ticket
