import math

from parking_tracker.domain.common import VehicleCategory, hourly_rate, CAR_HOURLY_RATE, BIKE_HOURLY_RATE

DAILY_MAX_CHARGE = 200.0
MIN_CHARGE_HOURS = 1.0


def billable_hours(duration_hours: float, min_charge_hours: float = MIN_CHARGE_HOURS) -> float:
    """Round a stay up to whole hours, never below the minimum charge."""
    return max(float(math.ceil(duration_hours)), min_charge_hours)


def calculate_charge(
    category: VehicleCategory,
    duration_hours: float,
    car_rate: float = CAR_HOURLY_RATE,
    bike_rate: float = BIKE_HOURLY_RATE,
    daily_max: float = DAILY_MAX_CHARGE,
    min_charge_hours: float = MIN_CHARGE_HOURS,
) -> float:
    hours = billable_hours(duration_hours, min_charge_hours)
    rate = hourly_rate(category, car_rate=car_rate, bike_rate=bike_rate)
    return round(min(hours * rate, daily_max), 2)
