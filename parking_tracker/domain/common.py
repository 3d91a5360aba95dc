from enum import Enum


class VehicleCategory(str, Enum):
    CAR = "car"
    BIKE = "bike"
    ELECTRIC_CAR = "electric_car"
    HANDICAPPED_CAR = "handicapped_car"
    HANDICAPPED_BIKE = "handicapped_bike"

    @property
    def hourly_rate(self) -> float:
        return hourly_rate(self)

    @property
    def label(self) -> str:
        return display_label(self)


class SlotStatus(str, Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    # Declared for layout completeness; nothing transitions into these yet.
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


CAR_HOURLY_RATE = 20.0
BIKE_HOURLY_RATE = 10.0

# (base category, multiplier applied to the base rate)
_RATE_RULES = {
    VehicleCategory.CAR: (VehicleCategory.CAR, 1.0),
    VehicleCategory.BIKE: (VehicleCategory.BIKE, 1.0),
    VehicleCategory.ELECTRIC_CAR: (VehicleCategory.CAR, 0.8),
    VehicleCategory.HANDICAPPED_CAR: (VehicleCategory.CAR, 0.5),
    VehicleCategory.HANDICAPPED_BIKE: (VehicleCategory.BIKE, 0.5),
}

_LABELS = {
    VehicleCategory.CAR: "Car",
    VehicleCategory.BIKE: "Bike",
    VehicleCategory.ELECTRIC_CAR: "Electric Car",
    VehicleCategory.HANDICAPPED_CAR: "Handicapped Car",
    VehicleCategory.HANDICAPPED_BIKE: "Handicapped Bike",
}


def hourly_rate(
    category: VehicleCategory,
    car_rate: float = CAR_HOURLY_RATE,
    bike_rate: float = BIKE_HOURLY_RATE,
) -> float:
    """Return the hourly rate for a vehicle category.

    Electric and handicapped categories are discounted from the car or bike
    base rate, so overriding a base rate moves its derived rates with it.
    """
    base, multiplier = _RATE_RULES[VehicleCategory(category)]
    base_rate = car_rate if base is VehicleCategory.CAR else bike_rate
    return base_rate * multiplier


def display_label(category: VehicleCategory) -> str:
    return _LABELS[VehicleCategory(category)]
