from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=False, description="Enable trace logging")

    # Facility layout
    PARKING_FLOORS: int = Field(default=3, ge=1, description="Number of parking floors")
    CAR_SLOTS_PER_FLOOR: int = Field(default=10, ge=0, description="Car slots per floor")
    BIKE_SLOTS_PER_FLOOR: int = Field(default=5, ge=0, description="Bike slots per floor")

    # Billing
    CAR_HOURLY_RATE: float = Field(default=20.0, gt=0, description="Hourly rate for cars")
    BIKE_HOURLY_RATE: float = Field(default=10.0, gt=0, description="Hourly rate for bikes")
    DAILY_MAX_CHARGE: float = Field(default=200.0, gt=0, description="Cap applied to a single session")
    MIN_CHARGE_HOURS: float = Field(default=1.0, ge=0, description="Minimum billable hours")

    # Ticketing
    FIRST_TICKET_ID: int = Field(default=1001, ge=1, description="Id of the first issued ticket")


# Create settings instance
settings = Settings()
