"""Trip input — one form submission."""

from pydantic import BaseModel, Field, field_validator

MAX_PASSENGERS = 10
MAX_DISTANCE = 1_000_000


class TripInput(BaseModel):
    """What the user entered for one calculation.

    Field constraints reject obviously bad values at parse time; the
    calculator re-checks them and also resolves the vehicle ids against the
    catalog before computing anything.
    """

    primary_vehicle_id: str = Field(min_length=1, description="Vehicle that makes the trip")
    secondary_vehicle_id: str | None = Field(
        default=None,
        description="Second vehicle.  Only used when use_second_vehicle is true.",
    )
    distance: float = Field(
        gt=0, le=MAX_DISTANCE, allow_inf_nan=False, description="One-way distance (km)",
    )
    round_trip: bool = Field(default=False, description="Doubles the distance when true")
    passenger_count: int = Field(ge=1, le=MAX_PASSENGERS, description="People sharing the cost")
    use_second_vehicle: bool = Field(
        default=False,
        description="Gate for the second vehicle.  When false, secondary_vehicle_id is ignored.",
    )

    @field_validator("distance", "passenger_count", mode="before")
    @classmethod
    def _reject_booleans(cls, value):
        # pydantic's lax mode would read true/false as 1/0
        if isinstance(value, bool):
            raise ValueError("expected a number, not a boolean")
        return value
