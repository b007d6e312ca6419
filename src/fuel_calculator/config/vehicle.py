"""Vehicle record — one entry of the static catalog."""

from pydantic import BaseModel, ConfigDict, Field


class Vehicle(BaseModel):
    """One known vehicle, fixed at startup."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique short identifier")
    name: str = Field(description="Owner / display name")
    model: str = Field(default="", description="Make and model shown next to the name")
    consumption_rate: float = Field(gt=0, description="Fuel consumption (L/100 km)")
    available: bool = Field(
        default=True,
        description="Unavailable vehicles are listed for display but cannot be "
                    "picked for a calculation.",
    )
