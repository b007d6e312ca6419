"""Fuel pricing — one fixed price shared by every calculation."""

from pydantic import BaseModel, ConfigDict, Field


class FuelConfig(BaseModel):
    """Fuel price and the units it is quoted in."""

    model_config = ConfigDict(frozen=True)

    price_per_liter: float = Field(default=1.45, gt=0, description="Petrol price (€/L)")
    currency_symbol: str = Field(default="€", description="Symbol appended to money amounts")
    distance_unit: str = Field(default="km", description="Unit of every distance input")
