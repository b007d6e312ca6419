"""Top-level calculator configuration — catalog plus fuel pricing."""

from pydantic import BaseModel, Field

from fuel_calculator.config.catalog import DEFAULT_VEHICLES, VehicleCatalog
from fuel_calculator.config.fuel import FuelConfig
from fuel_calculator.config.vehicle import Vehicle


class CalculatorConfig(BaseModel):
    """Static inputs shared by every calculation."""

    vehicles: tuple[Vehicle, ...] = Field(default=DEFAULT_VEHICLES)
    fuel: FuelConfig = Field(default_factory=FuelConfig)

    def catalog(self) -> VehicleCatalog:
        return VehicleCatalog(vehicles=self.vehicles)
