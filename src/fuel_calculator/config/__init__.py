"""Configuration models — catalog, fuel pricing and trip inputs."""

from fuel_calculator.config.vehicle import Vehicle
from fuel_calculator.config.catalog import DEFAULT_CATALOG, DEFAULT_VEHICLES, VehicleCatalog
from fuel_calculator.config.fuel import FuelConfig
from fuel_calculator.config.trip import MAX_DISTANCE, MAX_PASSENGERS, TripInput
from fuel_calculator.config.calculator import CalculatorConfig

__all__ = [
    "Vehicle",
    "VehicleCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_VEHICLES",
    "FuelConfig",
    "TripInput",
    "MAX_DISTANCE",
    "MAX_PASSENGERS",
    "CalculatorConfig",
]
