"""Result models — calculation output contracts."""

from fuel_calculator.models.results import CostBreakdown, VehicleCost

__all__ = [
    "CostBreakdown",
    "VehicleCost",
]
