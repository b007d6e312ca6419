"""Result types — the contract between engine, formatter, API and dashboard.

Values are stored unrounded.  Rounding to two decimals is a display concern
handled by ``fuel_calculator.api.summary``.
"""

from __future__ import annotations

from pydantic import BaseModel, computed_field


class VehicleCost(BaseModel):
    """Fuel used and money spent by one vehicle over the whole trip."""

    vehicle_id: str
    liters_used: float
    """total_distance × consumption_rate / 100."""
    cost: float
    """liters_used × fuel_price_per_liter."""


class CostBreakdown(BaseModel):
    """Outcome of one trip calculation.

    Rebuilt from scratch on every submission; nothing here is persisted.
    """

    total_distance: float
    """One-way distance, doubled for a round trip."""

    fuel_price_per_liter: float
    """Price used for this computation."""

    primary: VehicleCost

    secondary: VehicleCost | None = None
    """Present only when a valid, distinct, available second vehicle was resolved."""

    passenger_count: int

    cost_per_person: float
    """(primary.cost + secondary.cost) / passenger_count."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_cost(self) -> float:
        return self.primary.cost + (self.secondary.cost if self.secondary else 0.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_liters(self) -> float:
        return self.primary.liters_used + (self.secondary.liters_used if self.secondary else 0.0)
