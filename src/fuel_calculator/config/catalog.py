"""Vehicle catalog — the fixed list of cars the calculator knows about.

The catalog is built once and never mutated.  Lookups return ``None`` for
unknown ids; it is up to the caller to decide whether that is an error.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fuel_calculator.config.vehicle import Vehicle


class VehicleCatalog(BaseModel):
    """Ordered, read-only collection of vehicles keyed by ``id``."""

    model_config = ConfigDict(frozen=True)

    vehicles: tuple[Vehicle, ...] = Field(default=(), description="Vehicles in display order")

    @model_validator(mode="after")
    def _ids_are_unique(self) -> VehicleCatalog:
        seen: set[str] = set()
        for v in self.vehicles:
            if v.id in seen:
                raise ValueError(f"duplicate vehicle id: {v.id!r}")
            seen.add(v.id)
        return self

    def __iter__(self) -> Iterator[Vehicle]:  # type: ignore[override]
        return iter(self.vehicles)

    def __len__(self) -> int:
        return len(self.vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        return self.get(vehicle_id) is not None if isinstance(vehicle_id, str) else False

    def get(self, vehicle_id: str | None) -> Vehicle | None:
        """Return the vehicle with ``vehicle_id``, or ``None``."""
        if not vehicle_id:
            return None
        for v in self.vehicles:
            if v.id == vehicle_id:
                return v
        return None

    def available(self) -> list[Vehicle]:
        """Vehicles that can be picked for a calculation, in catalog order."""
        return [v for v in self.vehicles if v.available]

    def second_vehicle_choices(self, primary_id: str | None) -> list[Vehicle]:
        """Available vehicles minus the primary selection."""
        return [v for v in self.vehicles if v.available and v.id != primary_id]


DEFAULT_VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(id="mario", name="Mario", model="Ford Focus", consumption_rate=8, available=True),
    Vehicle(id="maribel", name="Maribel", model="Kia Rio", consumption_rate=7, available=True),
    Vehicle(id="teran", name="Teran", model="Ford Mondeo", consumption_rate=7, available=True),
    Vehicle(id="canton", name="Canton", model="Opel Astra", consumption_rate=6.5, available=True),
    Vehicle(id="amanda", name="Amanda", model="Ford Mondeo", consumption_rate=7, available=False),
    Vehicle(id="nuria", name="Nuria", model="Peugeot 208", consumption_rate=7, available=False),
    Vehicle(id="judith", name="Judith", model="Seat Ibiza", consumption_rate=7, available=False),
    Vehicle(id="brian", name="Brian", model="Renault Clio", consumption_rate=7, available=False),
)

DEFAULT_CATALOG = VehicleCatalog(vehicles=DEFAULT_VEHICLES)
