"""Shared test fixtures — the default catalog plus a small synthetic one."""

from __future__ import annotations

import pytest

from fuel_calculator.config import (
    DEFAULT_CATALOG,
    FuelConfig,
    TripInput,
    Vehicle,
    VehicleCatalog,
)

FUEL_PRICE = 1.45


@pytest.fixture
def catalog() -> VehicleCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def fuel() -> FuelConfig:
    return FuelConfig(price_per_liter=FUEL_PRICE)


@pytest.fixture
def small_catalog() -> VehicleCatalog:
    return VehicleCatalog(vehicles=(
        Vehicle(id="focus", name="Mario", model="Ford Focus", consumption_rate=8),
        Vehicle(id="rio", name="Maribel", model="Kia Rio", consumption_rate=7),
        Vehicle(id="astra", name="Canton", model="Opel Astra", consumption_rate=6.5),
        Vehicle(id="clio", name="Brian", model="Renault Clio", consumption_rate=7, available=False),
    ))


@pytest.fixture
def one_way_trip() -> TripInput:
    """8 L/100 km car, 100 km one-way, 1 passenger."""
    return TripInput(primary_vehicle_id="mario", distance=100, passenger_count=1)


@pytest.fixture
def two_car_trip() -> TripInput:
    """8 + 7 L/100 km cars, 100 km one-way, 3 passengers."""
    return TripInput(
        primary_vehicle_id="mario",
        secondary_vehicle_id="maribel",
        use_second_vehicle=True,
        distance=100,
        passenger_count=3,
    )
