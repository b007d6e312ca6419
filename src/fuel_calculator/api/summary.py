"""Summary formatter — shareable plain-text description of a calculation.

Converts a ``CostBreakdown`` (plus the trip that produced it) into the
fixed-structure message users paste into a chat:

  1. Trip details (total distance, passengers, trip type)
  2. Primary vehicle (name, model, consumption, litres, cost)
  3. Second vehicle, same shape, when there is one
  4. Summary (fuel price, combined cost, cost per person)

The ``*...*`` markers render as bold in WhatsApp.  Output depends only on
the inputs: no locale, clock or randomness is involved.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from fuel_calculator.config.catalog import DEFAULT_CATALOG, VehicleCatalog
from fuel_calculator.config.fuel import FuelConfig
from fuel_calculator.config.trip import TripInput
from fuel_calculator.config.vehicle import Vehicle
from fuel_calculator.models.results import CostBreakdown, VehicleCost

DEFAULT_LANGUAGE = "es"

LABELS: dict[str, dict[str, str]] = {
    "es": {
        "header": "🚗 *Cálculo de Gastos de Gasolina* 🚗",
        "trip_title": "*Detalles del Viaje:*",
        "total_distance": "Distancia total",
        "passengers": "Personas",
        "trip_type": "Tipo de viaje",
        "round_trip": "Ida y vuelta",
        "one_way": "Solo ida",
        "primary_title": "*Coche Principal:*",
        "secondary_title": "*Segundo Coche:*",
        "consumption": "Consumo",
        "liters": "Litros usados",
        "cost": "Coste",
        "summary_title": "*Resumen:*",
        "fuel_price": "Precio gasolina",
        "total_cost": "Coste total",
        "cost_per_person": "Coste por persona",
        "footer": "Calculado con la app de Mario 👨‍💻",
    },
    "en": {
        "header": "🚗 *Fuel Cost Calculation* 🚗",
        "trip_title": "*Trip Details:*",
        "total_distance": "Total distance",
        "passengers": "People",
        "trip_type": "Trip type",
        "round_trip": "Round trip",
        "one_way": "One way",
        "primary_title": "*Main Car:*",
        "secondary_title": "*Second Car:*",
        "consumption": "Consumption",
        "liters": "Litres used",
        "cost": "Cost",
        "summary_title": "*Summary:*",
        "fuel_price": "Fuel price",
        "total_cost": "Total cost",
        "cost_per_person": "Cost per person",
        "footer": "Calculated with Mario's app 👨‍💻",
    },
}


# ═══════════════════════════════════════════════════════════════════════════
# Number rendering
# ═══════════════════════════════════════════════════════════════════════════

def fixed2(value: float) -> str:
    """Two decimals, halves rounded up (``0.125`` → ``"0.13"``).

    Like a browser's ``toFixed(2)``: magnitudes of 1e21 and above fall back
    to ``plain_number``.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    if abs(value) >= 1e21:
        return plain_number(value)
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def plain_number(value: float) -> str:
    """Shortest form of a number, written the way a browser prints it.

    ``200.0`` → ``"200"``, ``6.5`` → ``"6.5"``, ``1e-7`` → ``"1e-7"``,
    ``1e21`` → ``"1e+21"``.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr gives the shortest digit string that round-trips
    exact = Decimal(repr(abs(value))).normalize()
    digits = "".join(str(d) for d in exact.as_tuple().digits)
    k = len(digits)
    n = exact.as_tuple().exponent + k  # decimal point position

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + digits
    exponent = f"{n - 1:+d}"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + "e" + exponent


# ═══════════════════════════════════════════════════════════════════════════
# Share message
# ═══════════════════════════════════════════════════════════════════════════

def _lookup(catalog: VehicleCatalog, vc: VehicleCost) -> Vehicle:
    vehicle = catalog.get(vc.vehicle_id)
    if vehicle is None:
        raise ValueError(f"vehicle {vc.vehicle_id!r} is not in the catalog")
    return vehicle


def _vehicle_block(
    title: str,
    vehicle: Vehicle,
    vc: VehicleCost,
    labels: dict[str, str],
    fuel: FuelConfig,
) -> list[str]:
    return [
        title,
        f"- {vehicle.name} ({vehicle.model})",
        f"- {labels['consumption']}: {plain_number(vehicle.consumption_rate)} L/100{fuel.distance_unit}",
        f"- {labels['liters']}: {fixed2(vc.liters_used)} L",
        f"- {labels['cost']}: {fixed2(vc.cost)} {fuel.currency_symbol}",
        "",
    ]


def format_summary(
    trip: TripInput,
    breakdown: CostBreakdown,
    catalog: VehicleCatalog = DEFAULT_CATALOG,
    fuel: FuelConfig | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Render the share message for one calculation.

    Vehicle names and models come from ``catalog``; the fuel price is the
    one stored on the breakdown.  ``fuel`` only supplies the currency symbol
    and distance unit.
    """
    if language not in LABELS:
        raise ValueError(f"unsupported language {language!r}; choose one of {sorted(LABELS)}")
    labels = LABELS[language]
    fuel = fuel or FuelConfig()
    money = fuel.currency_symbol

    lines: list[str] = [labels["header"], ""]

    lines.append(labels["trip_title"])
    lines.append(f"- {labels['total_distance']}: {plain_number(breakdown.total_distance)} {fuel.distance_unit}")
    lines.append(f"- {labels['passengers']}: {trip.passenger_count}")
    lines.append(f"- {labels['trip_type']}: {labels['round_trip'] if trip.round_trip else labels['one_way']}")
    lines.append("")

    lines.extend(_vehicle_block(
        labels["primary_title"], _lookup(catalog, breakdown.primary), breakdown.primary, labels, fuel,
    ))
    if breakdown.secondary is not None:
        lines.extend(_vehicle_block(
            labels["secondary_title"], _lookup(catalog, breakdown.secondary), breakdown.secondary, labels, fuel,
        ))

    lines.append(labels["summary_title"])
    lines.append(f"- {labels['fuel_price']}: {fixed2(breakdown.fuel_price_per_liter)} {money}/L")
    lines.append(f"- {labels['total_cost']}: {fixed2(breakdown.total_cost)} {money}")
    lines.append(f"- {labels['cost_per_person']}: {fixed2(breakdown.cost_per_person)} {money}")
    lines.append("")

    lines.append(labels["footer"])
    return "\n".join(lines)


# ═══════════════════════════════════════════════════════════════════════════
# Result card values
# ═══════════════════════════════════════════════════════════════════════════

class DisplayValues(BaseModel):
    """Pre-formatted strings for the on-screen result card."""
    total_distance: str
    cost_per_person: str
    total_cost: str
    primary_liters: str
    primary_cost: str
    secondary_liters: str | None = None
    secondary_cost: str | None = None


def format_display(breakdown: CostBreakdown, fuel: FuelConfig | None = None) -> DisplayValues:
    """Round the breakdown for display without touching the stored values."""
    fuel = fuel or FuelConfig()
    money = fuel.currency_symbol
    sec = breakdown.secondary
    return DisplayValues(
        total_distance=f"{plain_number(breakdown.total_distance)} {fuel.distance_unit}",
        cost_per_person=f"{fixed2(breakdown.cost_per_person)} {money}",
        total_cost=f"{fixed2(breakdown.total_cost)} {money}",
        primary_liters=f"{fixed2(breakdown.primary.liters_used)} L",
        primary_cost=f"{fixed2(breakdown.primary.cost)} {money}",
        secondary_liters=f"{fixed2(sec.liters_used)} L" if sec else None,
        secondary_cost=f"{fixed2(sec.cost)} {money}" if sec else None,
    )
