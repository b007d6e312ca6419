"""Trip fuel cost — the whole calculation.

Pure arithmetic: trip input + catalog + fuel price → CostBreakdown.

    total_distance  = distance × 2 if round trip else distance
    liters          = total_distance × consumption_rate / 100
    cost            = liters × fuel_price_per_liter
    cost_per_person = (primary.cost + secondary.cost) / passenger_count

No rounding happens here.
"""

from __future__ import annotations

import logging
import math

from fuel_calculator.config.catalog import VehicleCatalog
from fuel_calculator.config.trip import TripInput
from fuel_calculator.config.vehicle import Vehicle
from fuel_calculator.engine.validation import (
    MSG_COST_OUT_OF_RANGE,
    MSG_SELECT_VEHICLE,
    FieldIssue,
    TripValidationError,
    check_trip_input,
)
from fuel_calculator.models.results import CostBreakdown, VehicleCost

logger = logging.getLogger(__name__)


def trip_total_distance(trip: TripInput) -> float:
    """One-way distance, doubled for a round trip."""
    return trip.distance * 2 if trip.round_trip else trip.distance


def compute_vehicle_cost(
    vehicle: Vehicle,
    total_distance: float,
    fuel_price_per_liter: float,
) -> VehicleCost:
    """Litres and cost for one vehicle covering ``total_distance``."""
    liters_used = total_distance * vehicle.consumption_rate / 100
    return VehicleCost(
        vehicle_id=vehicle.id,
        liters_used=liters_used,
        cost=liters_used * fuel_price_per_liter,
    )


def resolve_secondary_vehicle(trip: TripInput, catalog: VehicleCatalog) -> Vehicle | None:
    """The second vehicle to include, or ``None`` when there is none to use.

    ``None`` when the toggle is off, the id is empty or unknown, the vehicle
    is unavailable, or it is the same vehicle as the primary.  None of these
    is an error: the trip is simply computed for one vehicle.
    """
    if not trip.use_second_vehicle or not trip.secondary_vehicle_id:
        return None
    if trip.secondary_vehicle_id == trip.primary_vehicle_id:
        return None
    vehicle = catalog.get(trip.secondary_vehicle_id)
    if vehicle is None or not vehicle.available:
        return None
    return vehicle


def compute_trip_cost(
    trip: TripInput,
    catalog: VehicleCatalog,
    fuel_price_per_liter: float,
) -> CostBreakdown:
    """Compute the fuel cost breakdown for ``trip``.

    Raises ``TripValidationError`` (listing every failing field) when the
    primary vehicle does not resolve to an available vehicle, the distance
    is not positive or too long, the passenger count is outside 1–10, or
    the resulting cost is not a finite number.
    """
    issues = check_trip_input(trip, catalog, fuel_price_per_liter)
    if issues:
        logger.info("Trip rejected: %s", ", ".join(i.field for i in issues))
        raise TripValidationError(issues)

    primary_vehicle = catalog.get(trip.primary_vehicle_id)
    if primary_vehicle is None:
        raise TripValidationError([FieldIssue(field="primary_vehicle_id", message=MSG_SELECT_VEHICLE)])

    total_distance = trip_total_distance(trip)
    primary = compute_vehicle_cost(primary_vehicle, total_distance, fuel_price_per_liter)

    secondary = None
    secondary_vehicle = resolve_secondary_vehicle(trip, catalog)
    if secondary_vehicle is not None:
        secondary = compute_vehicle_cost(secondary_vehicle, total_distance, fuel_price_per_liter)
    elif trip.use_second_vehicle:
        logger.debug(
            "Second vehicle %r not usable with primary %r; computing one vehicle",
            trip.secondary_vehicle_id, trip.primary_vehicle_id,
        )

    total_cost = primary.cost + (secondary.cost if secondary else 0.0)
    cost_per_person = total_cost / trip.passenger_count
    if not (math.isfinite(total_cost) and math.isfinite(cost_per_person)):
        logger.info("Trip rejected: cost overflows for distance %r", trip.distance)
        raise TripValidationError([FieldIssue(field="distance", message=MSG_COST_OUT_OF_RANGE)])

    logger.debug(
        "Trip %s: distance %.1f, vehicles %d, total %.4f, per person %.4f",
        trip.primary_vehicle_id, total_distance, 2 if secondary else 1,
        total_cost, cost_per_person,
    )

    return CostBreakdown(
        total_distance=total_distance,
        fuel_price_per_liter=fuel_price_per_liter,
        primary=primary,
        secondary=secondary,
        passenger_count=trip.passenger_count,
        cost_per_person=cost_per_person,
    )
