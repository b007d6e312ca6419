"""Engine — trip validation and fuel cost computation."""

from fuel_calculator.engine.validation import (
    FieldIssue,
    TripValidationError,
    check_trip_input,
    parse_trip_input,
)
from fuel_calculator.engine.trip_cost import (
    compute_trip_cost,
    compute_vehicle_cost,
    resolve_secondary_vehicle,
    trip_total_distance,
)

__all__ = [
    "FieldIssue",
    "TripValidationError",
    "check_trip_input",
    "parse_trip_input",
    "compute_trip_cost",
    "compute_vehicle_cost",
    "resolve_secondary_vehicle",
    "trip_total_distance",
]
