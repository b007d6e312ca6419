"""Trip input validation.

Two entry points:

* ``parse_trip_input`` turns raw form / JSON data into a ``TripInput`` and
  converts pydantic's errors into per-field messages.
* ``check_trip_input`` re-checks a ``TripInput`` against the catalog.  The
  calculator always runs it, so a hand-built (or ``model_construct``-ed)
  input cannot skip validation.

Both report every failing field, not only the first one, so a form can show
each message next to its input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fuel_calculator.config.catalog import VehicleCatalog
from fuel_calculator.config.trip import MAX_DISTANCE, MAX_PASSENGERS, TripInput

logger = logging.getLogger(__name__)

MSG_SELECT_VEHICLE = "Select a vehicle"
MSG_ENTER_DISTANCE = "Enter the distance"
MSG_DISTANCE_TOO_LONG = f"At most {MAX_DISTANCE} km"
MSG_COST_OUT_OF_RANGE = "Distance too large to compute a cost"
MSG_ENTER_PASSENGERS = "Enter the number of passengers"
MSG_TOO_MANY_PASSENGERS = f"At most {MAX_PASSENGERS} passengers"


class FieldIssue(BaseModel):
    """One problem with one input field."""
    field: str
    message: str


class TripValidationError(Exception):
    """Trip input rejected; no breakdown is produced."""

    def __init__(self, issues: list[FieldIssue]):
        self.issues = issues
        super().__init__("; ".join(f"{i.field}: {i.message}" for i in issues))

    def for_field(self, field: str) -> list[str]:
        """Messages attached to ``field``, in the order they were found."""
        return [i.message for i in self.issues if i.field == field]


def _message_for(field: str, error_type: str, default: str) -> str:
    if field == "primary_vehicle_id":
        return MSG_SELECT_VEHICLE
    if field == "distance":
        return MSG_DISTANCE_TOO_LONG if error_type == "less_than_equal" else MSG_ENTER_DISTANCE
    if field == "passenger_count":
        return MSG_TOO_MANY_PASSENGERS if error_type == "less_than_equal" else MSG_ENTER_PASSENGERS
    return default


def parse_trip_input(data: Mapping[str, Any]) -> TripInput:
    """Build a ``TripInput`` from raw data or raise ``TripValidationError``."""
    try:
        return TripInput.model_validate(dict(data))
    except PydanticValidationError as exc:
        issues: list[FieldIssue] = []
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            if any(i.field == field for i in issues):
                continue
            issues.append(FieldIssue(field=field, message=_message_for(field, err["type"], err["msg"])))
        logger.info("Trip input rejected at parse: %s", [i.field for i in issues])
        raise TripValidationError(issues) from exc


def check_trip_input(
    trip: TripInput,
    catalog: VehicleCatalog,
    fuel_price_per_liter: float,
) -> list[FieldIssue]:
    """Return every issue that prevents computing ``trip``.  Empty = valid."""
    issues: list[FieldIssue] = []

    # ── Primary vehicle ───────────────────────────────────────────────
    primary = catalog.get(trip.primary_vehicle_id)
    if not trip.primary_vehicle_id:
        issues.append(FieldIssue(field="primary_vehicle_id", message=MSG_SELECT_VEHICLE))
    elif primary is None:
        issues.append(FieldIssue(
            field="primary_vehicle_id",
            message=f"Unknown vehicle: {trip.primary_vehicle_id!r}",
        ))
    elif not primary.available:
        issues.append(FieldIssue(
            field="primary_vehicle_id",
            message=f"{primary.name} is not available yet",
        ))

    # ── Distance ──────────────────────────────────────────────────────
    distance = trip.distance
    if (
        isinstance(distance, bool)
        or not isinstance(distance, (int, float))
        or not math.isfinite(distance)
        or distance <= 0
    ):
        issues.append(FieldIssue(field="distance", message=MSG_ENTER_DISTANCE))
    elif distance > MAX_DISTANCE:
        issues.append(FieldIssue(field="distance", message=MSG_DISTANCE_TOO_LONG))

    # ── Passengers ────────────────────────────────────────────────────
    count = trip.passenger_count
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        issues.append(FieldIssue(field="passenger_count", message=MSG_ENTER_PASSENGERS))
    elif count > MAX_PASSENGERS:
        issues.append(FieldIssue(field="passenger_count", message=MSG_TOO_MANY_PASSENGERS))

    # Configuration guard, not a form field
    if not math.isfinite(fuel_price_per_liter) or fuel_price_per_liter <= 0:
        issues.append(FieldIssue(
            field="fuel_price_per_liter",
            message="Fuel price must be positive",
        ))

    return issues
