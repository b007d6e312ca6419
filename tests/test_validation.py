"""Validation tests — invalid trips are rejected with per-field messages.

Covers both the parse step (raw form / JSON data → TripInput) and the
calculator's own re-check against the catalog.
"""

from __future__ import annotations

import pytest

from fuel_calculator.config import MAX_DISTANCE, TripInput, VehicleCatalog
from fuel_calculator.engine import (
    TripValidationError,
    check_trip_input,
    compute_trip_cost,
    parse_trip_input,
)
from fuel_calculator.engine.validation import (
    MSG_COST_OUT_OF_RANGE,
    MSG_DISTANCE_TOO_LONG,
    MSG_ENTER_DISTANCE,
    MSG_ENTER_PASSENGERS,
    MSG_SELECT_VEHICLE,
    MSG_TOO_MANY_PASSENGERS,
)

FUEL_PRICE = 1.45


def _raw(**overrides) -> dict:
    data = {"primary_vehicle_id": "mario", "distance": 100, "passenger_count": 2}
    data.update(overrides)
    return data


def _unchecked(**overrides) -> TripInput:
    """A TripInput that skipped pydantic validation, as a careless caller might build."""
    fields = {
        "primary_vehicle_id": "mario",
        "secondary_vehicle_id": None,
        "distance": 100.0,
        "round_trip": False,
        "passenger_count": 2,
        "use_second_vehicle": False,
    }
    fields.update(overrides)
    return TripInput.model_construct(**fields)


# ═══════════════════════════════════════════════════════════════════════════
# parse_trip_input
# ═══════════════════════════════════════════════════════════════════════════

class TestParse:

    def test_valid_input_parses(self):
        trip = parse_trip_input(_raw())
        assert trip.primary_vehicle_id == "mario"
        assert trip.round_trip is False
        assert trip.use_second_vehicle is False
        assert trip.secondary_vehicle_id is None

    def test_numeric_strings_are_coerced(self):
        trip = parse_trip_input(_raw(distance="42.5", passenger_count="3"))
        assert trip.distance == 42.5
        assert trip.passenger_count == 3

    def test_missing_vehicle(self):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(primary_vehicle_id=""))
        assert exc_info.value.for_field("primary_vehicle_id") == [MSG_SELECT_VEHICLE]

    @pytest.mark.parametrize("distance", [0, -5, "", None, "abc", float("nan"), float("inf")])
    def test_bad_distance(self, distance):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(distance=distance))
        assert exc_info.value.for_field("distance") == [MSG_ENTER_DISTANCE]

    @pytest.mark.parametrize("count", [0, -1, None, ""])
    def test_missing_passengers(self, count):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(passenger_count=count))
        assert exc_info.value.for_field("passenger_count") == [MSG_ENTER_PASSENGERS]

    def test_too_many_passengers(self):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(passenger_count=11))
        assert exc_info.value.for_field("passenger_count") == [MSG_TOO_MANY_PASSENGERS]

    def test_passenger_bounds_accepted(self):
        assert parse_trip_input(_raw(passenger_count=1)).passenger_count == 1
        assert parse_trip_input(_raw(passenger_count=10)).passenger_count == 10

    @pytest.mark.parametrize("distance", [MAX_DISTANCE + 1, 1e28, 1e308])
    def test_distance_above_limit(self, distance):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(distance=distance, round_trip=True))
        assert exc_info.value.for_field("distance") == [MSG_DISTANCE_TOO_LONG]

    def test_distance_at_limit_accepted(self):
        assert parse_trip_input(_raw(distance=MAX_DISTANCE)).distance == MAX_DISTANCE

    @pytest.mark.parametrize("field,message", [
        ("passenger_count", MSG_ENTER_PASSENGERS),
        ("distance", MSG_ENTER_DISTANCE),
    ])
    def test_booleans_are_not_numbers(self, field, message):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input(_raw(**{field: True}))
        assert exc_info.value.for_field(field) == [message]

    def test_all_issues_reported_together(self):
        with pytest.raises(TripValidationError) as exc_info:
            parse_trip_input({"primary_vehicle_id": "", "distance": 0, "passenger_count": 0})
        fields = [i.field for i in exc_info.value.issues]
        assert fields == ["primary_vehicle_id", "distance", "passenger_count"]

    def test_error_message_names_fields(self):
        with pytest.raises(TripValidationError, match="distance"):
            parse_trip_input(_raw(distance=-1))


# ═══════════════════════════════════════════════════════════════════════════
# check_trip_input / compute_trip_cost
# ═══════════════════════════════════════════════════════════════════════════

class TestCalculatorChecks:

    def test_valid_trip_has_no_issues(self, catalog: VehicleCatalog):
        assert check_trip_input(parse_trip_input(_raw()), catalog, FUEL_PRICE) == []

    def test_unknown_primary(self, catalog: VehicleCatalog):
        trip = parse_trip_input(_raw(primary_vehicle_id="delorean"))
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(trip, catalog, FUEL_PRICE)
        assert "delorean" in exc_info.value.for_field("primary_vehicle_id")[0]

    def test_unavailable_primary(self, catalog: VehicleCatalog):
        trip = parse_trip_input(_raw(primary_vehicle_id="amanda"))
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(trip, catalog, FUEL_PRICE)
        assert "not available" in exc_info.value.for_field("primary_vehicle_id")[0]

    def test_empty_primary_bypassing_parse(self, catalog: VehicleCatalog):
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(_unchecked(primary_vehicle_id=""), catalog, FUEL_PRICE)
        assert exc_info.value.for_field("primary_vehicle_id") == [MSG_SELECT_VEHICLE]

    def test_primary_lookup_failing_after_checks(self, catalog: VehicleCatalog, monkeypatch):
        mario = catalog.get("mario")
        lookups = iter([mario, None])
        monkeypatch.setattr(VehicleCatalog, "get", lambda self, vehicle_id: next(lookups))
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(parse_trip_input(_raw()), catalog, FUEL_PRICE)
        assert exc_info.value.for_field("primary_vehicle_id") == [MSG_SELECT_VEHICLE]

    @pytest.mark.parametrize("count", [0, 11, -3])
    def test_passenger_count_bypassing_parse(self, catalog: VehicleCatalog, count: int):
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(_unchecked(passenger_count=count), catalog, FUEL_PRICE)
        assert exc_info.value.for_field("passenger_count")

    @pytest.mark.parametrize("distance", [0.0, -100.0, float("nan"), float("inf")])
    def test_distance_bypassing_parse(self, catalog: VehicleCatalog, distance: float):
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(_unchecked(distance=distance), catalog, FUEL_PRICE)
        assert exc_info.value.for_field("distance") == [MSG_ENTER_DISTANCE]

    def test_huge_round_trip_bypassing_parse(self, catalog: VehicleCatalog):
        trip = _unchecked(distance=1e308, round_trip=True)
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(trip, catalog, FUEL_PRICE)
        assert exc_info.value.for_field("distance") == [MSG_DISTANCE_TOO_LONG]

    def test_boolean_passengers_bypassing_parse(self, catalog: VehicleCatalog):
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(_unchecked(passenger_count=True), catalog, FUEL_PRICE)
        assert exc_info.value.for_field("passenger_count") == [MSG_ENTER_PASSENGERS]

    def test_overflowing_cost_rejected(self, catalog: VehicleCatalog):
        trip = parse_trip_input(_raw(distance=MAX_DISTANCE, round_trip=True))
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(trip, catalog, 1e308)
        assert exc_info.value.for_field("distance") == [MSG_COST_OUT_OF_RANGE]

    @pytest.mark.parametrize("price", [0.0, -1.45])
    def test_non_positive_fuel_price(self, catalog: VehicleCatalog, price: float):
        with pytest.raises(TripValidationError) as exc_info:
            compute_trip_cost(parse_trip_input(_raw()), catalog, price)
        assert exc_info.value.for_field("fuel_price_per_liter")

    def test_bad_secondary_is_not_an_error(self, catalog: VehicleCatalog):
        trip = parse_trip_input(_raw(use_second_vehicle=True, secondary_vehicle_id="delorean"))
        assert check_trip_input(trip, catalog, FUEL_PRICE) == []
