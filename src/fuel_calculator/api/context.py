"""Context manifest — makes the calculator API self-describing.

Two detail levels:
  - ``compact``: input parameter schemas + endpoints
  - ``full``:    adds formulas, the vehicle catalog and example requests

Parameter lists are extracted from the pydantic models so they never drift
from what the API actually accepts.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo

from fuel_calculator.config import CalculatorConfig, FuelConfig, TripInput, Vehicle


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One input parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input model (trip, vehicle, fuel)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class CalculatorContext(BaseModel):
    """Self-describing context for API consumers."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    vehicles: list[Vehicle]
    fuel: FuelConfig | None
    example_requests: list[dict[str, Any]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

_CONSTRAINT_NAMES = ("ge", "gt", "le", "lt", "min_length")


def _field_constraints(field_info: FieldInfo) -> dict[str, Any]:
    """Bounds declared through ``Field(...)``, keyed by constraint name."""
    found: dict[str, Any] = {}
    for meta in field_info.metadata:
        for name in _CONSTRAINT_NAMES:
            value = getattr(meta, name, None)
            if value is not None:
                found.setdefault(name, value)
    return found


def _type_name(annotation: Any) -> str:
    if annotation is None:
        return "Any"
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """One ``ParameterInfo`` per model field, in declaration order."""
    return [
        ParameterInfo(
            name=name,
            type=_type_name(info.annotation),
            default=None if info.is_required() else info.get_default(call_default_factory=True),
            description=info.description or "",
            constraints=_field_constraints(info),
        )
        for name, info in model_cls.model_fields.items()
    ]


# ═══════════════════════════════════════════════════════════════════════════
# Static content
# ═══════════════════════════════════════════════════════════════════════════

_KEY_FORMULAS = [
    {
        "name": "Total distance",
        "formula": "distance × 2 if round_trip else distance",
        "meaning": "Distance is entered one-way; a round trip doubles it",
    },
    {
        "name": "Litres used",
        "formula": "total_distance × consumption_rate / 100",
        "meaning": "Consumption rates are litres per 100 km",
    },
    {
        "name": "Vehicle cost",
        "formula": "litres_used × fuel_price_per_liter",
        "meaning": "One fixed fuel price applies to every vehicle",
    },
    {
        "name": "Cost per person",
        "formula": "(primary.cost + secondary.cost) / passenger_count",
        "meaning": "All passengers share the fuel of both cars equally",
    },
]

_EXAMPLE_REQUESTS = [
    {
        "description": "One car, 100 km one-way, 4 people",
        "method": "POST",
        "path": "/trip/cost",
        "body": {"primary_vehicle_id": "mario", "distance": 100, "passenger_count": 4},
    },
    {
        "description": "Two cars, round trip, 7 people, shareable message",
        "method": "POST",
        "path": "/trip/summary",
        "body": {
            "trip": {
                "primary_vehicle_id": "mario",
                "secondary_vehicle_id": "maribel",
                "use_second_vehicle": True,
                "distance": 120,
                "round_trip": True,
                "passenger_count": 7,
            },
            "language": "es",
        },
    },
]

_ENDPOINTS = [
    EndpointInfo(
        method="GET", path="/context",
        description="This manifest. detail_level='compact' omits formulas, catalog and examples.",
        response="CalculatorContext",
    ),
    EndpointInfo(
        method="GET", path="/vehicles",
        description="The vehicle catalog in display order. available_only=true hides 'coming soon' vehicles.",
        response="list[Vehicle]",
    ),
    EndpointInfo(
        method="GET", path="/vehicles/{vehicle_id}",
        description="One vehicle, 404 if the id is unknown.",
        response="Vehicle",
    ),
    EndpointInfo(
        method="GET", path="/vehicles/{vehicle_id}/companions",
        description="Vehicles that can be picked as the second car when vehicle_id is the first.",
        response="list[Vehicle]",
    ),
    EndpointInfo(
        method="GET", path="/fuel",
        description="Fuel price and units used by every calculation.",
        response="FuelConfig",
    ),
    EndpointInfo(
        method="POST", path="/trip/cost",
        description="Compute the fuel cost breakdown. 422 with per-field messages on invalid input.",
        request_body="TripInput",
        response="CostBreakdown + display strings",
    ),
    EndpointInfo(
        method="POST", path="/trip/summary",
        description="Compute and render the shareable message plus its WhatsApp link.",
        request_body="{trip: TripInput, language: 'es' | 'en'}",
        response="CostBreakdown + text + share_url",
    ),
]

_INPUT_SECTIONS = [
    ("trip", TripInput, "One calculation request — vehicles, distance, passengers, toggles"),
    ("vehicle", Vehicle, "Catalog entry (read-only) — consumption and availability"),
    ("fuel", FuelConfig, "Fixed fuel pricing (read-only)"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(
    detail_level: Literal["compact", "full"] = "full",
    config: CalculatorConfig | None = None,
    version: str = "1.0",
) -> CalculatorContext:
    """Build the self-describing context manifest."""
    config = config or CalculatorConfig()
    full = detail_level == "full"

    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]

    return CalculatorContext(
        name="Trip Fuel Calculator",
        version=version,
        description=(
            "Computes the fuel cost of a car trip from a fixed vehicle catalog and fuel price, "
            "optionally across two cars, splits it between passengers, and renders a message "
            "that can be shared on WhatsApp."
        ),
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        vehicles=list(config.vehicles) if full else [],
        fuel=config.fuel if full else None,
        example_requests=_EXAMPLE_REQUESTS if full else [],
    )
