"""FastAPI server — JSON access to the trip fuel calculator.

Run with:
    uvicorn fuel_calculator.api.server:app --reload --port 8000

Or:
    python -m fuel_calculator.api.server

Endpoints:
    GET  /context                         — self-describing manifest
    GET  /vehicles                        — vehicle catalog
    GET  /vehicles/{vehicle_id}           — one vehicle
    GET  /vehicles/{vehicle_id}/companions — second-car choices for a first car
    GET  /fuel                            — fuel price and units
    POST /trip/cost                       — cost breakdown for one trip
    POST /trip/summary                    — breakdown + share message + WhatsApp link
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fuel_calculator.api.context import build_context
from fuel_calculator.api.share import build_share_url
from fuel_calculator.api.summary import DisplayValues, format_display, format_summary
from fuel_calculator.config import CalculatorConfig, FuelConfig, Vehicle
from fuel_calculator.config.settings import settings
from fuel_calculator.engine import (
    FieldIssue,
    TripValidationError,
    compute_trip_cost,
    parse_trip_input,
)
from fuel_calculator.models.results import CostBreakdown

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

CONFIG = CalculatorConfig()
CATALOG = CONFIG.catalog()

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=(
        "Fuel cost of a car trip, split between passengers and optionally across "
        "two cars, with a shareable WhatsApp summary. Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _issues_response(issues: list[FieldIssue]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": [issue.model_dump() for issue in issues]},
    )


@app.exception_handler(TripValidationError)
async def _trip_validation_handler(request: Request, exc: TripValidationError) -> JSONResponse:
    return _issues_response(exc.issues)


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # ("body", "language") → "language"; a malformed body as a whole → "body"
    issues = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        field = ".".join(loc[1:]) or (loc[0] if loc else "__root__")
        issues.append(FieldIssue(field=field, message=err["msg"]))
    logger.info("Request rejected: %s", [i.field for i in issues])
    return _issues_response(issues)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SummaryRequest(BaseModel):
    """Request body for /trip/summary."""
    trip: dict[str, Any] = Field(
        default_factory=dict,
        description="TripInput fields. Example: {'primary_vehicle_id': 'mario', "
                    "'distance': 100, 'passenger_count': 3}",
    )
    language: Literal["es", "en"] = Field(default="es", description="Label language of the message")


class TripCostResponse(BaseModel):
    """Response from /trip/cost."""
    breakdown: CostBreakdown
    display: DisplayValues


class SummaryResponse(BaseModel):
    """Response from /trip/summary."""
    breakdown: CostBreakdown
    text: str
    share_url: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _get_vehicle_or_404(vehicle_id: str) -> Vehicle:
    vehicle = CATALOG.get(vehicle_id)
    if vehicle is None:
        raise HTTPException(status_code=404, detail=f"Unknown vehicle: {vehicle_id}")
    return vehicle


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup for the server process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds formulas, catalog and examples",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level, CONFIG, settings.API_VERSION)


@app.get("/vehicles", response_model=list[Vehicle])
def list_vehicles(available_only: bool = Query(default=False)):
    """Vehicle catalog in display order."""
    return CATALOG.available() if available_only else list(CATALOG)


@app.get("/vehicles/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: str):
    return _get_vehicle_or_404(vehicle_id)


@app.get("/vehicles/{vehicle_id}/companions", response_model=list[Vehicle])
def get_companions(vehicle_id: str):
    """Vehicles selectable as second car when ``vehicle_id`` is the first."""
    _get_vehicle_or_404(vehicle_id)
    return CATALOG.second_vehicle_choices(vehicle_id)


@app.get("/fuel", response_model=FuelConfig)
def get_fuel():
    return CONFIG.fuel


@app.post("/trip/cost", response_model=TripCostResponse)
def trip_cost(body: dict[str, Any] = Body(...)):
    """Compute the cost breakdown of one trip.

    Invalid input returns 422 with one ``{field, message}`` entry per
    offending field.
    """
    trip = parse_trip_input(body)
    breakdown = compute_trip_cost(trip, CATALOG, CONFIG.fuel.price_per_liter)
    return TripCostResponse(breakdown=breakdown, display=format_display(breakdown, CONFIG.fuel))


@app.post("/trip/summary", response_model=SummaryResponse)
def trip_summary(req: SummaryRequest):
    """Compute a trip and render its share message and WhatsApp link."""
    trip = parse_trip_input(req.trip)
    breakdown = compute_trip_cost(trip, CATALOG, CONFIG.fuel.price_per_liter)
    text = format_summary(trip, breakdown, CATALOG, CONFIG.fuel, req.language)
    return SummaryResponse(breakdown=breakdown, text=text, share_url=build_share_url(text))


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting %s on %s:%d", settings.API_TITLE, settings.API_HOST, settings.API_PORT)
    uvicorn.run(
        "fuel_calculator.api.server:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
