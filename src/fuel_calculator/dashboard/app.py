"""Trip Fuel Calculator — Streamlit single-screen form.

Layout: title → trip form (vehicle, distance, passengers, toggles, second
vehicle) → result cards → cost split chart → WhatsApp share button.

Run with:
    streamlit run src/fuel_calculator/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from fuel_calculator.api.share import build_share_url
from fuel_calculator.api.summary import format_display, format_summary, plain_number
from fuel_calculator.config import MAX_DISTANCE, MAX_PASSENGERS, CalculatorConfig, Vehicle
from fuel_calculator.engine import TripValidationError, compute_trip_cost, parse_trip_input
from fuel_calculator.models.results import CostBreakdown

# ---------------------------------------------------------------------------
# Static configuration shared by the form
# ---------------------------------------------------------------------------
_CONFIG = CalculatorConfig()
_CATALOG = _CONFIG.catalog()
_FUEL = _CONFIG.fuel

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Trip Fuel Calculator", page_icon="🚗", layout="centered")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
.stLinkButton a {
    background-color: #16a34a !important;
    color: #fff !important;
    border-radius: 8px !important;
    font-weight: 600 !important;
}
</style>
""", unsafe_allow_html=True)

st.title("Trip Fuel Calculator")
st.caption("Work out the fuel cost of a trip and split it between everyone in the car.")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _vehicle_label(v: Vehicle) -> str:
    label = f"{v.name} · {v.model}"
    return label if v.available else f"{label} (coming soon)"


def _show_issues(issues: dict[str, list[str]], field: str) -> None:
    for msg in issues.get(field, []):
        st.error(msg, icon="⚠️")


def _catalog_frame() -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Vehicle": v.name,
            "Model": v.model,
            "L/100 km": plain_number(v.consumption_rate),
            "Status": "Available" if v.available else "Coming soon",
        }
        for v in _CATALOG
    ])


def _cost_split_chart(breakdown: CostBreakdown) -> go.Figure:
    rows = [breakdown.primary] + ([breakdown.secondary] if breakdown.secondary else [])
    names = [_CATALOG.get(r.vehicle_id).name for r in rows]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names,
        y=[r.cost for r in rows],
        text=[f"{r.cost:.2f} {_FUEL.currency_symbol}" for r in rows],
        textposition="auto",
        marker_color=["#6c5ce7", "#00b894"][:len(rows)],
    ))
    fig.update_layout(
        yaxis_title=f"Cost ({_FUEL.currency_symbol})",
        height=260,
        margin=dict(l=20, r=20, t=30, b=20),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


# ---------------------------------------------------------------------------
# Trip form
# ---------------------------------------------------------------------------
issues: dict[str, list[str]] = st.session_state.get("issues", {})

st.header("Trip details")

primary = st.radio(
    "Pick a car",
    list(_CATALOG),
    index=None,
    format_func=_vehicle_label,
    horizontal=True,
    key="primary",
)
if primary is not None and not primary.available:
    st.warning(f"{primary.name} is not available yet. Pick another car.", icon="🚧")
_show_issues(issues, "primary_vehicle_id")

with st.expander("All cars"):
    st.dataframe(_catalog_frame(), hide_index=True, use_container_width=True)

c1, c2 = st.columns(2)
distance = c1.number_input(f"Distance ({_FUEL.distance_unit})", min_value=0.0, max_value=float(MAX_DISTANCE),
                           value=None, step=1.0, placeholder="100")
passengers = c2.number_input("People", min_value=0, max_value=MAX_PASSENGERS, value=None,
                             step=1, placeholder="4")
with c1:
    _show_issues(issues, "distance")
with c2:
    _show_issues(issues, "passenger_count")

round_trip = st.toggle("Round trip", help="Tick if the trip includes the way back")
use_second = st.toggle("Second car", help="Do you need a second car?")

secondary = None
if use_second:
    choices = _CATALOG.second_vehicle_choices(primary.id if primary else None)
    secondary = st.radio(
        "Pick the second car",
        choices,
        index=None,
        format_func=_vehicle_label,
        horizontal=True,
        key="secondary",
    )

if st.button("Calculate", type="primary", use_container_width=True):
    raw = {
        "primary_vehicle_id": primary.id if primary else "",
        "secondary_vehicle_id": secondary.id if secondary else None,
        "distance": distance,
        "round_trip": round_trip,
        "passenger_count": int(passengers) if passengers is not None else None,
        "use_second_vehicle": use_second,
    }
    try:
        trip = parse_trip_input(raw)
        breakdown = compute_trip_cost(trip, _CATALOG, _FUEL.price_per_liter)
    except TripValidationError as exc:
        st.session_state["issues"] = {i.field: exc.for_field(i.field) for i in exc.issues}
        st.session_state.pop("result", None)
    else:
        st.session_state["issues"] = {}
        st.session_state["result"] = (trip, breakdown)
    st.rerun()

# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------
if "result" in st.session_state:
    trip, breakdown = st.session_state["result"]
    shown = format_display(breakdown, _FUEL)

    st.divider()
    st.header("Result")

    m1, m2 = st.columns(2)
    m1.metric("Total distance", shown.total_distance)
    m2.metric("Cost per person", shown.cost_per_person)

    st.subheader(f"First car — {_CATALOG.get(breakdown.primary.vehicle_id).name}")
    m1, m2 = st.columns(2)
    m1.metric("Litres used", shown.primary_liters)
    m2.metric("Total cost", shown.primary_cost)

    if breakdown.secondary is not None:
        st.subheader(f"Second car — {_CATALOG.get(breakdown.secondary.vehicle_id).name}")
        m1, m2 = st.columns(2)
        m1.metric("Litres used", shown.secondary_liters)
        m2.metric("Total cost", shown.secondary_cost)
        st.plotly_chart(_cost_split_chart(breakdown), use_container_width=True)

    st.caption(f"Fuel price: {_FUEL.price_per_liter:.2f} {_FUEL.currency_symbol}/L · "
               f"Combined cost: {shown.total_cost}")

    message = format_summary(trip, breakdown, _CATALOG, _FUEL)
    with st.expander("Message preview"):
        st.text(message)
    st.link_button("Share on WhatsApp", build_share_url(message), use_container_width=True)
