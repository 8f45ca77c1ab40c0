"""EV Charge Estimator — Streamlit dashboard.

Layout: sidebar inputs → headline metrics → power / curve charts →
cost and CO2 comparison → saved session history.

Run with:
    streamlit run src/ev_charge_estimator/dashboard/app.py
"""

from __future__ import annotations

from datetime import datetime, timedelta

import streamlit as st

from ev_charge_estimator.api.narrative import format_duration
from ev_charge_estimator.config import DEFAULT_CATALOG, DEFAULT_DC_CURVE, ChargeSessionConfig
from ev_charge_estimator.dashboard.charts import (
    build_curve_figure,
    build_power_figure,
    session_labels,
    sessions_frame,
)
from ev_charge_estimator.engine import compute_cost_comparison, compute_environmental_impact, estimate
from ev_charge_estimator.errors import NothingToSaveError
from ev_charge_estimator.logging_config import configure_logging
from ev_charge_estimator.settings import get_settings
from ev_charge_estimator.store import (
    InMemorySessionStore,
    JsonFileSessionStore,
    JsonFileVisitorCounter,
    SessionStore,
    VisitorCounter,
    record_session,
)

_SETTINGS = get_settings()
configure_logging(_SETTINGS.log_level)

# AC: 6–16 A in 1 A steps, then 20–32 A in 4 A steps
_AMPERAGE_OPTIONS = list(range(6, 17)) + list(range(20, 33, 4))
_DC_OPTIONS = [50, 100, 150, 200, 250, 350]


@st.cache_resource
def _session_store() -> SessionStore:
    if _SETTINGS.sessions_path is not None:
        return JsonFileSessionStore(_SETTINGS.sessions_path)
    return InMemorySessionStore()


@st.cache_resource
def _visitor_counter() -> VisitorCounter:
    if _SETTINGS.visitors_path is not None:
        return JsonFileVisitorCounter(_SETTINGS.visitors_path, _SETTINGS.visitor_start_count)
    return VisitorCounter(_SETTINGS.visitor_start_count)


st.set_page_config(page_title="EV Charge Estimator", page_icon="⚡", layout="wide")

store = _session_store()
if "visitor_count" not in st.session_state:
    st.session_state.visitor_count = _visitor_counter().increment()

# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Charging Inputs")

vehicles = list(DEFAULT_CATALOG)
vehicle_ids = [v.id for v in vehicles]
default_idx = vehicle_ids.index(_SETTINGS.default_vehicle_id) if _SETTINGS.default_vehicle_id in vehicle_ids else 0
vehicle_id = st.sidebar.selectbox(
    "Vehicle", vehicle_ids, index=default_idx,
    format_func=lambda vid: DEFAULT_CATALOG.lookup(vid).name,
)
spec = DEFAULT_CATALOG.lookup(vehicle_id)
st.sidebar.caption(
    f"{spec.battery_capacity_kwh:g} kWh · AC {spec.max_ac_power_kw:g} kW · "
    f"DC {spec.max_dc_power_kw:g} kW · WLTP {spec.wltp_range_km:g} km"
)

mode = st.sidebar.radio("Charge type", ["AC", "DC"], horizontal=True)

c1, c2 = st.sidebar.columns(2)
current_pct = c1.slider("Current %", 0, 100, 20)
target_pct = c2.slider("Target %", 0, 100, 80)

amperage, phases, station_kw = 16, 1, 150
if mode == "AC":
    c1, c2 = st.sidebar.columns(2)
    amperage = c1.selectbox("Amperage", _AMPERAGE_OPTIONS, index=_AMPERAGE_OPTIONS.index(16),
                            format_func=lambda a: f"{a} A")
    phases = c2.selectbox("Phases", [1, 3], format_func=lambda p: "1 phase" if p == 1 else "3 phases")
else:
    station_kw = st.sidebar.selectbox("Station power", _DC_OPTIONS, index=_DC_OPTIONS.index(150),
                                      format_func=lambda kw: f"{kw} kW")

price = st.sidebar.number_input("Electricity price / kWh", 0.01, 100.0,
                                _SETTINGS.default_electricity_price, 0.1)

now = datetime.now().replace(second=0, microsecond=0)
c1, c2 = st.sidebar.columns(2)
start_date = c1.date_input("Start date", now.date())
start_clock = c2.time_input("Start time", now.time(), step=timedelta(minutes=30))
start_time = datetime.combine(start_date, start_clock)

config = ChargeSessionConfig(
    charge_mode=mode,
    current_percent=current_pct,
    target_percent=target_pct,
    amperage=amperage,
    phase_count=phases,
    station_power_kw=station_kw,
    electricity_price_per_kwh=price,
    start_time=start_time,
)
result = estimate(spec, config)
impact = compute_environmental_impact(result)
costs = compute_cost_comparison(result, price)

# ---------------------------------------------------------------------------
# MAIN — Results
# ---------------------------------------------------------------------------
st.title("⚡ EV Charge Estimator")
st.caption(f"{st.session_state.visitor_count:,} visits")

if not result.is_charging:
    st.info("No charging needed: the target is at or below the current state of charge.")

m1, m2, m3, m4 = st.columns(4)
m1.metric("Duration", format_duration(result.duration_minutes))
m2.metric("Finish", result.finish_time.strftime("%d %b %H:%M"))
m3.metric("Energy", f"{result.energy_needed_kwh:.1f} kWh")
m4.metric("Cost", f"{result.cost:,.2f}")

m1, m2, m3, m4 = st.columns(4)
m1.metric("Gross power", f"{result.gross_power_kw:.2f} kW")
m2.metric("Net power", f"{result.net_power_kw:.2f} kW")
m3.metric("Loss", f"{result.loss_power_kw:.2f} kW")
m4.metric("Efficiency", f"{result.efficiency_ratio:.0%}")

left, right = st.columns(2)
with left:
    st.subheader("Power split")
    st.plotly_chart(build_power_figure(result), use_container_width=True)
with right:
    st.subheader("DC charging curve")
    capped_kw = min(station_kw, spec.max_dc_power_kw)
    st.plotly_chart(
        build_curve_figure(DEFAULT_DC_CURVE, capped_kw, current_pct, target_pct),
        use_container_width=True,
    )

left, right = st.columns(2)
with left:
    st.subheader("Cost")
    st.metric("Savings vs gasoline", f"{costs.savings:,.2f}")
    st.caption(f"Electricity {costs.electricity_cost:,.2f} · gasoline equivalent {costs.gasoline_equivalent_cost:,.2f}")
with right:
    st.subheader("Environmental impact")
    st.metric("CO₂ saved", f"{impact.co2_saved_kg:.2f} kg")
    st.caption(f"≈ {impact.trees_equivalent} trees for a year · {impact.gasoline_km_equivalent} km by gasoline car")

# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------
st.subheader("Charge history")
c1, c2 = st.columns([1, 1])
if c1.button("Save session", type="primary", use_container_width=True):
    try:
        store.add(record_session(spec, config, result, created_at=datetime.now()))
        st.success("Session saved")
    except NothingToSaveError:
        st.error("There is no charging session to save")
if c2.button("Clear history", use_container_width=True):
    st.info(f"Deleted {store.clear()} sessions")

saved = store.list()
if saved:
    st.dataframe(sessions_frame(saved), use_container_width=True, hide_index=True)
    labels = session_labels(saved)
    c1, c2 = st.columns([3, 1])
    selected_id = c1.selectbox("Saved session", list(labels), format_func=labels.get, label_visibility="collapsed")
    if c2.button("Delete session", use_container_width=True):
        store.delete(selected_id)
        st.rerun()
else:
    st.caption("No saved sessions yet.")
