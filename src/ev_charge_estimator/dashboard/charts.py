"""Plotly figures and table rows for the dashboard.

Kept apart from ``app.py`` so they can be built without a Streamlit runtime.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ev_charge_estimator.api.narrative import format_duration
from ev_charge_estimator.config.curve import ChargingCurve
from ev_charge_estimator.models.results import CalculationResult, ChargeSession

_LAYOUT = dict(
    height=280,
    margin=dict(l=20, r=20, t=30, b=20),
    showlegend=False,
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11, color="rgba(255,255,255,0.7)"),
)


def build_curve_figure(
    curve: ChargingCurve,
    station_kw: float,
    current_percent: int | None = None,
    target_percent: int | None = None,
) -> go.Figure:
    """DC power available across SoC, as a step chart.

    The session window, if given, is shaded.
    """
    socs = [b.soc_percent for b in curve.breakpoints]
    power = [station_kw * b.multiplier for b in curve.breakpoints]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=socs,
        y=power,
        mode="lines+markers",
        line=dict(color="#fdcb6e", width=2, shape="hv"),
        fill="tozeroy",
        fillcolor="rgba(253,203,110,0.15)",
        name="Available DC power",
    ))
    if current_percent is not None and target_percent is not None and target_percent > current_percent:
        fig.add_vrect(
            x0=current_percent, x1=target_percent,
            fillcolor="rgba(9,132,227,0.15)",
            layer="below",
            line_width=0,
        )
    fig.update_layout(xaxis_title="State of charge (%)", yaxis_title="Power (kW)", **_LAYOUT)
    return fig


def build_power_figure(result: CalculationResult) -> go.Figure:
    """Net vs loss split of the gross power."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=["Net", "Loss"],
        y=[result.net_power_kw, result.loss_power_kw],
        marker_color=["#00b894", "#d63031"],
    ))
    fig.update_layout(yaxis_title="kW", **_LAYOUT)
    return fig


def sessions_frame(sessions: list[ChargeSession]) -> pd.DataFrame:
    """History table, one row per saved session."""
    rows = [
        {
            "Date": s.created_at.strftime("%d %b %H:%M"),
            "Vehicle": s.vehicle_name,
            "Mode": s.charge_mode,
            "SoC": f"{s.start_percent}% → {s.end_percent}%",
            "Energy (kWh)": round(s.energy_added_kwh, 1),
            "Duration": format_duration(s.duration_minutes),
            "Cost": round(s.cost, 2),
        }
        for s in sessions
    ]
    return pd.DataFrame(rows, columns=["Date", "Vehicle", "Mode", "SoC", "Energy (kWh)", "Duration", "Cost"])


def session_labels(sessions: list[ChargeSession]) -> dict[str, str]:
    """Session id → short label for the delete picker, in history order."""
    return {
        s.id: f"{s.created_at:%d %b %H:%M} · {s.vehicle_name} · {s.start_percent}% → {s.end_percent}%"
        for s in sessions
    }
