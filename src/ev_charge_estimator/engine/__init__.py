"""Engine — deterministic charge estimation and result comparisons."""

from ev_charge_estimator.engine.estimator import (
    ac_gross_power_kw,
    co2_saved_kg,
    dc_gross_power_kw,
    dc_power_multiplier,
    estimate,
    nominal_efficiency,
    zero_session_result,
)
from ev_charge_estimator.engine.comparison import compute_cost_comparison, compute_environmental_impact

__all__ = [
    "estimate",
    "zero_session_result",
    "nominal_efficiency",
    "dc_power_multiplier",
    "ac_gross_power_kw",
    "dc_gross_power_kw",
    "co2_saved_kg",
    "compute_environmental_impact",
    "compute_cost_comparison",
]
