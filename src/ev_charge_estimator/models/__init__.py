"""Result models — estimator output contracts."""

from ev_charge_estimator.models.results import (
    CalculationResult,
    ChargeSession,
    CostComparison,
    EnvironmentalImpact,
)

__all__ = [
    "CalculationResult",
    "ChargeSession",
    "CostComparison",
    "EnvironmentalImpact",
]
