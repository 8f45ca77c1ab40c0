"""Post-processing of a result: environmental and cost comparisons.

Both functions are pure and only read the result they are given.
"""

from __future__ import annotations

import math

from ev_charge_estimator.config.constants import DEFAULT_CONSTANTS, EstimatorConstants
from ev_charge_estimator.models.results import CalculationResult, CostComparison, EnvironmentalImpact


def compute_environmental_impact(
    result: CalculationResult,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> EnvironmentalImpact:
    """Express ``result.co2_saved_kg`` as trees and gasoline-car kilometres."""
    co2 = result.co2_saved_kg
    liters = co2 / constants.co2_kg_per_liter_gasoline

    # A tree absorbs ~20 kg/year; round up so any saving shows at least one tree.
    trees = math.ceil(co2 / constants.tree_co2_absorption_kg_per_year)

    # ~2.3 kg CO2 per 10 km for an average gasoline car
    km = int(math.floor(liters * 10 + 0.5))

    return EnvironmentalImpact(
        co2_saved_kg=co2,
        gasoline_liters_avoided=liters,
        trees_equivalent=trees,
        gasoline_km_equivalent=km,
    )


def compute_cost_comparison(
    result: CalculationResult,
    electricity_price_per_kwh: float,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> CostComparison:
    """Electricity cost of the session vs the rough gasoline equivalent."""
    electricity_cost = result.energy_needed_kwh * electricity_price_per_kwh
    gasoline_cost = result.energy_needed_kwh * constants.gasoline_cost_per_kwh_equivalent
    return CostComparison(
        electricity_cost=electricity_cost,
        gasoline_equivalent_cost=gasoline_cost,
        savings=gasoline_cost - electricity_cost,
    )
