"""Tests for engine/comparison.py."""

from __future__ import annotations

import pytest

from ev_charge_estimator.config import ChargeSessionConfig, VehicleSpec
from ev_charge_estimator.engine import compute_cost_comparison, compute_environmental_impact, estimate


def test_environmental_impact(ix_xdrive50: VehicleSpec, ac_config: ChargeSessionConfig):
    result = estimate(ix_xdrive50, ac_config)
    impact = compute_environmental_impact(result)
    # 68.387 kg CO2 → 29.733 L gasoline
    assert impact.co2_saved_kg == pytest.approx(result.co2_saved_kg)
    assert impact.gasoline_liters_avoided == pytest.approx(29.7333, abs=1e-3)
    # ceil(68.387 / 20) = 4
    assert impact.trees_equivalent == 4
    # round(29.733 × 10) = 297
    assert impact.gasoline_km_equivalent == 297


def test_environmental_impact_of_zero_session(ix3: VehicleSpec, ac_config: ChargeSessionConfig):
    result = estimate(ix3, ac_config.model_copy(update={"target_percent": 10}))
    impact = compute_environmental_impact(result)
    assert impact.trees_equivalent == 0
    assert impact.gasoline_km_equivalent == 0


def test_cost_comparison(ix_xdrive50: VehicleSpec, ac_config: ChargeSessionConfig):
    result = estimate(ix_xdrive50, ac_config)
    costs = compute_cost_comparison(result, ac_config.electricity_price_per_kwh)
    # 66.9 × 2.5 = 167.25; 66.9 × 8 = 535.2
    assert costs.electricity_cost == pytest.approx(167.25)
    assert costs.gasoline_equivalent_cost == pytest.approx(535.2)
    assert costs.savings == pytest.approx(367.95)


def test_cost_comparison_matches_result_cost(ix3: VehicleSpec, dc_config: ChargeSessionConfig):
    result = estimate(ix3, dc_config)
    costs = compute_cost_comparison(result, dc_config.electricity_price_per_kwh)
    assert costs.electricity_cost == pytest.approx(result.cost)
