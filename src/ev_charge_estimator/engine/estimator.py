"""Charge estimator — vehicle spec + session config → CalculationResult.

Pure arithmetic.  The only time input is ``config.start_time``; the wall
clock is never read, so identical inputs always give identical results.
Degenerate inputs (nothing to charge, zero power) come back as the
zero-session result instead of raising or producing non-finite numbers.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta

from ev_charge_estimator.config.constants import DEFAULT_CONSTANTS, EstimatorConstants
from ev_charge_estimator.config.curve import DEFAULT_DC_CURVE, ChargingCurve
from ev_charge_estimator.config.session import ChargeMode, ChargeSessionConfig
from ev_charge_estimator.config.vehicle import VehicleSpec
from ev_charge_estimator.models.results import CalculationResult

logger = logging.getLogger(__name__)


def nominal_efficiency(mode: ChargeMode, constants: EstimatorConstants = DEFAULT_CONSTANTS) -> float:
    """Fixed efficiency of a charging mode."""
    return constants.ac_efficiency if mode == "AC" else constants.dc_efficiency


def dc_power_multiplier(percent: float, curve: ChargingCurve = DEFAULT_DC_CURVE) -> float:
    """Step-function taper at ``percent`` SoC."""
    return curve.multiplier_at(percent)


def ac_gross_power_kw(
    spec: VehicleSpec,
    config: ChargeSessionConfig,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> float:
    """amps × volts × phases / 1000, capped by the on-board charger."""
    requested_kw = config.amperage * constants.ac_voltage_v * config.phase_count / 1_000
    return min(requested_kw, spec.max_ac_power_kw)


def dc_gross_power_kw(
    spec: VehicleSpec,
    config: ChargeSessionConfig,
    curve: ChargingCurve = DEFAULT_DC_CURVE,
) -> float:
    """Station power capped by the vehicle, scaled by the averaged taper.

    Averaging the multipliers at both ends of the session stands in for
    integrating power over the whole charge.
    """
    station_kw = min(config.station_power_kw, spec.max_dc_power_kw)
    avg_multiplier = (
        dc_power_multiplier(config.current_percent, curve)
        + dc_power_multiplier(config.target_percent, curve)
    ) / 2
    return station_kw * avg_multiplier


def zero_session_result(
    config: ChargeSessionConfig,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> CalculationResult:
    """Result for a session where nothing gets charged."""
    return CalculationResult(
        energy_needed_kwh=0.0,
        gross_power_kw=0.0,
        net_power_kw=0.0,
        loss_power_kw=0.0,
        efficiency_ratio=nominal_efficiency(config.charge_mode, constants),
        duration_minutes=0,
        finish_time=config.start_time,
        cost=0.0,
        co2_saved_kg=0.0,
    )


def co2_saved_kg(energy_kwh: float, constants: EstimatorConstants = DEFAULT_CONSTANTS) -> float:
    """CO2 a gasoline car would emit driving as far as ``energy_kwh`` takes the EV."""
    ev_range_km = energy_kwh / constants.ev_consumption_kwh_per_100km * 100
    gasoline_liters = ev_range_km / 100 * constants.gasoline_consumption_l_per_100km
    return gasoline_liters * constants.co2_kg_per_liter_gasoline


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate(
    spec: VehicleSpec,
    config: ChargeSessionConfig,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
    curve: ChargingCurve = DEFAULT_DC_CURVE,
) -> CalculationResult:
    """Estimate energy, power, duration, cost and CO2 for one session."""

    # ── Nothing to charge ──────────────────────────────────────────────
    if config.target_percent <= config.current_percent:
        return zero_session_result(config, constants)

    # ── Energy ─────────────────────────────────────────────────────────
    energy_kwh = (config.target_percent - config.current_percent) / 100 * spec.battery_capacity_kwh

    # ── Power ──────────────────────────────────────────────────────────
    if config.charge_mode == "AC":
        gross_kw = ac_gross_power_kw(spec, config, constants)
    else:
        gross_kw = dc_gross_power_kw(spec, config, curve)
    efficiency = nominal_efficiency(config.charge_mode, constants)

    net_kw = gross_kw * efficiency
    loss_kw = gross_kw - net_kw

    # Zero amperage / zero station power: no energy can flow.
    if net_kw <= 0:
        logger.debug(
            "zero net power for %s %s session (amperage=%s, station_power_kw=%s)",
            spec.id, config.charge_mode, config.amperage, config.station_power_kw,
        )
        return zero_session_result(config, constants).model_copy(update={
            "gross_power_kw": gross_kw,
            "net_power_kw": net_kw,
            "loss_power_kw": loss_kw,
        })

    # ── Time ───────────────────────────────────────────────────────────
    duration_minutes = _round_half_up(energy_kwh / net_kw * 60)
    finish_time = config.start_time + timedelta(minutes=duration_minutes)

    return CalculationResult(
        energy_needed_kwh=energy_kwh,
        gross_power_kw=gross_kw,
        net_power_kw=net_kw,
        loss_power_kw=loss_kw,
        efficiency_ratio=efficiency,
        duration_minutes=duration_minutes,
        finish_time=finish_time,
        cost=energy_kwh * config.electricity_price_per_kwh,
        co2_saved_kg=co2_saved_kg(energy_kwh, constants),
    )
