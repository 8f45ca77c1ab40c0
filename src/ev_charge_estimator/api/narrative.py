"""Plain-text rendering of an estimate.

Used by the API's ``summary`` field and by the dashboard captions.
"""

from __future__ import annotations

from ev_charge_estimator.config.session import ChargeSessionConfig
from ev_charge_estimator.config.vehicle import VehicleSpec
from ev_charge_estimator.engine.comparison import compute_cost_comparison, compute_environmental_impact
from ev_charge_estimator.models.results import CalculationResult


def format_duration(minutes: int) -> str:
    """``0 min``, ``45 min``, ``21 h 7 min``."""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins} min"
    return f"{hours} h {mins} min"


def describe_power(config: ChargeSessionConfig) -> str:
    if config.charge_mode == "AC":
        phases = "1 phase" if config.phase_count == 1 else f"{config.phase_count} phases"
        return f"AC {config.amperage:g} A, {phases}"
    return f"DC {config.station_power_kw:g} kW station"


def generate_summary(
    spec: VehicleSpec,
    config: ChargeSessionConfig,
    result: CalculationResult,
) -> str:
    """Multi-line summary of one estimate."""
    if not result.is_charging:
        return (
            f"{spec.name}: no charging needed "
            f"({config.current_percent}% → {config.target_percent}%)."
        )

    impact = compute_environmental_impact(result)
    costs = compute_cost_comparison(result, config.electricity_price_per_kwh)

    lines = [
        f"{spec.name}: {describe_power(config)}",
        f"  {config.current_percent}% → {config.target_percent}%: "
        f"{result.energy_needed_kwh:.1f} kWh in {format_duration(result.duration_minutes)}",
        f"  Power: {result.gross_power_kw:.2f} kW gross, {result.net_power_kw:.2f} kW net, "
        f"{result.loss_power_kw:.2f} kW lost ({result.efficiency_ratio:.0%} efficient)",
        f"  Finish: {result.finish_time:%Y-%m-%d %H:%M}",
        f"  Cost: {result.cost:.2f} (saves {costs.savings:.2f} vs gasoline)",
        f"  CO2 saved: {result.co2_saved_kg:.2f} kg "
        f"≈ {impact.trees_equivalent} trees/year, {impact.gasoline_km_equivalent} km by gasoline car",
    ]
    return "\n".join(lines)
