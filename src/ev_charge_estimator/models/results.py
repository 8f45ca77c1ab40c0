"""Result types — the contract between engine, stores, API, and dashboard."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ev_charge_estimator.config.session import ChargeMode


class CalculationResult(BaseModel):
    """One estimate, immutable.

    Invariants: ``net = gross × efficiency`` and ``loss = gross − net``.
    When no charging is needed every quantity is zero except
    ``efficiency_ratio`` and ``finish_time`` (which equals the start time).
    """

    model_config = ConfigDict(frozen=True)

    energy_needed_kwh: float
    """(target − current) / 100 × battery capacity."""

    gross_power_kw: float
    """Power drawn from the wallbox / station after vehicle caps and DC taper."""

    net_power_kw: float
    """gross × efficiency, the power that reaches the battery."""

    loss_power_kw: float
    """gross − net, dissipated as heat."""

    efficiency_ratio: float
    """Nominal efficiency of the mode (0–1).  Kept on the zero-session too."""

    duration_minutes: int
    """energy / net × 60, rounded half-up."""

    finish_time: datetime
    """start_time + duration."""

    cost: float
    """energy × tariff."""

    co2_saved_kg: float
    """CO2 a gasoline car would emit covering the same distance."""

    @property
    def is_charging(self) -> bool:
        return self.duration_minutes > 0


class EnvironmentalImpact(BaseModel):
    """CO2 savings expressed in everyday equivalents."""

    co2_saved_kg: float
    gasoline_liters_avoided: float
    trees_equivalent: int
    """Trees needed for a year to absorb the same CO2 (rounded up)."""
    gasoline_km_equivalent: int
    """Distance a gasoline car covers emitting the same CO2."""


class CostComparison(BaseModel):
    """Electricity spend vs a rough gasoline equivalent."""

    electricity_cost: float
    gasoline_equivalent_cost: float
    savings: float


class ChargeSession(BaseModel):
    """A saved estimate, as kept by the session store."""

    id: str
    vehicle_id: str
    vehicle_name: str
    charge_mode: ChargeMode
    start_percent: int
    end_percent: int
    energy_added_kwh: float
    duration_minutes: int
    cost: float
    created_at: datetime
