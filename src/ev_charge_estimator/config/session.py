"""Charge session configuration — the per-request estimator input."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ev_charge_estimator.config.constants import DEFAULT_CONSTANTS

ChargeMode = Literal["AC", "DC"]


class ChargeSessionConfig(BaseModel):
    """Everything the caller chooses for one charging estimate.

    Range checks live here, at the caller edge.  The estimator trusts
    whatever it is handed and does no validation of its own.
    ``target_percent <= current_percent`` is a valid input: it produces
    the zero-session result rather than an error.
    """

    model_config = ConfigDict(frozen=True)

    charge_mode: ChargeMode = Field(default="AC", description="'AC' (wallbox) or 'DC' (fast charger)")
    current_percent: int = Field(default=20, ge=0, le=100, description="State of charge at plug-in (%)")
    target_percent: int = Field(default=80, ge=0, le=100, description="State of charge to stop at (%)")

    # --- AC only ---
    amperage: float = Field(
        default=16.0, ge=0,
        description="Current per phase (A). 0 is accepted and yields a zero-power estimate.",
    )
    phase_count: Literal[1, 3] = Field(default=1, description="Single-phase or three-phase supply")

    # --- DC only ---
    station_power_kw: float = Field(
        default=150.0, ge=0,
        description="Rated station output (kW), capped by the vehicle's DC limit.",
    )

    electricity_price_per_kwh: float = Field(
        default=DEFAULT_CONSTANTS.default_electricity_price_per_kwh, gt=0,
        description="Tariff (currency per kWh)",
    )
    start_time: datetime = Field(
        description="Plug-in time. Only used to derive the finish time.",
    )
