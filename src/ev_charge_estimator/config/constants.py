"""Fixed physical and economic constants used by the estimator."""

from pydantic import BaseModel, ConfigDict, Field


class EstimatorConstants(BaseModel):
    """Configuration constants, loaded once and never mutated at runtime.

    The defaults are the reference values.  Tests and alternative markets
    can pass a different instance to ``estimate``.
    """

    model_config = ConfigDict(frozen=True)

    # --- Electrical ---
    ac_voltage_v: float = Field(default=220.0, gt=0, description="Phase voltage used for AC power (V)")
    ac_efficiency: float = Field(default=0.90, gt=0, le=1.0, description="Wall-to-battery efficiency on AC")
    dc_efficiency: float = Field(default=0.94, gt=0, le=1.0, description="Station-to-battery efficiency on DC")

    # --- Consumption & emissions ---
    ev_consumption_kwh_per_100km: float = Field(default=18.0, gt=0, description="Reference EV consumption")
    gasoline_consumption_l_per_100km: float = Field(
        default=8.0, gt=0, description="Reference combustion-car consumption",
    )
    co2_kg_per_liter_gasoline: float = Field(default=2.3, gt=0, description="Tailpipe CO2 per liter burned")

    # --- Prices ---
    default_electricity_price_per_kwh: float = Field(default=2.5, gt=0, description="Default tariff")
    gasoline_cost_per_kwh_equivalent: float = Field(
        default=8.0, gt=0,
        description="Rough gasoline spend needed to match 1 kWh of EV driving. "
                    "Used for the savings comparison only.",
    )

    # --- Equivalences ---
    tree_co2_absorption_kg_per_year: float = Field(
        default=20.0, gt=0, description="CO2 one tree absorbs per year (kg)",
    )


DEFAULT_CONSTANTS = EstimatorConstants()
