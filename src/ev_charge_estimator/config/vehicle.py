"""Vehicle model: one catalog entry."""

from pydantic import BaseModel, ConfigDict, Field


class VehicleSpec(BaseModel):
    """One vehicle model, read-only once loaded into the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique catalog key, e.g. 'ix-xdrive50'")
    name: str = Field(description="Display name")
    battery_capacity_kwh: float = Field(gt=0, description="Usable battery capacity (kWh)")
    max_ac_power_kw: float = Field(gt=0, description="On-board charger limit for AC charging (kW)")
    max_dc_power_kw: float = Field(gt=0, description="Peak DC fast-charge acceptance (kW)")
    wltp_range_km: float = Field(
        default=0.0, ge=0,
        description="WLTP rated range (km). Display only, the estimator never reads it.",
    )
