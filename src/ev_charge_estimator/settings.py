"""Application settings, read from ``EVCHARGE_*`` environment variables or ``.env``."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ev_charge_estimator.config.catalog import DEFAULT_VEHICLE_ID
from ev_charge_estimator.config.constants import DEFAULT_CONSTANTS
from ev_charge_estimator.store.visitors import DEFAULT_START_COUNT


class Settings(BaseSettings):
    """Runtime settings for the API and dashboard.  The engine takes none of these."""

    default_vehicle_id: str = Field(default=DEFAULT_VEHICLE_ID, description="Preselected catalog model")
    default_electricity_price: float = Field(
        default=DEFAULT_CONSTANTS.default_electricity_price_per_kwh, gt=0,
        description="Tariff offered by default",
    )

    sessions_path: Optional[Path] = Field(
        default=None,
        description="JSON file for saved sessions. None keeps them in memory.",
    )
    visitors_path: Optional[Path] = Field(
        default=None,
        description="JSON file for the visitor counter. None keeps it in memory.",
    )
    visitor_start_count: int = Field(default=DEFAULT_START_COUNT, ge=0)

    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    model_config = SettingsConfigDict(env_prefix="EVCHARGE_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
