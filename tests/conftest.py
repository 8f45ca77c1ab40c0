"""Shared test fixtures: catalog vehicles and reference sessions."""

from __future__ import annotations

from datetime import datetime

import pytest

from ev_charge_estimator.config import ChargeSessionConfig, VehicleSpec, lookup


@pytest.fixture
def start_time() -> datetime:
    return datetime(2026, 1, 1, 8, 0)


@pytest.fixture
def ix_xdrive50() -> VehicleSpec:
    """111.5 kWh, 22 kW AC, 195 kW DC."""
    return lookup("ix-xdrive50")


@pytest.fixture
def ix3() -> VehicleSpec:
    """80 kWh, 11 kW AC, 150 kW DC."""
    return lookup("ix3")


@pytest.fixture
def ac_config(start_time: datetime) -> ChargeSessionConfig:
    return ChargeSessionConfig(
        charge_mode="AC",
        current_percent=20,
        target_percent=80,
        amperage=16,
        phase_count=1,
        electricity_price_per_kwh=2.5,
        start_time=start_time,
    )


@pytest.fixture
def dc_config(start_time: datetime) -> ChargeSessionConfig:
    return ChargeSessionConfig(
        charge_mode="DC",
        current_percent=20,
        target_percent=80,
        station_power_kw=150,
        electricity_price_per_kwh=2.5,
        start_time=start_time,
    )
