"""Configuration models — vehicle catalog, session inputs, curves, constants."""

from ev_charge_estimator.config.vehicle import VehicleSpec
from ev_charge_estimator.config.session import ChargeMode, ChargeSessionConfig
from ev_charge_estimator.config.curve import ChargingCurve, CurveBreakpoint, DEFAULT_DC_CURVE
from ev_charge_estimator.config.constants import EstimatorConstants, DEFAULT_CONSTANTS
from ev_charge_estimator.config.catalog import (
    DEFAULT_CATALOG,
    DEFAULT_VEHICLE_ID,
    VehicleCatalog,
    lookup,
)

__all__ = [
    "VehicleSpec",
    "ChargeMode",
    "ChargeSessionConfig",
    "ChargingCurve",
    "CurveBreakpoint",
    "DEFAULT_DC_CURVE",
    "EstimatorConstants",
    "DEFAULT_CONSTANTS",
    "VehicleCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_VEHICLE_ID",
    "lookup",
]
