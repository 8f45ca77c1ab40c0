"""Context manifest — makes the estimator API self-describing.

Two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the key formulas and the vehicle catalog
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from ev_charge_estimator.config import (
    DEFAULT_CATALOG,
    ChargeSessionConfig,
    EstimatorConstants,
    VehicleSpec,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input model."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    method: str
    path: str
    description: str


class EstimatorContext(BaseModel):
    """Self-describing manifest returned by ``GET /context``."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    vehicles: list[dict[str, Any]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        default = None if field_info.is_required() else field_info.default

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    for m in getattr(field_info, "metadata", ()):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Static content
# ═══════════════════════════════════════════════════════════════════════════

_KEY_FORMULAS = [
    {"name": "Energy needed", "formula": "(target% − current%) / 100 × battery_capacity_kwh"},
    {"name": "AC gross power", "formula": "min(amperage × 220 V × phases / 1000, max_ac_power_kw)"},
    {"name": "DC gross power",
     "formula": "min(station_power_kw, max_dc_power_kw) × (curve(current%) + curve(target%)) / 2"},
    {"name": "Net / loss power", "formula": "net = gross × efficiency (AC 0.90, DC 0.94); loss = gross − net"},
    {"name": "Duration", "formula": "round(energy / net × 60) minutes; 0 when net power is 0"},
    {"name": "Cost", "formula": "energy × electricity_price_per_kwh"},
    {"name": "CO2 saved", "formula": "energy / 18 kWh × 100 km → × 8 L/100 km → × 2.3 kg/L"},
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/vehicles", description="Vehicle catalog"),
    EndpointInfo(method="GET", path="/vehicles/{vehicle_id}",
                 description="One vehicle; unknown ids return the default model"),
    EndpointInfo(method="GET", path="/curve", description="DC charging curve breakpoints"),
    EndpointInfo(method="POST", path="/estimate", description="Estimate one charging session"),
    EndpointInfo(method="POST", path="/sessions", description="Estimate and save to history"),
    EndpointInfo(method="GET", path="/sessions", description="Saved sessions, newest first"),
    EndpointInfo(method="DELETE", path="/sessions/{session_id}", description="Delete one saved session"),
    EndpointInfo(method="DELETE", path="/sessions", description="Clear the history"),
    EndpointInfo(method="POST", path="/visitors", description="Count a visit"),
]

_INPUT_SECTIONS = [
    ("vehicle", VehicleSpec, "Catalog entry: battery size and charging limits"),
    ("session", ChargeSessionConfig, "Per-request inputs: mode, SoC window, power, tariff, start time"),
    ("constants", EstimatorConstants, "Fixed constants: voltage, efficiencies, consumption, emissions"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> EstimatorContext:
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    full = detail_level == "full"
    return EstimatorContext(
        name="EV Charge Estimator",
        version="1.0",
        description=(
            "Estimates charging time, energy, cost and CO2 savings for a vehicle model, "
            "charging mode (AC/DC), state-of-charge window and start time."
        ),
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        vehicles=[v.model_dump() for v in DEFAULT_CATALOG] if full else [],
    )


def get_session_schema() -> dict:
    """JSON Schema for ChargeSessionConfig."""
    return ChargeSessionConfig.model_json_schema()
