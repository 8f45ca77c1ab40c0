"""FastAPI server — HTTP front end for the charge estimator.

Run with:
    uvicorn ev_charge_estimator.api.server:app --reload --port 8000

Or:
    ev-charge-api

Endpoints:
    GET    /context               — self-describing manifest
    GET    /schema                — JSON Schema for the session inputs
    GET    /vehicles              — vehicle catalog
    GET    /vehicles/{vehicle_id} — one vehicle (unknown ids → default model)
    GET    /curve                 — DC charging curve
    POST   /estimate              — estimate one session (partial inputs allowed)
    POST   /sessions              — estimate + save to history
    GET    /sessions              — saved history, newest first
    DELETE /sessions/{session_id} — delete one saved session
    DELETE /sessions              — clear history
    GET    /visitors, POST /visitors — visitor counter
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Literal

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from ev_charge_estimator.api.context import build_context, get_session_schema
from ev_charge_estimator.api.narrative import generate_summary
from ev_charge_estimator.config import (
    DEFAULT_CATALOG,
    DEFAULT_DC_CURVE,
    ChargeSessionConfig,
    ChargingCurve,
    VehicleSpec,
)
from ev_charge_estimator.engine import compute_cost_comparison, compute_environmental_impact, estimate
from ev_charge_estimator.errors import NothingToSaveError
from ev_charge_estimator.logging_config import configure_logging
from ev_charge_estimator.models.results import (
    CalculationResult,
    ChargeSession,
    CostComparison,
    EnvironmentalImpact,
)
from ev_charge_estimator.settings import Settings, get_settings
from ev_charge_estimator.store import (
    InMemorySessionStore,
    JsonFileSessionStore,
    JsonFileVisitorCounter,
    SessionStore,
    VisitorCounter,
    record_session,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="EV Charge Estimator API",
    version="1.0",
    description=(
        "Estimate charging time, energy, cost and CO2 savings for an electric vehicle. "
        "Start by calling GET /context to see the inputs and formulas."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Injected stores
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache
def get_session_store() -> SessionStore:
    settings = get_settings()
    if settings.sessions_path is not None:
        return JsonFileSessionStore(settings.sessions_path)
    return InMemorySessionStore()


@lru_cache
def get_visitor_counter() -> VisitorCounter:
    settings = get_settings()
    if settings.visitors_path is not None:
        return JsonFileVisitorCounter(settings.visitors_path, settings.visitor_start_count)
    return VisitorCounter(settings.visitor_start_count)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EstimateRequest(BaseModel):
    """Request body for /estimate and /sessions.  Everything is optional."""
    vehicle_id: str | None = Field(
        default=None,
        description="Catalog id. Missing or unknown ids use the default model.",
    )
    session: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial ChargeSessionConfig. Missing fields use defaults; "
                    "start_time defaults to now. Example: {'charge_mode': 'DC', 'station_power_kw': 100}",
    )


class EstimateResponse(BaseModel):
    vehicle: VehicleSpec
    session: ChargeSessionConfig
    result: CalculationResult
    environmental_impact: EnvironmentalImpact
    cost_comparison: CostComparison
    summary: str


class VisitorResponse(BaseModel):
    count: int


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _resolve_vehicle(vehicle_id: str | None, settings: Settings) -> VehicleSpec:
    return DEFAULT_CATALOG.lookup(vehicle_id if vehicle_id is not None else settings.default_vehicle_id)


def _build_config(overrides: dict[str, Any], settings: Settings) -> ChargeSessionConfig:
    """Merge request overrides onto defaults and validate at the edge."""
    values: dict[str, Any] = {
        "electricity_price_per_kwh": settings.default_electricity_price,
        "start_time": datetime.now(timezone.utc),
    }
    values.update(overrides)
    try:
        return ChargeSessionConfig(**values)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc


def _run_estimate(req: EstimateRequest, settings: Settings) -> EstimateResponse:
    spec = _resolve_vehicle(req.vehicle_id, settings)
    config = _build_config(req.session, settings)
    logger.debug("estimate %s %s %d%%→%d%%", spec.id, config.charge_mode,
                 config.current_percent, config.target_percent)
    result = estimate(spec, config)
    return EstimateResponse(
        vehicle=spec,
        session=config,
        result=result,
        environmental_impact=compute_environmental_impact(result),
        cost_comparison=compute_cost_comparison(result, config.electricity_price_per_kwh),
        summary=generate_summary(spec, config, result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root. Returns a welcome message and pointer to /context."""
    return {
        "name": "EV Charge Estimator API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds formulas and the vehicle catalog",
    ),
):
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """JSON Schema for ChargeSessionConfig: types, defaults and constraints."""
    return get_session_schema()


@app.get("/vehicles", response_model=list[VehicleSpec])
def list_vehicles():
    return list(DEFAULT_CATALOG)


@app.get("/vehicles/{vehicle_id}", response_model=VehicleSpec)
def get_vehicle(vehicle_id: str):
    """One vehicle.  Unknown ids fall back to the catalog default, never 404."""
    return DEFAULT_CATALOG.lookup(vehicle_id)


@app.get("/curve", response_model=ChargingCurve)
def get_curve():
    return DEFAULT_DC_CURVE


@app.post("/estimate", response_model=EstimateResponse)
def estimate_session(req: EstimateRequest, settings: Settings = Depends(get_settings)):
    """Estimate one charging session.

    Example minimal request:
    ```json
    {"vehicle_id": "ix3", "session": {"charge_mode": "DC", "current_percent": 10, "target_percent": 80}}
    ```
    """
    return _run_estimate(req, settings)


@app.post("/sessions", response_model=ChargeSession, status_code=201)
def save_session(
    req: EstimateRequest,
    settings: Settings = Depends(get_settings),
    store: SessionStore = Depends(get_session_store),
):
    """Estimate and save the result to history.  422 when there is nothing to charge."""
    est = _run_estimate(req, settings)
    try:
        record = record_session(est.vehicle, est.session, est.result, created_at=datetime.now(timezone.utc))
    except NothingToSaveError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return store.add(record)


@app.get("/sessions", response_model=list[ChargeSession])
def list_sessions(store: SessionStore = Depends(get_session_store)):
    return store.list()


@app.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail=f"session {session_id!r} not found")


@app.delete("/sessions")
def clear_sessions(store: SessionStore = Depends(get_session_store)):
    return {"deleted": store.clear()}


@app.get("/visitors", response_model=VisitorResponse)
def get_visitors(counter: VisitorCounter = Depends(get_visitor_counter)):
    return VisitorResponse(count=counter.current())


@app.post("/visitors", response_model=VisitorResponse)
def count_visitor(counter: VisitorCounter = Depends(get_visitor_counter)):
    return VisitorResponse(count=counter.increment())


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "ev_charge_estimator.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
