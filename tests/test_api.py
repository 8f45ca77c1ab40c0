"""Tests for the HTTP API layer.

Covers:
  - Context manifest (compact + full) and schema
  - Catalog and curve endpoints
  - /estimate with partial inputs, fallbacks, and validation errors
  - Session history endpoints with an injected store
  - Visitor counter
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ev_charge_estimator.api.context import _extract_params, build_context, get_session_schema
from ev_charge_estimator.api.server import app, get_session_store, get_visitor_counter
from ev_charge_estimator.config import ChargeSessionConfig
from ev_charge_estimator.settings import Settings, get_settings
from ev_charge_estimator.store import InMemorySessionStore, VisitorCounter

START = "2026-01-01T08:00:00"


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def counter() -> VisitorCounter:
    return VisitorCounter(start=100)


@pytest.fixture
def client(store: InMemorySessionStore, counter: VisitorCounter):
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_visitor_counter] = lambda: counter
    yield TestClient(app)
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════════════════════
# Context manifest tests
# ═══════════════════════════════════════════════════════════════════════════

class TestContext:

    def test_build_context_full(self):
        ctx = build_context("full")
        assert ctx.name == "EV Charge Estimator"
        assert len(ctx.key_formulas) >= 6
        assert len(ctx.input_sections) == 3
        assert len(ctx.vehicles) == 14
        assert len(ctx.endpoints) >= 8

    def test_build_context_compact(self):
        ctx = build_context("compact")
        assert ctx.key_formulas == []
        assert ctx.vehicles == []
        assert len(ctx.input_sections) == 3

    def test_extract_params_constraints(self):
        params = {p.name: p for p in _extract_params(ChargeSessionConfig)}
        assert params["current_percent"].constraints == {"ge": 0, "le": 100}
        assert params["electricity_price_per_kwh"].constraints == {"gt": 0}
        assert params["amperage"].default == 16.0
        assert params["start_time"].default is None

    def test_session_schema(self):
        schema = get_session_schema()
        assert "start_time" in schema["required"]
        assert "charge_mode" in schema["properties"]


# ═══════════════════════════════════════════════════════════════════════════
# Basic endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestBasicEndpoints:

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "ok"}

    def test_root(self, client: TestClient):
        body = client.get("/").json()
        assert body["name"] == "EV Charge Estimator API"
        assert "start_here" in body

    def test_context_endpoint(self, client: TestClient):
        resp = client.get("/context", params={"detail_level": "compact"})
        assert resp.status_code == 200
        assert resp.json()["key_formulas"] == []

    def test_schema_endpoint(self, client: TestClient):
        assert "properties" in client.get("/schema").json()

    def test_vehicles(self, client: TestClient):
        body = client.get("/vehicles").json()
        assert len(body) == 14
        assert body[0]["id"] == "ix1-edrive20"

    def test_vehicle_lookup(self, client: TestClient):
        body = client.get("/vehicles/ix3").json()
        assert body["battery_capacity_kwh"] == 80

    def test_unknown_vehicle_falls_back(self, client: TestClient):
        resp = client.get("/vehicles/tesla-model-3")
        assert resp.status_code == 200
        assert resp.json()["id"] == "ix1-edrive20"

    def test_curve(self, client: TestClient):
        body = client.get("/curve").json()
        assert len(body["breakpoints"]) == 11
        assert body["breakpoints"][8] == {"soc_percent": 80.0, "multiplier": 0.5}


# ═══════════════════════════════════════════════════════════════════════════
# /estimate
# ═══════════════════════════════════════════════════════════════════════════

class TestEstimate:

    def test_ac_reference(self, client: TestClient):
        resp = client.post("/estimate", json={"vehicle_id": "ix-xdrive50", "session": {"start_time": START}})
        assert resp.status_code == 200
        body = resp.json()
        result = body["result"]
        assert result["duration_minutes"] == 1267
        assert result["gross_power_kw"] == pytest.approx(3.52)
        assert result["finish_time"] == "2026-01-02T05:07:00"
        assert body["vehicle"]["id"] == "ix-xdrive50"
        assert body["environmental_impact"]["trees_equivalent"] == 4
        assert body["cost_comparison"]["savings"] == pytest.approx(367.95)
        assert "21 h 7 min" in body["summary"]

    def test_dc_reference(self, client: TestClient):
        resp = client.post("/estimate", json={
            "vehicle_id": "ix3",
            "session": {"charge_mode": "DC", "station_power_kw": 150, "start_time": START},
        })
        result = resp.json()["result"]
        assert result["duration_minutes"] == 27
        assert result["net_power_kw"] == pytest.approx(105.75)

    def test_default_vehicle_when_missing(self, client: TestClient):
        body = client.post("/estimate", json={"session": {"start_time": START}}).json()
        assert body["vehicle"]["id"] == "ix-xdrive50"

    def test_unknown_vehicle_uses_catalog_default(self, client: TestClient):
        body = client.post("/estimate", json={"vehicle_id": "nope", "session": {"start_time": START}}).json()
        assert body["vehicle"]["id"] == "ix1-edrive20"

    def test_configured_defaults_reach_estimate(self, client: TestClient):
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None, default_vehicle_id="ix3", default_electricity_price=4.0,
        )
        body = client.post("/estimate", json={"session": {"start_time": START}}).json()
        assert body["vehicle"]["id"] == "ix3"
        assert body["session"]["electricity_price_per_kwh"] == 4.0
        # 60 % of 80 kWh at 4.0
        assert body["result"]["cost"] == pytest.approx(192.0)
        assert body["cost_comparison"]["electricity_cost"] == pytest.approx(192.0)

    def test_start_time_defaults_to_now(self, client: TestClient):
        resp = client.post("/estimate", json={})
        assert resp.status_code == 200
        assert resp.json()["session"]["start_time"]

    def test_zero_session(self, client: TestClient):
        body = client.post("/estimate", json={
            "session": {"current_percent": 80, "target_percent": 50, "start_time": START},
        }).json()
        assert body["result"]["duration_minutes"] == 0
        assert body["result"]["finish_time"] == "2026-01-01T08:00:00"
        assert "no charging needed" in body["summary"]

    def test_invalid_session_is_422(self, client: TestClient):
        resp = client.post("/estimate", json={"session": {"current_percent": 150, "start_time": START}})
        assert resp.status_code == 422
        assert resp.json()["detail"][0]["loc"] == ["current_percent"]

    def test_invalid_body_is_422(self, client: TestClient):
        resp = client.post("/estimate", json={"session": "DC"})
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════════════
# Sessions
# ═══════════════════════════════════════════════════════════════════════════

class TestSessions:

    def _save(self, client: TestClient, **session):
        session.setdefault("start_time", START)
        return client.post("/sessions", json={"vehicle_id": "ix3", "session": session})

    def test_save_and_list(self, client: TestClient, store: InMemorySessionStore):
        resp = self._save(client)
        assert resp.status_code == 201
        saved = resp.json()
        assert saved["vehicle_id"] == "ix3"
        assert saved["start_percent"] == 20
        assert saved["end_percent"] == 80
        assert len(store) == 1

        listed = client.get("/sessions").json()
        assert [s["id"] for s in listed] == [saved["id"]]

    def test_nothing_to_save(self, client: TestClient, store: InMemorySessionStore):
        resp = self._save(client, current_percent=90, target_percent=10)
        assert resp.status_code == 422
        assert len(store) == 0

    def test_delete(self, client: TestClient):
        sid = self._save(client).json()["id"]
        assert client.delete(f"/sessions/{sid}").status_code == 204
        assert client.delete(f"/sessions/{sid}").status_code == 404
        assert client.get("/sessions").json() == []

    def test_clear(self, client: TestClient):
        self._save(client)
        self._save(client, charge_mode="DC")
        assert client.delete("/sessions").json() == {"deleted": 2}
        assert client.get("/sessions").json() == []


# ═══════════════════════════════════════════════════════════════════════════
# Visitors
# ═══════════════════════════════════════════════════════════════════════════

def test_visitor_counter(client: TestClient):
    assert client.get("/visitors").json() == {"count": 100}
    assert client.post("/visitors").json() == {"count": 101}
    assert client.post("/visitors").json() == {"count": 102}
    assert client.get("/visitors").json() == {"count": 102}
