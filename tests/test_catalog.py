"""Tests for config/catalog.py."""

from __future__ import annotations

import pytest

from ev_charge_estimator.config import DEFAULT_CATALOG, DEFAULT_VEHICLE_ID, VehicleCatalog, VehicleSpec, lookup


def _spec(vid: str, capacity: float = 50.0) -> VehicleSpec:
    return VehicleSpec(id=vid, name=vid.upper(), battery_capacity_kwh=capacity,
                       max_ac_power_kw=11, max_dc_power_kw=100)


def test_lookup_known_id():
    spec = lookup("ix3")
    assert spec.name == "BMW iX3"
    assert spec.battery_capacity_kwh == 80
    assert spec.max_dc_power_kw == 150


def test_unknown_id_falls_back_to_first_entry():
    spec = lookup("no-such-model")
    assert spec.id == "ix1-edrive20"
    assert spec == DEFAULT_CATALOG.default


def test_none_falls_back_to_default():
    assert lookup(None) == DEFAULT_CATALOG.default


def test_builtin_catalog_contents():
    assert len(DEFAULT_CATALOG) == 14
    assert DEFAULT_VEHICLE_ID in DEFAULT_CATALOG
    assert "ix-xdrive50" in DEFAULT_CATALOG.ids()
    for spec in DEFAULT_CATALOG:
        assert spec.battery_capacity_kwh > 0
        assert spec.max_ac_power_kw > 0
        assert spec.max_dc_power_kw > 0


def test_explicit_default_id():
    catalog = VehicleCatalog([_spec("a"), _spec("b")], default_id="b")
    assert catalog.lookup("zzz").id == "b"
    assert catalog.lookup("a").id == "a"


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        VehicleCatalog([])


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        VehicleCatalog([_spec("a"), _spec("a", 60)])


def test_default_id_must_exist():
    with pytest.raises(ValueError):
        VehicleCatalog([_spec("a")], default_id="b")


def test_specs_are_frozen():
    spec = lookup("ix3")
    with pytest.raises(Exception):
        spec.battery_capacity_kwh = 1.0
