"""Vehicle catalog — static table of supported models.

``lookup`` never fails: an unknown id resolves to the catalog's default
entry.  Absence is a defined fallback, not an error.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ev_charge_estimator.config.vehicle import VehicleSpec


class VehicleCatalog:
    """Read-only id → VehicleSpec table with a designated default."""

    def __init__(self, entries: Iterable[VehicleSpec], default_id: str | None = None) -> None:
        self._entries: dict[str, VehicleSpec] = {}
        for spec in entries:
            if spec.id in self._entries:
                raise ValueError(f"duplicate vehicle id: {spec.id!r}")
            self._entries[spec.id] = spec
        if not self._entries:
            raise ValueError("a vehicle catalog needs at least one entry")

        if default_id is None:
            default_id = next(iter(self._entries))
        elif default_id not in self._entries:
            raise ValueError(f"default id {default_id!r} is not in the catalog")
        self._default_id = default_id

    @property
    def default(self) -> VehicleSpec:
        return self._entries[self._default_id]

    def lookup(self, vehicle_id: str | None) -> VehicleSpec:
        """Return the matching spec, or the default entry if ``vehicle_id`` is unknown."""
        if vehicle_id is None:
            return self.default
        return self._entries.get(vehicle_id, self.default)

    def ids(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[VehicleSpec]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._entries


# ═══════════════════════════════════════════════════════════════════════════
# Built-in catalog
# ═══════════════════════════════════════════════════════════════════════════

_BUILTIN_VEHICLES = [
    VehicleSpec(id="ix1-edrive20", name="BMW iX1 eDrive20", battery_capacity_kwh=64.7,
                max_ac_power_kw=11, max_dc_power_kw=130, wltp_range_km=430),
    VehicleSpec(id="ix1", name="BMW iX1 xDrive30", battery_capacity_kwh=64.7,
                max_ac_power_kw=11, max_dc_power_kw=130, wltp_range_km=440),
    VehicleSpec(id="ix3", name="BMW iX3", battery_capacity_kwh=80,
                max_ac_power_kw=11, max_dc_power_kw=150, wltp_range_km=461),
    VehicleSpec(id="i4-edrive35", name="BMW i4 eDrive35", battery_capacity_kwh=70.2,
                max_ac_power_kw=11, max_dc_power_kw=180, wltp_range_km=490),
    VehicleSpec(id="i4-edrive40", name="BMW i4 eDrive40", battery_capacity_kwh=83.9,
                max_ac_power_kw=11, max_dc_power_kw=200, wltp_range_km=590),
    VehicleSpec(id="i4-m50", name="BMW i4 M50", battery_capacity_kwh=83.9,
                max_ac_power_kw=11, max_dc_power_kw=200, wltp_range_km=520),
    VehicleSpec(id="ix-xdrive40", name="BMW iX xDrive40", battery_capacity_kwh=76.6,
                max_ac_power_kw=11, max_dc_power_kw=150, wltp_range_km=425),
    VehicleSpec(id="ix-xdrive50", name="BMW iX xDrive50", battery_capacity_kwh=111.5,
                max_ac_power_kw=22, max_dc_power_kw=195, wltp_range_km=630),
    VehicleSpec(id="ix-m60", name="BMW iX M60", battery_capacity_kwh=111.5,
                max_ac_power_kw=22, max_dc_power_kw=195, wltp_range_km=566),
    VehicleSpec(id="i7-xdrive60", name="BMW i7 xDrive60", battery_capacity_kwh=101.7,
                max_ac_power_kw=22, max_dc_power_kw=195, wltp_range_km=625),
    VehicleSpec(id="i7-m70", name="BMW i7 M70 xDrive", battery_capacity_kwh=101.7,
                max_ac_power_kw=22, max_dc_power_kw=195, wltp_range_km=488),
    VehicleSpec(id="i5-edrive40", name="BMW i5 eDrive40", battery_capacity_kwh=81.2,
                max_ac_power_kw=11, max_dc_power_kw=205, wltp_range_km=582),
    VehicleSpec(id="i5-m60", name="BMW i5 M60 xDrive", battery_capacity_kwh=81.2,
                max_ac_power_kw=11, max_dc_power_kw=205, wltp_range_km=516),
    VehicleSpec(id="i3-120ah", name="BMW i3 120Ah", battery_capacity_kwh=42.2,
                max_ac_power_kw=11, max_dc_power_kw=50, wltp_range_km=308),
]

DEFAULT_CATALOG = VehicleCatalog(_BUILTIN_VEHICLES)

# Model preselected by the UI layers.  Lookup fallback still goes to the
# catalog default (first entry).
DEFAULT_VEHICLE_ID = "ix-xdrive50"


def lookup(vehicle_id: str | None) -> VehicleSpec:
    """Resolve ``vehicle_id`` against the built-in catalog."""
    return DEFAULT_CATALOG.lookup(vehicle_id)
