"""DC charging curve, a step function of state of charge.

Deliverable DC power tapers as the battery fills.  The curve is a sorted
table of ``(soc_percent, multiplier)`` breakpoints; the multiplier for a
given SoC is that of the greatest breakpoint at or below it.  There is no
interpolation between breakpoints.
"""

from __future__ import annotations

from bisect import bisect_right

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurveBreakpoint(BaseModel):
    """One step of the curve."""

    model_config = ConfigDict(frozen=True)

    soc_percent: float = Field(ge=0, le=100, description="SoC where this step begins (%)")
    multiplier: float = Field(gt=0, le=1.0, description="Fraction of station power delivered")


class ChargingCurve(BaseModel):
    """Ordered breakpoints, ascending by ``soc_percent``."""

    model_config = ConfigDict(frozen=True)

    breakpoints: tuple[CurveBreakpoint, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_sorted(self) -> "ChargingCurve":
        socs = [b.soc_percent for b in self.breakpoints]
        if socs != sorted(socs):
            raise ValueError("breakpoints must be sorted ascending by soc_percent")
        return self

    def multiplier_at(self, percent: float) -> float:
        """Multiplier of the greatest breakpoint <= ``percent``.

        1.0 below the first breakpoint, or when the table is empty.
        """
        socs = [b.soc_percent for b in self.breakpoints]
        idx = bisect_right(socs, percent)
        if idx == 0:
            return 1.0
        return self.breakpoints[idx - 1].multiplier

    @classmethod
    def from_pairs(cls, pairs: list[tuple[float, float]]) -> "ChargingCurve":
        return cls(breakpoints=tuple(CurveBreakpoint(soc_percent=s, multiplier=m) for s, m in pairs))


DEFAULT_DC_CURVE = ChargingCurve.from_pairs([
    (0, 1.0),
    (10, 1.0),
    (20, 1.0),
    (30, 1.0),
    (40, 1.0),
    (50, 0.95),
    (60, 0.85),
    (70, 0.70),
    (80, 0.50),
    (90, 0.25),
    (100, 0.10),
])
