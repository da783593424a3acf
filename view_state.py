from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from aggregate import WindowSummary
from constants import COHORTS, DEFAULT_COHORT, DEFAULT_UNIT, UNITS

logger = logging.getLogger(__name__)

DayRange = Tuple[float, float]


@dataclass(frozen=True)
class ViewState:
    """Everything a render needs besides the data. Never mutated; use the with_* helpers."""

    cohort: str = DEFAULT_COHORT
    unit: str = DEFAULT_UNIT
    show_estrus: bool = True
    day_range: Optional[DayRange] = None

    def __post_init__(self) -> None:
        if self.cohort not in COHORTS:
            raise ValueError(f"Unknown cohort {self.cohort!r}")
        if self.unit not in UNITS:
            raise ValueError(f"Unsupported temperature unit: {self.unit!r}")

    def with_cohort(self, cohort: str) -> ViewState:
        return self._changed(cohort=cohort)

    def with_unit(self, unit: str) -> ViewState:
        return self._changed(unit=unit)

    def with_estrus(self, show: bool) -> ViewState:
        return self._changed(show_estrus=bool(show))

    def with_day_range(self, day_range: Optional[DayRange]) -> ViewState:
        return self._changed(day_range=day_range)

    def _changed(self, **changes: Any) -> ViewState:
        new = replace(self, **changes)
        if new != self:
            logger.debug("View state changed: %s", changes)
        return new


def clamp_day_range(day_range: Optional[DayRange], total_days: float) -> Optional[DayRange]:
    if day_range is None:
        return None
    lo, hi = sorted((float(day_range[0]), float(day_range[1])))
    lo = min(max(lo, 0.0), total_days)
    hi = min(max(hi, 0.0), total_days)
    return (lo, hi)


def visible_summaries(
    summaries: list[WindowSummary], day_range: Optional[DayRange]
) -> list[WindowSummary]:
    if day_range is None:
        return list(summaries)
    lo, hi = sorted(day_range)
    return [s for s in summaries if lo <= s.day_fraction <= hi]


def day_range_from_selection(selection: Any) -> Optional[DayRange]:
    """
    Pull the x-extent out of a Plotly box selection as delivered by
    ``st.plotly_chart(on_select=...)``. Returns None when nothing is brushed.
    """
    if not selection:
        return None
    boxes = selection.get("box") or []
    if not boxes:
        return None
    xs = boxes[-1].get("x") or []
    if len(xs) < 2:
        return None
    lo, hi = sorted((float(xs[0]), float(xs[1])))
    return (lo, hi)
