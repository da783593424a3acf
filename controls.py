from __future__ import annotations

from typing import Optional

import streamlit as st

from constants import COHORTS, DEFAULT_COHORT, DEFAULT_UNIT, UNITS
from view_state import ViewState, clamp_day_range, day_range_from_selection

DAY_RANGE_KEY = "day_range"
OVERVIEW_KEY = "overview_chart"

COHORT_LABELS = {"female": "Female", "male": "Male", "both": "Both"}


def apply_brush_selection() -> None:
    """on_select callback for the overview chart: copy the brushed span into the slider."""
    event = st.session_state.get(OVERVIEW_KEY)
    selection = getattr(event, "selection", None) if event is not None else None
    brushed = day_range_from_selection(selection)
    if brushed is not None:
        # snap to the slider's quarter-day step
        st.session_state[DAY_RANGE_KEY] = tuple(round(x * 4) / 4 for x in brushed)


def _reset_range(total_days: float) -> None:
    st.session_state[DAY_RANGE_KEY] = (0.0, float(total_days))


def render_controls(total_days: float) -> ViewState:
    st.sidebar.header("Display")
    cohort = st.sidebar.radio(
        "Sex",
        options=list(COHORTS),
        index=COHORTS.index(DEFAULT_COHORT),
        format_func=lambda c: COHORT_LABELS[c],
        horizontal=True,
    )
    unit = st.sidebar.radio(
        "Unit",
        options=list(UNITS),
        index=UNITS.index(DEFAULT_UNIT),
        format_func=lambda u: f"°{u}",
        horizontal=True,
    )
    show_estrus = st.sidebar.checkbox("Highlight estrus", value=True)

    day_range: Optional[tuple[float, float]] = None
    if total_days > 0:
        current = clamp_day_range(
            st.session_state.get(DAY_RANGE_KEY, (0.0, total_days)), total_days
        )
        st.session_state[DAY_RANGE_KEY] = current
        picked = st.sidebar.slider(
            "Day range",
            min_value=0.0,
            max_value=float(total_days),
            step=0.25,
            key=DAY_RANGE_KEY,
        )
        if tuple(picked) != (0.0, float(total_days)):
            day_range = (float(picked[0]), float(picked[1]))
        st.sidebar.button("Reset range", on_click=_reset_range, args=(total_days,))

    return ViewState().with_cohort(cohort).with_unit(unit).with_estrus(show_estrus).with_day_range(
        day_range
    )
