from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from aggregate import WindowSummary, summaries_to_frame
from constants import (
    DARK_BAND_COLOR,
    DEFAULT_CHART_HEIGHT,
    ESTRUS_BAND_COLOR,
    LINE_COLOR,
    MINUTES_PER_DAY,
    SELECTION_COLOR,
    WINDOW_SIZE_MINUTES,
)
from utils.units import convert_temperature, unit_label
from view_state import ViewState, visible_summaries


def _flag_spans(frame: pd.DataFrame, flag: str, step_days: float) -> list[tuple[float, float]]:
    """Contiguous [x0, x1) day spans where ``frame[flag]`` is true."""
    spans: list[tuple[float, float]] = []
    start = None
    prev = None
    for x, on in zip(frame["day_fraction"], frame[flag]):
        if on and start is None:
            start = x
        elif not on and start is not None:
            spans.append((start, x))
            start = None
        prev = x
    if start is not None:
        spans.append((start, prev + step_days))
    return spans


def _step_days(frame: pd.DataFrame) -> float:
    if len(frame) > 1:
        return float(frame["day_fraction"].iloc[1] - frame["day_fraction"].iloc[0])
    return WINDOW_SIZE_MINUTES / MINUTES_PER_DAY


def build_temperature_figure(
    summaries: list[WindowSummary], view: ViewState, *, height: int = DEFAULT_CHART_HEIGHT
) -> go.Figure:
    fig = go.Figure()
    label = unit_label(view.unit)
    frame = summaries_to_frame(visible_summaries(summaries, view.day_range))

    if frame.empty:
        fig.add_annotation(
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            text="No data in the selected range",
            showarrow=False,
            font=dict(size=14, color="rgba(0,0,0,0.6)"),
        )
    else:
        step = _step_days(frame)
        # Background bands go first so the line stays on top
        for x0, x1 in _flag_spans(frame, "is_dark", step):
            fig.add_vrect(
                x0=x0, x1=x1, fillcolor=DARK_BAND_COLOR, line_width=0, layer="below"
            )
        if view.show_estrus:
            for x0, x1 in _flag_spans(frame, "is_estrus", step):
                fig.add_vrect(
                    x0=x0,
                    x1=x1,
                    fillcolor=ESTRUS_BAND_COLOR,
                    line_width=0,
                    layer="below",
                    annotation_text="Estrus",
                    annotation_position="top left",
                )

        temps = convert_temperature(frame["avg_temperature"].astype(float), view.unit)
        fig.add_trace(
            go.Scatter(
                x=frame["day_fraction"],
                y=temps,
                mode="lines",
                name=f"Temperature ({label})",
                line=dict(color=LINE_COLOR, width=1.5),
                hovertemplate="Day %{x:.2f}<br>%{y:.2f}" + label + "<extra></extra>",
            )
        )

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Day",
        yaxis_title=f"Temperature ({label})",
    )
    if view.day_range is not None:
        fig.update_xaxes(range=sorted(view.day_range))
    return fig


def build_overview_figure(
    summaries: list[WindowSummary], view: ViewState, *, height: int = 160
) -> go.Figure:
    """Compact full-length chart used for brushing a day range."""
    fig = go.Figure()
    frame = summaries_to_frame(summaries)
    if not frame.empty:
        fig.add_trace(
            go.Scatter(
                x=frame["day_fraction"],
                y=convert_temperature(frame["avg_temperature"].astype(float), view.unit),
                mode="lines",
                name="Overview",
                line=dict(color=LINE_COLOR, width=1),
                hoverinfo="skip",
                showlegend=False,
            )
        )
    if view.day_range is not None:
        lo, hi = sorted(view.day_range)
        fig.add_vrect(x0=lo, x1=hi, fillcolor=SELECTION_COLOR, line_width=0, layer="below")

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=10, b=30),
        dragmode="select",
        selectdirection="h",
        xaxis_title=None,
        yaxis_title=None,
    )
    fig.update_yaxes(showticklabels=False, fixedrange=True)
    return fig
