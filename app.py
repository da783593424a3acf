from __future__ import annotations

import io
import logging
import os

import pandas as pd
import streamlit as st

from aggregate import WindowSummary, aggregate, daily_summary, summaries_to_frame
from charts import build_overview_figure, build_temperature_figure
from constants import MINUTES_PER_DAY, WINDOW_SIZE_MINUTES
from controls import OVERVIEW_KEY, apply_brush_selection, render_controls
from data import DATA_PATH, DataLoadError, export_summaries_csv, load_readings
from utils.units import convert_temperature, unit_label

logger = logging.getLogger(__name__)


@st.cache_data(show_spinner="Loading temperature data...")
def _load_default() -> pd.DataFrame:
    return load_readings(DATA_PATH)


@st.cache_data(show_spinner=False)
def _load_uploaded(content: bytes, name: str) -> pd.DataFrame:
    buf = io.BytesIO(content)
    buf.name = name
    return load_readings(buf)


@st.cache_data(show_spinner=False)
def _aggregate_cached(
    rows: pd.DataFrame, cohort: str, window_size_minutes: float
) -> list[WindowSummary]:
    return aggregate(rows, cohort, window_size_minutes)


def _read_source() -> pd.DataFrame | None:
    uploaded = st.sidebar.file_uploader("Temperature CSV", type=["csv"])
    try:
        if uploaded is not None:
            return _load_uploaded(uploaded.getvalue(), uploaded.name)
        return _load_default()
    except DataLoadError as e:
        logger.error("%s", e)
        st.error(str(e))
        return None


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title="Mouse Body Temperature", page_icon="🐭", layout="wide")
    st.title("Mouse core body temperature")
    st.caption(
        "Windowed averages over 14 days. Grey bands mark lights-off, pink bands mark estrus days."
    )

    rows = _read_source()
    if rows is None:
        st.info("No chart rendered: upload a CSV with fem_temp_* and male_temp_* columns.")
        return

    # total length depends only on row count, not on the cohort
    total_days = len(rows) / MINUTES_PER_DAY
    view = render_controls(total_days)

    summaries = _aggregate_cached(rows, view.cohort, WINDOW_SIZE_MINUTES)
    if not summaries:
        st.info("The data file has no rows to plot.")
        return

    st.subheader("Temperature over time")
    st.plotly_chart(build_temperature_figure(summaries, view), use_container_width=True)
    st.caption("Drag across the overview to zoom the chart above.")
    st.plotly_chart(
        build_overview_figure(summaries, view),
        use_container_width=True,
        key=OVERVIEW_KEY,
        on_select=apply_brush_selection,
        selection_mode=("box",),
    )

    with st.expander("Daily summary"):
        daily = daily_summary(summaries)
        label = unit_label(view.unit)
        for col in ("mean", "min", "max"):
            daily[col] = convert_temperature(daily[col].astype(float), view.unit)
        daily = daily.rename(
            columns={
                "day_index": "day",
                "mean": f"mean ({label})",
                "min": f"min ({label})",
                "max": f"max ({label})",
                "is_estrus": "estrus",
            }
        )
        st.dataframe(daily, use_container_width=True, hide_index=True)
        st.download_button(
            "Download windowed CSV",
            data=export_summaries_csv(summaries_to_frame(summaries)),
            file_name=f"windows_{view.cohort}.csv",
            mime="text/csv",
        )


if __name__ == "__main__":
    main()
