from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, fields

import numpy as np
import pandas as pd

from constants import (
    COHORTS,
    ESTRUS_CYCLE_DAYS,
    ESTRUS_DAY_OFFSET,
    FEMALE_TEMP_COLUMNS,
    LIGHTS_OFF_MINUTES,
    MALE_TEMP_COLUMNS,
    MINUTES_PER_DAY,
    WINDOW_SIZE_MINUTES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowSummary:
    window_index: int
    minute_offset: float
    day_index: int
    day_fraction: float
    avg_temperature: float
    is_dark: bool
    is_estrus: bool


SUMMARY_COLUMNS: list[str] = [f.name for f in fields(WindowSummary)]


def cohort_columns(cohort: str) -> list[str]:
    if cohort == "female":
        return list(FEMALE_TEMP_COLUMNS)
    if cohort == "male":
        return list(MALE_TEMP_COLUMNS)
    if cohort == "both":
        return FEMALE_TEMP_COLUMNS + MALE_TEMP_COLUMNS
    raise ValueError(f"Unknown cohort {cohort!r}; expected one of {COHORTS}")


def row_means(rows: pd.DataFrame, columns: list[str]) -> pd.Series:
    """
    Mean of the selected columns for each row, skipping non-numeric cells.
    Rows with no numeric value at all come back as NaN.
    """
    missing = [c for c in columns if c not in rows.columns]
    if missing:
        logger.warning("Columns missing from input, treated as empty: %s", missing)
    selected = rows.reindex(columns=columns)
    numeric = selected.apply(pd.to_numeric, errors="coerce")
    return numeric.mean(axis=1, skipna=True)


def _window_summary(window_index: int, avg: float, window_size_minutes: float) -> WindowSummary:
    minute_offset = window_index * window_size_minutes
    day_index = math.floor(minute_offset / MINUTES_PER_DAY)
    return WindowSummary(
        window_index=window_index,
        minute_offset=minute_offset,
        day_index=day_index,
        day_fraction=minute_offset / MINUTES_PER_DAY,
        avg_temperature=avg,
        is_dark=(minute_offset % MINUTES_PER_DAY) < LIGHTS_OFF_MINUTES,
        is_estrus=day_index % ESTRUS_CYCLE_DAYS == ESTRUS_DAY_OFFSET,
    )


def aggregate(
    rows: pd.DataFrame,
    cohort: str,
    window_size_minutes: float = WINDOW_SIZE_MINUTES,
) -> list[WindowSummary]:
    """
    Bucket per-minute rows into fixed windows of ``window_size_minutes`` rows.

    Window ``i`` covers rows ``[floor(i*w), floor((i+1)*w))``; grouping is by
    row ordinal, so the input is assumed to hold exactly one row per minute.
    Each window's temperature is the mean of its per-row cohort means. A
    window with no numeric reading gets 0.0.
    """
    if window_size_minutes <= 0:
        raise ValueError("window_size_minutes must be positive")
    columns = cohort_columns(cohort)
    n_rows = len(rows)
    if n_rows == 0:
        return []

    means = row_means(rows, columns).reset_index(drop=True)
    n_windows = math.ceil(n_rows / window_size_minutes)

    # floor(i*w) starts each window; floor(r/w) would put row 2 in window 0 for w=2.5
    starts = np.floor(np.arange(n_windows) * window_size_minutes)
    window_ids = np.searchsorted(starts, np.arange(n_rows), side="right") - 1
    avgs = (
        means.groupby(window_ids).mean()
        .reindex(range(n_windows))
        .fillna(0.0)
    )

    summaries = [
        _window_summary(i, float(avg), window_size_minutes) for i, avg in enumerate(avgs)
    ]

    logger.info(
        "Aggregated %d rows into %d windows (cohort=%s, window=%s min)",
        n_rows,
        len(summaries),
        cohort,
        window_size_minutes,
    )
    return summaries


def summaries_to_frame(summaries: list[WindowSummary]) -> pd.DataFrame:
    if not summaries:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    return pd.DataFrame([asdict(s) for s in summaries], columns=SUMMARY_COLUMNS)


def daily_summary(summaries: list[WindowSummary]) -> pd.DataFrame:
    """Per-day mean/min/max of the window averages, with the estrus flag."""
    frame = summaries_to_frame(summaries)
    if frame.empty:
        return pd.DataFrame(columns=["day_index", "mean", "min", "max", "is_estrus"])
    grouped = frame.groupby("day_index", sort=True)
    out = grouped["avg_temperature"].agg(["mean", "min", "max"])
    out["is_estrus"] = grouped["is_estrus"].first()
    return out.reset_index()
