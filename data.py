from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Union

import pandas as pd

from constants import FEMALE_TEMP_COLUMNS, MALE_TEMP_COLUMNS

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
DATA_PATH = Path(
    os.environ.get("MOUSE_TEMP_CSV", BASE_DIR / "data" / "mouse_temperatures.csv")
)

Source = Union[str, Path, IO]


class DataLoadError(Exception):
    """The input table could not be read or has none of the sensor columns."""


def load_readings(source: Source | None = None) -> pd.DataFrame:
    """
    Read the per-minute sensor table. Row order is kept as-is since it
    defines the window grouping downstream. Cells are not coerced here;
    non-numeric values are handled during aggregation.
    """
    if source is None:
        source = DATA_PATH
    label = str(source) if isinstance(source, (str, Path)) else getattr(
        source, "name", "<upload>"
    )
    try:
        df = pd.read_csv(source)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise DataLoadError(f"Could not read temperature data from {label}: {exc}") from exc

    known = set(FEMALE_TEMP_COLUMNS) | set(MALE_TEMP_COLUMNS)
    if not known.intersection(df.columns):
        raise DataLoadError(
            f"{label} has no fem_temp_*/male_temp_* columns; found {list(df.columns)[:5]}"
        )
    logger.info("Loaded %d rows from %s", len(df), label)
    return df


def export_summaries_csv(summaries_df: pd.DataFrame) -> str:
    return summaries_df.to_csv(index=False)
