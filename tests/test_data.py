from pathlib import Path

import pandas as pd
import pytest

import data
from data import DataLoadError, export_summaries_csv, load_readings


def test_load_readings_keeps_row_order(tmp_path: Path):
    path = tmp_path / "temps.csv"
    path.write_text("fem_temp_1,male_temp_1\n37.0,36.5\n36.9,bad\n37.3,36.8\n")
    df = load_readings(path)
    assert len(df) == 3
    assert df["fem_temp_1"].tolist() == [37.0, 36.9, 37.3]
    # non-numeric cells are left for the aggregator to drop
    assert df["male_temp_1"].astype(str).tolist()[1] == "bad"


def test_load_readings_uses_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "default.csv"
    path.write_text("fem_temp_1\n37.0\n")
    monkeypatch.setattr(data, "DATA_PATH", path, raising=False)
    assert len(load_readings()) == 1


def test_missing_file_raises_data_load_error(tmp_path: Path):
    with pytest.raises(DataLoadError):
        load_readings(tmp_path / "nope.csv")


def test_empty_file_raises_data_load_error(tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(DataLoadError):
        load_readings(path)


def test_file_without_sensor_columns_rejected(tmp_path: Path):
    path = tmp_path / "other.csv"
    path.write_text("time,value\n0,1\n")
    with pytest.raises(DataLoadError, match="no fem_temp"):
        load_readings(path)


def test_export_summaries_csv():
    text = export_summaries_csv(pd.DataFrame({"window_index": [0, 1], "avg_temperature": [37.1, 37.0]}))
    assert text.splitlines()[0] == "window_index,avg_temperature"
    assert len(text.splitlines()) == 3


def test_bundled_sample_loads_and_aggregates():
    from aggregate import aggregate
    from constants import FEMALE_TEMP_COLUMNS, MALE_TEMP_COLUMNS

    df = load_readings()
    assert set(FEMALE_TEMP_COLUMNS + MALE_TEMP_COLUMNS) <= set(df.columns)
    assert len(df) == 3 * 1440

    windows = aggregate(df, "both")
    assert len(windows) == 3 * 576
    assert all(35.0 < w.avg_temperature < 39.0 for w in windows)
