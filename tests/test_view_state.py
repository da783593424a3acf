import pandas as pd
import pytest

from aggregate import aggregate
from view_state import (
    ViewState,
    clamp_day_range,
    day_range_from_selection,
    visible_summaries,
)


def make_summaries(n_rows: int = 3 * 1440):
    return aggregate(pd.DataFrame({"fem_temp_1": [37.0] * n_rows}), "female")


def test_defaults_and_validation():
    v = ViewState()
    assert v.cohort == "both"
    assert v.unit == "C"
    assert v.show_estrus is True
    assert v.day_range is None
    with pytest.raises(ValueError):
        ViewState(cohort="pups")
    with pytest.raises(ValueError):
        v.with_unit("K")


def test_with_helpers_return_new_values():
    v = ViewState()
    f = v.with_unit("F")
    assert f is not v
    assert v.unit == "C" and f.unit == "F"
    assert v.with_cohort("male").cohort == "male"
    assert v.with_estrus(False).show_estrus is False
    assert v.with_day_range((1.0, 2.0)).day_range == (1.0, 2.0)
    with pytest.raises(AttributeError):
        v.unit = "F"


def test_visible_summaries_filters_inclusively():
    summaries = make_summaries()
    assert len(visible_summaries(summaries, None)) == len(summaries)
    shown = visible_summaries(summaries, (2.0, 1.0))
    assert shown
    assert all(1.0 <= s.day_fraction <= 2.0 for s in shown)
    assert shown[0].day_fraction == pytest.approx(1.0)
    assert shown[-1].day_fraction == pytest.approx(2.0)


def test_clamp_day_range():
    assert clamp_day_range(None, 14) is None
    assert clamp_day_range((5, 2), 14) == (2.0, 5.0)
    assert clamp_day_range((-1, 20), 14) == (0.0, 14.0)


def test_day_range_from_selection():
    assert day_range_from_selection(None) is None
    assert day_range_from_selection({"points": [], "box": []}) is None
    sel = {"box": [{"xref": "x", "yref": "y", "x": [4.5, 1.25], "y": [36, 38]}]}
    assert day_range_from_selection(sel) == (1.25, 4.5)
