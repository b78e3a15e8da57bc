import dataclasses
import math

import pytest

from chartcanvas.data.series import BarSeries, HistogramSeries, LineSeries, TimePoint


def test_series_identity_is_frozen():
    line = LineSeries(id=0, title="Sales")
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.title = "Other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.color = "red"


def test_points_keep_insertion_order_and_duplicates():
    line = LineSeries(id=0)
    line.add_data("20250102", 2)
    line.add_data("20250101", 1, "note")
    line.add_data("20250101", 3)
    assert line.points == [
        TimePoint("20250102", 2, ""),
        TimePoint("20250101", 1, "note"),
        TimePoint("20250101", 3, ""),
    ]
    assert line.values == [2, 1, 3]


def test_series_compare_by_identity():
    assert LineSeries(id=0) != LineSeries(id=0)


def test_defaults():
    assert LineSeries(id=0).color == "black"
    assert LineSeries(id=0).line_width == 2
    assert BarSeries(id=1).color == "blue"
    assert HistogramSeries(id=2).opacity == 0.7


def test_add_ratio_data():
    bar = BarSeries(id=0)
    bar.add_ratio_data("20250101", 1, 4)
    bar.add_ratio_data("20250102", 5, 0)
    assert bar.values == [0.25, 0]


def test_to_dict():
    line = LineSeries(id=3, title="Sales", secondary_axis=True)
    line.add_data("20250101", 10, "tip")
    data = line.to_dict()
    assert data["kind"] == "line"
    assert data["secondary_axis"] is True
    assert data["points"] == [{"date": "20250101", "value": 10, "tooltip": "tip"}]
    assert BarSeries(id=4).to_dict()["kind"] == "bar"


def test_histogram_ignores_non_numbers():
    series = HistogramSeries(id=0)
    series.add_data_array([1, 2.5, "3", None, math.nan, True])
    assert series.points == [1.0, 2.5]
    assert len(series) == 2
