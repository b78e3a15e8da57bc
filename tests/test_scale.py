import pytest

from chartcanvas.geometry.models import AxisScale
from chartcanvas.geometry.scale import (
    compute_axis_scale,
    format_number,
    nice_domain,
    nice_interval,
)


def test_no_values_returns_sentinel():
    """An axis without data gets the zero sentinel."""
    for groups in ([], [[]], [[], []]):
        scale = compute_axis_scale(groups)
        assert scale.max_tick == 0
        assert scale.tick_count == 0
        assert scale.labels == []
        assert scale.is_empty


def test_small_range_steps_by_one():
    scale = compute_axis_scale([[3, 18]])
    assert scale.interval == 1
    assert scale.max_tick == 18
    assert scale.labels == list(range(0, 19))
    assert scale.tick_count == 19


def test_fractional_values_round_up_to_next_integer():
    scale = compute_axis_scale([[0.2, 0.75]])
    assert scale.labels == [0, 1]
    assert scale.max_tick == 1


@pytest.mark.parametrize("values, interval, ceiling", [
    ([0, 95], 5, 95),
    ([120, 480], 20, 480),
    ([0, 1234], 100, 1300),
    ([10, 40, 5], 2, 40),
])
def test_wide_ranges_use_nice_intervals(values, interval, ceiling):
    scale = compute_axis_scale([values])
    assert scale.interval == interval
    assert scale.max_tick == ceiling
    assert scale.labels[0] == 0
    assert scale.labels[-1] == ceiling


def test_values_from_several_series_share_one_scale():
    scale = compute_axis_scale([[5, 10], [40]])
    assert scale.interval == 2
    assert scale.max_tick == 40
    assert len(scale.labels) == 21


def test_negative_minimum_starts_at_data_minimum():
    """Labels start at the data minimum and the ceiling is appended when the steps fall short."""
    scale = compute_axis_scale([[-45, 60]])
    assert scale.interval == 10
    assert scale.labels[0] == -45
    assert scale.labels[-2] == 55
    assert scale.labels[-1] == 60
    assert scale.max_tick == 60


def test_all_negative_values():
    scale = compute_axis_scale([[-50, -10]])
    assert scale.interval == 2
    assert scale.labels[0] == -50
    assert scale.labels[-1] == -10


def test_all_zero_values():
    scale = compute_axis_scale([[0, 0]])
    assert scale.labels == [0]
    assert scale.tick_count == 1


@pytest.mark.parametrize("values, ceiling", [
    ([12, 47], 100),
    ([0, 135], 140),
    ([-20, 30], 100),
    ([0.5], 100),
])
def test_percentage_axis(values, ceiling):
    scale = compute_axis_scale([values], "#,##0%")
    assert scale.interval == 10
    assert scale.max_tick == ceiling
    assert scale.labels[0] == 0
    assert all(label % 10 == 0 for label in scale.labels)
    assert scale.max_tick >= 100


@pytest.mark.parametrize("values", [
    [1],
    [7, 29.5],
    [0.001, 0.002],
    [-3.7, 9.2],
    [31, 1_000_000],
    [-12345.6, 98765.4],
    [99.99, 100.01],
    [1e-3, 4.5e4],
])
def test_labels_ascend_and_cover_maximum(values):
    scale = compute_axis_scale([values])
    labels = scale.labels
    assert all(later > earlier for earlier, later in zip(labels, labels[1:]))
    assert labels[-1] >= max(values)
    assert scale.tick_count == len(labels)


def test_nice_interval():
    assert nice_interval(30) == 1
    assert nice_interval(31) == 2
    assert nice_interval(75) == 5
    assert nice_interval(100) == 10
    assert nice_interval(250) == 20
    assert nice_interval(990) == 50


def test_nice_domain_rounds_both_ends():
    domain = nice_domain(12, 87)
    assert domain.interval == 5
    assert domain.min_tick == 10
    assert domain.max_tick == 90


def test_nice_domain_small_range_floors_minimum():
    domain = nice_domain(3.4, 16.2)
    assert domain.min_tick == 3
    assert domain.max_tick == 17
    assert domain.labels == list(range(3, 18))


def test_nice_domain_widens_collapsed_range():
    domain = nice_domain(5, 5)
    assert domain.min_tick == 5
    assert domain.max_tick == 6


@pytest.mark.parametrize("value, number_format, expected", [
    (1234567, "#,##0", "1,234,567"),
    (1234.4, "0", "1234"),
    (2.5, "0", "3"),
    (-2.5, "#,##0", "-2"),
    (-2.6, "0", "-3"),
    (-1234.5, "#,##0", "-1,234"),
    (-0.4, "0", "0"),
    (0.25, "#,##0%", "25%"),
    (12, "", "12"),
    (1234.5, "", "1234.5"),
])
def test_format_number(value, number_format, expected):
    assert format_number(value, number_format) == expected


def test_axis_scale_format_labels():
    scale = AxisScale(max_tick=2000, tick_count=3, labels=[0, 1000, 2000])
    assert scale.format_labels("#,##0") == ["0", "1,000", "2,000"]
