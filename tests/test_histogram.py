import math

import pytest

from chartforge.chart_prop import AxisType
from chartforge.histogram import Histogram, histogram_frequencies

RED_FILL = 'fill="rgb(230,25,75)"'
SAMPLE = [1.0, 2.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]


def test_frequencies_place_values_in_ranges():
    result = histogram_frequencies([0.0, 5.0, 10.0], 0.0, 10.0, 0.1)
    assert len(result) == 10
    assert result[0] == 1.0
    assert result[5] == 1.0
    assert result[9] == 1.0


def test_frequencies_total_equals_data_count():
    data = [0.5, 1.5, 1.7, 2.0, 3.9, 4.0]
    result = histogram_frequencies(data, 0.0, 4.0, 0.25)
    assert sum(result) == len(data)
    assert len(result) == 4


def test_range_includes_its_minimum():
    result = histogram_frequencies([2.0], 0.0, 4.0, 0.25)
    assert result == [0.0, 0.0, 1.0, 0.0]


def test_value_outside_bounds_rejected():
    with pytest.raises(ValueError):
        histogram_frequencies([11.0], 0.0, 10.0, 0.1)


def test_value_below_bounds_rejected():
    with pytest.raises(ValueError):
        histogram_frequencies([-1.0], 0.0, 10.0, 0.1)


def test_new_histogram_axis_props():
    chart = Histogram("H", SAMPLE)
    assert chart.axis_prop.y_axis_bounds == (0.0, 0.0)
    assert chart.axis_prop.y_axis_scale == 0.0
    x_min, x_max = chart.axis_prop.x_axis_bounds
    assert x_min <= min(SAMPLE) and x_max >= max(SAMPLE)
    assert chart.chart_prop.screen_size == AxisType.SINGLE.default_screen_size


def test_negative_and_positive_data_uses_double_horizontal():
    chart = Histogram("H", [-5.0, -2.0, 0.0, 3.0, 5.0])
    assert chart.chart_prop.screen_size == AxisType.DOUBLE_HORIZONTAL.default_screen_size


def test_all_data_counted_within_chosen_bounds():
    chart = Histogram("H", SAMPLE)
    x_min, x_max = chart.axis_prop.x_axis_bounds
    result = histogram_frequencies(SAMPLE, x_min, x_max, chart.axis_prop.x_axis_scale)
    assert sum(result) == len(SAMPLE)


def test_render_draws_one_bar_per_range():
    chart = Histogram("AGES", SAMPLE)
    bars = math.trunc(1.0 / chart.axis_prop.x_axis_scale)
    svg = chart.render()
    assert svg.count(RED_FILL) == bars
    assert "AGES" in svg


def test_axis_titles_rendered():
    chart = Histogram("H", SAMPLE)
    chart.axis_prop.x_axis_title = "Value"
    chart.axis_prop.y_axis_title = "Count"
    svg = chart.render()
    assert "Value" in svg and "Count" in svg