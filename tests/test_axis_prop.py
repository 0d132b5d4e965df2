import warnings

import pytest

from chartforge.axis_prop import (
    AxisProp,
    calc_axis_props,
    calc_data_range,
    calc_scale,
    check_outliers,
    percentile,
)

DATASETS = [
    [[30.0, 50.0, 80.0]],
    [[0.1, 0.2, 0.35]],
    [[-30.0, -50.0, -80.0]],
    [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
    [[-5.0, 12.0, 40.0]],
    [[1000.0, 2500.0, 9000.0]],
]


def test_percentile_endpoints_are_first_and_last():
    data = [3.0, 7.0, 9.0, 20.0]
    assert percentile(data, 0.0) == 3.0
    assert percentile(data, 1.0) == 20.0


def test_percentile_hits_middle_element():
    assert percentile([1.0, 2.0, 3.0], 0.5) == 2.0


def test_percentile_interpolates_between_neighbours():
    result = percentile([2.0, 4.0, 8.0, 16.0], 0.25)
    assert 2.0 < result < 8.0


def test_percentile_empty_raises():
    with pytest.raises(ValueError):
        percentile([], 0.5)


def test_check_outliers_warns_for_x_axis():
    with pytest.warns(UserWarning, match="x axis"):
        assert check_outliers([[1.0, 2.0, 3.0, 4.0, 100.0]], True) is True


def test_check_outliers_warns_for_y_axis():
    with pytest.warns(UserWarning, match="y axis"):
        assert check_outliers([[1.0, 2.0, 3.0], [-500.0, 1.0, 2.0, 3.0, 4.0]], False)


def test_check_outliers_quiet_for_even_data():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert check_outliers([[1.0, 2.0, 3.0, 4.0, 5.0]], True) is False


def test_calc_scale_power_of_ten_range():
    assert calc_scale(0.0, 100.0) == pytest.approx(0.1)


def test_calc_scale_equal_bounds_raises():
    with pytest.raises(ValueError):
        calc_scale(5.0, 5.0)


@pytest.mark.parametrize("data", DATASETS)
def test_calc_data_range_covers_data(data):
    (low, high), scale = calc_data_range(data, False, 0.8, 0.08, 0.2)
    values = [v for series in data for v in series]
    assert low <= min(values)
    assert high >= max(values)
    assert 0.08 <= scale <= 0.2


def test_calc_data_range_fits_tight_bounds():
    bounds, scale = calc_data_range([[30.0, 50.0, 80.0]], False, 0.8, 0.08, 0.2)
    assert bounds == (30.0, 80.0)
    assert scale == pytest.approx(0.2)


def test_calc_data_range_start_zero_positive():
    (low, high), _ = calc_data_range([[30.0, 50.0, 80.0]], True, 0.8, 0.08, 0.2)
    assert low == 0.0
    assert high >= 80.0


def test_calc_data_range_start_zero_negative():
    (low, high), _ = calc_data_range([[-30.0, -50.0, -80.0]], True, 0.8, 0.08, 0.2)
    assert high == 0.0
    assert low <= -80.0


def test_calc_data_range_all_zero():
    bounds, _ = calc_data_range([[0.0, 0.0]], False, 0.8, 0.08, 0.2)
    assert bounds == (0.0, 1.0)


def test_calc_data_range_single_positive_value_starts_at_zero():
    (low, high), _ = calc_data_range([[5.0, 5.0]], False, 0.8, 0.08, 0.2)
    assert low == 0.0
    assert high > 5.0


def test_calc_data_range_single_negative_value_ends_at_zero():
    (low, high), _ = calc_data_range([[-4.0]], False, 0.8, 0.08, 0.2)
    assert high == 0.0
    assert low < -4.0


def test_calc_data_range_empty_raises():
    with pytest.raises(ValueError):
        calc_data_range([], False, 0.8, 0.08, 0.2)


def test_calc_axis_props_matches_default_range():
    data = [[-5.0, 12.0, 40.0]]
    assert calc_axis_props(data, False, True) == calc_data_range(data, False, 0.8, 0.08, 0.2)


def test_calc_axis_props_warns_on_outliers():
    with pytest.warns(UserWarning):
        result = calc_axis_props([[1.0, 2.0, 3.0, 4.0, 100.0]], True, False)
    assert result.bounds[1] >= 100.0


def test_axis_prop_defaults_and_bounds():
    axis = AxisProp((0.0, 0.0), (0.0, 10.0), 1.0, 0.1)
    assert (axis.x_axis_title, axis.y_axis_title) == ("x-axis", "y-axis")
    axis.set_x_axis_bounds(0.0, 100.0)
    assert axis.x_axis_bounds == (0.0, 100.0)
    assert axis.x_axis_scale == calc_scale(0.0, 100.0)
    axis.set_y_axis_bounds(-20.0, 60.0)
    assert axis.y_axis_bounds == (-20.0, 60.0)
    assert axis.y_axis_scale == calc_scale(-20.0, 60.0)


def test_axis_prop_interval_round_trip():
    axis = AxisProp((0.0, 100.0), (-20.0, 60.0), 0.1, 0.1)
    axis.set_x_axis_interval(25.0)
    axis.set_y_axis_interval(16.0)
    assert axis.x_axis_scale * 100.0 == pytest.approx(25.0)
    assert axis.y_axis_scale * 80.0 == pytest.approx(16.0)


def test_axis_prop_interval_on_zero_width_raises():
    axis = AxisProp((0.0, 0.0), (0.0, 0.0), 1.0, 0.0)
    with pytest.raises(ValueError):
        axis.set_x_axis_interval(1.0)
    with pytest.raises(ValueError):
        axis.set_y_axis_interval(1.0)