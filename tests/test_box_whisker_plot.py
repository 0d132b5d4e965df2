import math

import pytest

from chartforge.axis_prop import calc_axis_props, percentile
from chartforge.box_whisker_plot import BoxWhiskerPlot, box_statistics
from chartforge.chart_prop import AxisType

LABELS = ["A", "B"]
DATA = [[4.0, 1.0, 3.0, 2.0, 5.0], [2.0, 6.0, 4.0, 8.0, 5.0]]


def test_quartiles_follow_percentile_of_sorted_data():
    values = [4.0, 1.0, 3.0, 2.0, 5.0]
    ordered = sorted(values)
    stats = box_statistics(values)
    assert stats.lq == percentile(ordered, 0.25)
    assert stats.median == percentile(ordered, 0.5)
    assert stats.uq == percentile(ordered, 0.75)
    assert stats.iqr == stats.uq - stats.lq
    assert stats.lq <= stats.median <= stats.uq


def test_outlier_is_separated_from_whiskers():
    stats = box_statistics([1.0, 2.0, 3.0, 4.0, 100.0])
    assert stats.outliers == [100.0]
    assert stats.maximum == 4.0
    assert stats.minimum == 1.0


def test_no_outliers_whiskers_span_data():
    stats = box_statistics([4.0, 1.0, 3.0, 2.0, 5.0])
    assert stats.outliers == []
    assert stats.minimum == 1.0
    assert stats.maximum == 5.0


def test_values_on_limits_are_in_neither_group():
    stats = box_statistics([1.0, 1.0, 1.0, 1.0])
    assert stats.outliers == []
    assert math.isnan(stats.minimum)
    assert math.isnan(stats.maximum)


def test_empty_series_rejected():
    with pytest.raises(ValueError):
        box_statistics([])


def test_x_scale_gives_one_slot_per_label():
    plot = BoxWhiskerPlot("Spread", LABELS, DATA)
    assert plot.axis_prop.x_axis_scale * len(LABELS) == pytest.approx(1.0)


def test_y_axis_matches_axis_calculation():
    plot = BoxWhiskerPlot("Spread", LABELS, DATA)
    expected = calc_axis_props(DATA, True, False)
    assert plot.axis_prop.y_axis_bounds == expected.bounds
    assert plot.axis_prop.y_axis_scale == expected.scale
    assert plot.chart_prop.screen_size == AxisType.SINGLE.default_screen_size


def test_mixed_sign_uses_double_vertical():
    plot = BoxWhiskerPlot("Spread", ["A"], [[-5.0, -2.0, 1.0, 3.0, 6.0]])
    assert plot.chart_prop.screen_size == AxisType.DOUBLE_VERTICAL.default_screen_size


def test_no_labels_rejected():
    with pytest.raises(ValueError):
        BoxWhiskerPlot("Spread", [], DATA)


def test_render_has_one_box_per_series():
    svg = BoxWhiskerPlot("Spread", LABELS, DATA).render()
    assert svg.startswith("<svg")
    assert svg.count('stroke="none"') == len(DATA)
    assert ">Spread</text>" in svg
    for label in LABELS:
        assert f">{label}</text>" in svg


def test_outliers_add_marks_to_drawing():
    plain = BoxWhiskerPlot("Spread", ["A"], [[1.0, 2.0, 3.0, 4.0, 5.0]]).render()
    with pytest.warns(UserWarning):
        spiky_plot = BoxWhiskerPlot("Spread", ["A"], [[1.0, 2.0, 3.0, 4.0, 100.0]])
    spiky = spiky_plot.render()
    assert spiky.count("<path") == plain.count("<path") + 1


def test_save_svg_writes_render(tmp_path):
    plot = BoxWhiskerPlot("Spread", LABELS, DATA)
    target = tmp_path / "box.svg"
    plot.save_svg(target)
    assert target.read_text(encoding="utf-8") == plot.render()