import pytest

from chartforge.area_chart import AreaChart
from chartforge.axis_prop import calc_axis_props
from chartforge.chart_prop import AxisType

LABELS = ["Jan", "Feb", "Mar", "Apr"]
DATA = [[3.0, 5.0, 4.0, 6.0], [1.0, 2.0, 2.5, 3.0]]


def test_x_scale_spans_labels_edge_to_edge():
    chart = AreaChart("Sales", LABELS, DATA)
    assert chart.axis_prop.x_axis_scale * (len(LABELS) - 1) == pytest.approx(1.0)


def test_y_axis_matches_axis_calculation_starting_at_zero():
    chart = AreaChart("Sales", LABELS, DATA)
    expected = calc_axis_props(DATA, True, False)
    assert chart.axis_prop.y_axis_bounds == expected.bounds
    assert chart.axis_prop.y_axis_scale == expected.scale
    assert chart.axis_prop.y_axis_bounds[0] == 0.0


def test_positive_data_uses_single_axis_size():
    chart = AreaChart("Sales", LABELS, DATA)
    assert chart.chart_prop.screen_size == AxisType.SINGLE.default_screen_size


def test_mixed_sign_data_uses_double_vertical_size():
    chart = AreaChart("Profit", LABELS, [[-4.0, 2.0, 5.0, -1.0]])
    assert chart.chart_prop.screen_size == AxisType.DOUBLE_VERTICAL.default_screen_size


def test_default_axis_titles():
    chart = AreaChart("Sales", LABELS, DATA)
    assert chart.axis_prop.x_axis_title == "x-axis"
    assert chart.axis_prop.y_axis_title == "y-axis"


def test_too_few_labels_rejected():
    with pytest.raises(ValueError):
        AreaChart("Sales", ["Only"], [[1.0]])


def test_short_series_rejected_when_drawing():
    chart = AreaChart("Sales", LABELS, [[1.0, 2.0]])
    with pytest.raises(ValueError):
        chart.render()


def test_outliers_warn():
    with pytest.warns(UserWarning, match="y axis"):
        AreaChart("Spiky", ["a", "b", "c", "d", "e"], [[1.0, 1.0, 1.0, 1.0, 100.0]])


def test_render_has_one_filled_area_per_series():
    svg = AreaChart("Sales", LABELS, DATA).render()
    assert svg.startswith("<svg")
    assert svg.count('stroke="none"') == len(DATA)
    assert svg.count('fill-opacity="0.7"') == len(DATA)


def test_render_contains_title_and_labels():
    chart = AreaChart("Quarterly", LABELS, DATA)
    chart.axis_prop.x_axis_title = "Month"
    svg = chart.render()
    assert ">Quarterly</text>" in svg
    assert ">Month</text>" in svg
    for label in LABELS:
        assert f">{label}</text>" in svg


def test_legend_values_are_drawn_and_canvas_widened():
    chart = AreaChart("Sales", LABELS, DATA)
    chart.chart_prop.legend_values = ["North", "South"]
    chart.chart_prop.show_legend = True
    svg = chart.render()
    assert ">North</text>" in svg and ">South</text>" in svg
    plain = AreaChart("Sales", LABELS, DATA).render()
    assert len(svg) > len(plain)


def test_save_svg_writes_render(tmp_path):
    chart = AreaChart("Sales", LABELS, DATA)
    target = tmp_path / "area.svg"
    chart.save_svg(target)
    assert target.read_text(encoding="utf-8") == chart.render()