"""Line chart: marked points joined by lines over categorical x-axis labels."""

from __future__ import annotations

import math
from typing import Sequence

from .axis_drawer import calc_zero_intercept, draw_x_axis_cat, draw_y_axis_con
from .axis_prop import AxisProp, calc_axis_props
from .chart_prop import AxisType, ChartProp
from .drawing import (
    Canvas,
    Chart,
    Scalings,
    draw_legend,
    draw_title,
    legend_scale,
    normal_scale,
    percentage_in_bounds,
    set_defaults,
    set_nth_colour,
    text_scales,
)


def _axis_setup(
    data_labels: Sequence[str], data: Sequence[Sequence[float]]
) -> tuple[list[str], list[list[float]], AxisType, AxisProp]:
    labels = list(data_labels)
    if not labels:
        raise ValueError("a line chart needs at least one data label")
    series = [list(values) for values in data]
    x_axis_scale = 1.0 / len(labels)
    y_axis = calc_axis_props(series, False, False)
    y_min, y_max = y_axis.bounds
    axis_type = AxisType.DOUBLE_VERTICAL if y_min < 0.0 < y_max else AxisType.SINGLE
    axis_prop = AxisProp((0.0, 0.0), y_axis.bounds, x_axis_scale, y_axis.scale)
    return labels, series, axis_type, axis_prop


class LineChart(Chart):
    """Trends over time or categories, highlighting order."""

    def __init__(self, chart_title: str, data_labels: Sequence[str], data: Sequence[Sequence[float]]) -> None:
        self.data_labels, self.data, axis_type, self.axis_prop = _axis_setup(data_labels, data)
        self.chart_prop = ChartProp.for_axis_type(chart_title, axis_type)

    def set_data(self, data_labels: Sequence[str], data: Sequence[Sequence[float]]) -> None:
        """Replace the data, recalculating axes and resetting chart properties."""
        self.data_labels, self.data, axis_type, self.axis_prop = _axis_setup(data_labels, data)
        self.chart_prop = ChartProp.for_axis_type(self.chart_prop.chart_title, axis_type)

    def _layout(self) -> tuple[tuple[float, float], float, Scalings]:
        width, height = self.chart_prop.screen_size
        legend_size = float(math.ceil(width * 0.30))
        if self.chart_prop.show_legend:
            screen_size = (width + legend_size, height)
            return screen_size, legend_size, legend_scale(screen_size, legend_size)
        return (width, height), legend_size, normal_scale()

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the marks and joining lines, title, axes and optional legend."""
        label_count = len(self.data_labels)
        if any(len(series) < label_count for series in self.data):
            raise ValueError("every series needs a value for each data label")

        screen_size, legend_size, s = self._layout()
        h_scale, v_scale = text_scales(screen_size)
        y_min, y_max = self.axis_prop.y_axis_bounds
        x_axis_scale = self.axis_prop.x_axis_scale

        set_defaults(canvas, screen_size)

        if screen_size[1] > screen_size[0]:
            radius_scaling = min(s.horizontal_scaling, s.vertical_scaling)
        else:
            radius_scaling = max(s.horizontal_scaling, s.vertical_scaling)
        mark_radius = 0.009 * radius_scaling

        interval = s.horizontal_scaling * x_axis_scale
        for j, series in enumerate(self.data):
            set_nth_colour(canvas, j)
            previous: tuple[float, float] | None = None
            for i, value in enumerate(series[:label_count]):
                x = s.left_bound - interval / 2.0 + interval * (i + 1)
                y = s.lower_bound - percentage_in_bounds(value, y_min, y_max) * s.vertical_scaling

                canvas.save()
                canvas.translate(x, y)
                canvas.scale(h_scale, v_scale)
                canvas.arc(0.0, 0.0, mark_radius, 0.0, 2.0 * math.pi)
                canvas.fill()
                canvas.stroke()
                canvas.restore()

                if previous is not None:
                    prev_x, prev_y = previous
                    x_len = abs(x - prev_x)
                    y_len = abs(y - prev_y)
                    # Weight the width by slope so diagonal lines look even on a non-square screen.
                    canvas.set_line_width(
                        0.005
                        * (
                            math.atan2(x_len, y_len) / (math.pi / 2.0) * v_scale
                            + math.atan2(y_len, x_len) / (math.pi / 2.0) * h_scale
                        )
                    )
                    canvas.move_to(x, y)
                    canvas.line_to(prev_x, prev_y)
                    canvas.stroke()
                previous = (x, y)

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        draw_x_axis_cat(
            canvas,
            s,
            self.data_labels,
            x_axis_scale,
            calc_zero_intercept(y_min, y_max),
            self.axis_prop.x_axis_title,
            screen_size,
            False,
        )
        draw_y_axis_con(
            canvas, s, y_min, y_max, self.axis_prop.y_axis_scale, 0.0, self.axis_prop.y_axis_title, screen_size
        )
        if self.chart_prop.show_legend:
            draw_legend(canvas, self.chart_prop.legend_values, screen_size, legend_size)