"""Area chart: filled series over categorical x-axis labels."""

from __future__ import annotations

import math
from typing import Sequence

from .axis_drawer import calc_x_intercept, calc_zero_intercept, draw_x_axis_cat, draw_y_axis_con
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
    set_nth_colour_opacity,
    text_scales,
)


class AreaChart(Chart):
    """Trends over time or categories, highlighting the magnitude of change."""

    def __init__(self, chart_title: str, data_labels: Sequence[str], data: Sequence[Sequence[float]]) -> None:
        if len(data_labels) < 2:
            raise ValueError("an area chart needs at least two data labels")
        self.data_labels = list(data_labels)
        self.data = [list(series) for series in data]
        x_axis_scale = 1.0 / (len(self.data_labels) - 1)
        y_axis = calc_axis_props(self.data, True, False)
        y_min, y_max = y_axis.bounds
        axis_type = AxisType.DOUBLE_VERTICAL if y_min < 0.0 < y_max else AxisType.SINGLE
        self.chart_prop = ChartProp.for_axis_type(chart_title, axis_type)
        self.axis_prop = AxisProp((0.0, 0.0), y_axis.bounds, x_axis_scale, y_axis.scale)

    def _layout(self) -> tuple[tuple[float, float], float, Scalings]:
        width, height = self.chart_prop.screen_size
        legend_size = float(math.ceil(width * 0.30))
        if self.chart_prop.show_legend:
            screen_size = (width + legend_size, height)
            return screen_size, legend_size, legend_scale(screen_size, legend_size)
        return (width, height), legend_size, normal_scale()

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the filled areas, title, axes and optional legend."""
        label_count = len(self.data_labels)
        if any(len(series) < label_count for series in self.data):
            raise ValueError("every series needs a value for each data label")

        screen_size, legend_size, s = self._layout()
        h_scale, v_scale = text_scales(screen_size)
        y_min, y_max = self.axis_prop.y_axis_bounds
        x_axis_scale = self.axis_prop.x_axis_scale

        set_defaults(canvas, screen_size)

        zero = calc_zero_intercept(y_min, y_max)
        intercept = calc_x_intercept(zero, s.vertical_scaling, s.lower_bound, s.upper_bound)
        interval = s.horizontal_scaling * x_axis_scale
        canvas.set_line_width(0.005)
        for j, series in enumerate(self.data):
            set_nth_colour_opacity(canvas, j, 0.7)
            canvas.move_to(s.left_bound, intercept)
            for i, value in enumerate(series[:label_count]):
                x = s.left_bound + interval * i
                y = s.lower_bound - percentage_in_bounds(value, y_min, y_max) * s.vertical_scaling
                canvas.line_to(x, y)
            canvas.line_to(s.left_bound + interval * (label_count - 1), intercept)
            canvas.close_path()
            canvas.fill()
            canvas.stroke()

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        draw_x_axis_cat(
            canvas, s, self.data_labels, x_axis_scale, zero, self.axis_prop.x_axis_title, screen_size, True
        )
        draw_y_axis_con(
            canvas, s, y_min, y_max, self.axis_prop.y_axis_scale, 0.0, self.axis_prop.y_axis_title, screen_size
        )
        if self.chart_prop.show_legend:
            draw_legend(canvas, self.chart_prop.legend_values, screen_size, legend_size)