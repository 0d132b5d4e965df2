"""Bubble chart: points on two continuous axes sized by a third value."""

from __future__ import annotations

import math
from typing import Sequence

from .axis_drawer import calc_zero_intercept, draw_x_axis_con, draw_y_axis_con
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


def _axis_type(x_bounds: tuple[float, float], y_bounds: tuple[float, float]) -> AxisType:
    crosses_x = x_bounds[0] < 0.0 < x_bounds[1]
    crosses_y = y_bounds[0] < 0.0 < y_bounds[1]
    if crosses_x and crosses_y:
        return AxisType.FULL
    if crosses_x:
        return AxisType.DOUBLE_HORIZONTAL
    if crosses_y:
        return AxisType.DOUBLE_VERTICAL
    return AxisType.SINGLE


class BubbleChart(Chart):
    """Relationship between three sets of values: position and bubble size."""

    def __init__(
        self,
        chart_title: str,
        data_x: Sequence[Sequence[float]],
        data_y: Sequence[Sequence[float]],
        data_magnitude: Sequence[Sequence[float]],
    ) -> None:
        self.data_x = [list(series) for series in data_x]
        self.data_y = [list(series) for series in data_y]
        self.data_magnitude = [list(series) for series in data_magnitude]
        if not (len(self.data_x) == len(self.data_y) == len(self.data_magnitude)):
            raise ValueError("x, y and magnitude data need the same number of series")
        for xs, ys, mags in zip(self.data_x, self.data_y, self.data_magnitude):
            if not (len(xs) == len(ys) == len(mags)):
                raise ValueError("x, y and magnitude series need the same length")
        x_axis = calc_axis_props(self.data_x, False, True)
        y_axis = calc_axis_props(self.data_y, False, False)
        axis_type = _axis_type(x_axis.bounds, y_axis.bounds)
        self.chart_prop = ChartProp.for_axis_type(chart_title, axis_type)
        self.axis_prop = AxisProp(x_axis.bounds, y_axis.bounds, x_axis.scale, y_axis.scale)

    def _layout(self) -> tuple[tuple[float, float], float, Scalings]:
        width, height = self.chart_prop.screen_size
        legend_size = float(math.ceil(width * 0.30))
        if self.chart_prop.show_legend:
            screen_size = (width + legend_size, height)
            return screen_size, legend_size, legend_scale(screen_size, legend_size)
        return (width, height), legend_size, normal_scale()

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the bubbles, title, both axes and optional legend."""
        screen_size, legend_size, s = self._layout()
        h_scale, v_scale = text_scales(screen_size)
        x_min, x_max = self.axis_prop.x_axis_bounds
        y_min, y_max = self.axis_prop.y_axis_bounds

        set_defaults(canvas, screen_size)

        magnitudes = [m for series in self.data_magnitude for m in series if not math.isnan(m)]
        min_mag = min(magnitudes, default=0.0)
        max_mag = max(magnitudes, default=0.0)
        mag_range = max_mag - min_mag

        if screen_size[1] > screen_size[0]:
            radius_scaling = min(s.horizontal_scaling, s.vertical_scaling)
        else:
            radius_scaling = max(s.horizontal_scaling, s.vertical_scaling)

        for j, (xs, ys, mags) in enumerate(zip(self.data_x, self.data_y, self.data_magnitude)):
            set_nth_colour_opacity(canvas, j, 0.7)
            for x_val, y_val, mag_val in zip(xs, ys, mags):
                x = s.left_bound + percentage_in_bounds(x_val, x_min, x_max) * s.horizontal_scaling
                y = s.lower_bound - percentage_in_bounds(y_val, y_min, y_max) * s.vertical_scaling
                relative = (mag_val - min_mag) / mag_range if mag_range else 0.0
                radius = (relative * 0.1 + 0.01) * radius_scaling * 1.1

                canvas.save()
                canvas.translate(x, y)
                canvas.scale(h_scale, v_scale)
                canvas.arc(0.0, 0.0, radius, 0.0, 2.0 * math.pi)
                canvas.fill()
                canvas.stroke()
                canvas.restore()

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        draw_x_axis_con(
            canvas,
            s,
            x_min,
            x_max,
            self.axis_prop.x_axis_scale,
            calc_zero_intercept(y_min, y_max),
            self.axis_prop.x_axis_title,
            screen_size,
        )
        draw_y_axis_con(
            canvas,
            s,
            y_min,
            y_max,
            self.axis_prop.y_axis_scale,
            calc_zero_intercept(x_min, x_max),
            self.axis_prop.y_axis_title,
            screen_size,
        )
        if self.chart_prop.show_legend:
            draw_legend(canvas, self.chart_prop.legend_values, screen_size, legend_size)