"""Histogram: frequencies of values grouped into equal ranges."""

from __future__ import annotations

import math
from typing import Sequence

from .axis_drawer import calc_zero_intercept, draw_x_axis_con, draw_y_axis_con
from .axis_prop import AxisProp, calc_axis_props
from .chart_prop import AxisType, ChartProp
from .drawing import (
    Canvas,
    Chart,
    draw_title,
    normal_scale,
    percentage_in_bounds,
    set_defaults,
    set_nth_colour,
    text_scales,
)


def histogram_frequencies(
    data: Sequence[float], x_axis_min: float, x_axis_max: float, x_axis_scale: float
) -> list[float]:
    """Count values in each range; a range holds its minimum but not its maximum.

    A value equal to the axis maximum is counted in the last range.
    """
    num_ranges = math.trunc(1.0 / x_axis_scale)
    if num_ranges < 1:
        raise ValueError("axis scale leaves no ranges to count into")
    frequencies = [0.0] * num_ranges
    group_range = (x_axis_max - x_axis_min) * x_axis_scale
    for value in data:
        if value == x_axis_max:
            frequencies[-1] += 1.0
            continue
        for index in range(num_ranges):
            range_min = x_axis_min + group_range * index
            if range_min <= value < range_min + group_range:
                frequencies[index] += 1.0
                break
        else:
            raise ValueError(f"value {value} lies outside the x-axis bounds")
    return frequencies


class Histogram(Chart):
    """Distribution of a set of values in equal groups."""

    def __init__(self, chart_title: str, data: Sequence[float]) -> None:
        self.data = list(data)
        x_axis = calc_axis_props([self.data], False, True)
        x_min, x_max = x_axis.bounds
        axis_type = AxisType.DOUBLE_HORIZONTAL if x_min < 0.0 < x_max else AxisType.SINGLE
        self.chart_prop = ChartProp.for_axis_type(chart_title, axis_type)
        self.axis_prop = AxisProp(x_axis.bounds, (0.0, 0.0), x_axis.scale, 0.0)

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the frequency bars, title and both axes."""
        width, height = self.chart_prop.screen_size
        if self.chart_prop.show_legend:
            width += math.ceil(width * 0.30)
        screen_size = (width, height)
        h_scale, v_scale = text_scales(screen_size)
        s = normal_scale()
        x_min, x_max = self.axis_prop.x_axis_bounds
        x_axis_scale = self.axis_prop.x_axis_scale

        frequencies = histogram_frequencies(self.data, x_min, x_max, x_axis_scale)
        y_axis = calc_axis_props([frequencies], True, False)
        y_min, y_max = y_axis.bounds

        set_defaults(canvas, screen_size)

        bar_width = s.horizontal_scaling * x_axis_scale
        canvas.set_line_width(0.002)
        for i, frequency in enumerate(frequencies):
            set_nth_colour(canvas, 0)
            canvas.rectangle(
                s.left_bound + bar_width * i,
                s.lower_bound,
                bar_width,
                -percentage_in_bounds(frequency, y_min, y_max) * s.vertical_scaling,
            )
            canvas.fill_preserve()
            canvas.stroke_preserve()
            canvas.set_source_rgb(0.0, 0.0, 0.0)
            canvas.stroke()

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        draw_x_axis_con(
            canvas, s, x_min, x_max, x_axis_scale, 0.0, self.axis_prop.x_axis_title, screen_size
        )
        draw_y_axis_con(
            canvas,
            s,
            y_min,
            y_max,
            y_axis.scale,
            calc_zero_intercept(x_min, x_max),
            self.axis_prop.y_axis_title,
            screen_size,
        )