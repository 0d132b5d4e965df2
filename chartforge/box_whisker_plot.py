"""Box and whisker plot: quartiles, whiskers and outliers of each data set."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .axis_drawer import calc_x_intercept, calc_zero_intercept, draw_x_axis_cat, draw_y_axis_con
from .axis_prop import AxisProp, calc_axis_props, percentile
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


@dataclass
class BoxStats:
    """Summary statistics drawn for one box."""

    lq: float
    median: float
    uq: float
    iqr: float
    minimum: float
    maximum: float
    outliers: list[float] = field(default_factory=list)


def box_statistics(values: Sequence[float]) -> BoxStats:
    """Quartiles, outliers beyond 1.5 IQR and the whisker ends of the rest.

    Values lying exactly on an outlier limit count neither as outliers nor
    as whisker data; with no data left the whisker ends are NaN.
    """
    ordered = sorted(values)
    lq = percentile(ordered, 0.25)
    median = percentile(ordered, 0.5)
    uq = percentile(ordered, 0.75)
    iqr = uq - lq
    lower_limit = lq - iqr * 1.5
    upper_limit = uq + iqr * 1.5
    outliers = [v for v in ordered if v < lower_limit or v > upper_limit]
    remaining = [v for v in ordered if lower_limit < v < upper_limit]
    minimum = min(remaining) if remaining else math.nan
    maximum = max(remaining) if remaining else math.nan
    return BoxStats(lq, median, uq, iqr, minimum, maximum, outliers)


class BoxWhiskerPlot(Chart):
    """Statistical view of the variation within each set of data."""

    def __init__(self, chart_title: str, data_labels: Sequence[str], data: Sequence[Sequence[float]]) -> None:
        if not data_labels:
            raise ValueError("a box and whisker plot needs at least one data label")
        self.data_labels = list(data_labels)
        self.data = [list(series) for series in data]
        x_axis_scale = 1.0 / len(self.data_labels)
        y_axis = calc_axis_props(self.data, True, False)
        y_min, y_max = y_axis.bounds
        axis_type = AxisType.DOUBLE_VERTICAL if y_min < 0.0 < y_max else AxisType.SINGLE
        self.chart_prop = ChartProp.for_axis_type(chart_title, axis_type)
        self.axis_prop = AxisProp((0.0, 0.0), y_axis.bounds, x_axis_scale, y_axis.scale)

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw each box with its whiskers and outliers, then title and axes."""
        screen_size = self.chart_prop.screen_size
        h_scale, v_scale = text_scales(screen_size)
        s = normal_scale()
        y_min, y_max = self.axis_prop.y_axis_bounds
        x_axis_scale = self.axis_prop.x_axis_scale
        stats = [box_statistics(series) for series in self.data]

        set_defaults(canvas, screen_size)

        if screen_size[1] > screen_size[0]:
            radius_scaling = min(s.horizontal_scaling, s.vertical_scaling)
        else:
            radius_scaling = max(s.horizontal_scaling, s.vertical_scaling)
        mark_radius = 0.008 * radius_scaling

        zero = calc_zero_intercept(y_min, y_max)
        intercept = calc_x_intercept(zero, s.vertical_scaling, s.lower_bound, s.upper_bound)
        interval = s.horizontal_scaling * x_axis_scale
        bar_width = 0.6 / len(self.data) if self.data else 0.0
        box_width = bar_width * s.horizontal_scaling
        cap = box_width * 0.2

        def y_of(value: float) -> float:
            return s.lower_bound - percentage_in_bounds(value, y_min, y_max) * s.vertical_scaling

        for i, box in enumerate(stats):
            x = s.left_bound - interval / 2.0 + interval * (i + 1)
            set_nth_colour(canvas, i)

            canvas.set_line_width(0.0025)
            for value in box.outliers:
                canvas.save()
                canvas.translate(x, y_of(value))
                canvas.scale(h_scale, v_scale)
                canvas.arc(0.0, 0.0, mark_radius, 0.0, 2.0 * math.pi)
                canvas.stroke()
                canvas.restore()

            canvas.set_line_width(0.002)
            canvas.rectangle(x - box_width / 2.0, y_of(box.lq), box_width, y_of(box.iqr) - intercept)
            canvas.fill_preserve()
            canvas.stroke_preserve()

            canvas.set_source_rgb(0.0, 0.0, 0.0)
            canvas.move_to(x - box_width / 2.0, y_of(box.median))
            canvas.line_to(x + box_width / 2.0, y_of(box.median))
            for quartile, end in ((box.lq, box.minimum), (box.uq, box.maximum)):
                canvas.move_to(x, y_of(quartile))
                canvas.line_to(x, y_of(end))
                canvas.move_to(x - cap, y_of(end))
                canvas.line_to(x + cap, y_of(end))
            canvas.stroke()

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        draw_x_axis_cat(
            canvas, s, self.data_labels, x_axis_scale, zero, self.axis_prop.x_axis_title, screen_size, False
        )
        draw_y_axis_con(
            canvas, s, y_min, y_max, self.axis_prop.y_axis_scale, 0.0, self.axis_prop.y_axis_title, screen_size
        )