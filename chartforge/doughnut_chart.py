"""Doughnut chart: concentric rings of proportions."""

from __future__ import annotations

import math
from typing import Sequence

from .chart_prop import AxisType, ChartProp
from .drawing import (
    Canvas,
    Chart,
    Scalings,
    draw_legend,
    draw_title,
    legend_scale,
    normal_scale,
    set_defaults,
    set_nth_colour,
    text_scales,
)


def proportions(data: Sequence[Sequence[float]]) -> list[list[float]]:
    """Each value as a fraction of the total of its own ring."""
    result = []
    for ring in data:
        total = sum(ring)
        if ring and total == 0:
            raise ValueError("a ring's values must not sum to zero")
        result.append([value / total for value in ring])
    return result


class DoughnutChart(Chart):
    """Proportions of a whole for several sets of data, one ring per set."""

    def __init__(self, chart_title: str, data: Sequence[Sequence[float]]) -> None:
        self.data = [list(ring) for ring in data]
        if not self.data:
            raise ValueError("a doughnut chart needs at least one ring")
        self.chart_prop = ChartProp.for_axis_type(chart_title, AxisType.NO_AXIS)

    def _layout(self) -> tuple[tuple[float, float], float, Scalings]:
        width, height = self.chart_prop.screen_size
        legend_size = float(math.ceil(width * 0.30))
        if self.chart_prop.show_legend:
            screen_size = (width + legend_size, height)
            return screen_size, legend_size, legend_scale(screen_size, legend_size)
        return (width, height), legend_size, normal_scale()

    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the rings from the outside in, the white centre, title and legend."""
        rings = proportions(self.data)
        screen_size, legend_size, s = self._layout()
        h_scale, v_scale = text_scales(screen_size)

        set_defaults(canvas, screen_size)

        canvas.set_line_width(0.003)
        x = s.left_bound + 0.5 * s.horizontal_scaling
        y = s.lower_bound - 0.5 * s.vertical_scaling

        if screen_size[1] > screen_size[0]:
            radius_scaling = min(s.horizontal_scaling, s.vertical_scaling)
        else:
            radius_scaling = max(s.horizontal_scaling, s.vertical_scaling)
        max_radius = 0.45 * radius_scaling
        min_radius = 0.20 * radius_scaling
        sector_width = 0.25 / len(rings) * radius_scaling

        current = -math.pi / 2.0
        canvas.save()
        canvas.translate(x, y)
        canvas.scale(h_scale, v_scale)
        for i, ring in enumerate(rings):
            outer_radius = max_radius - i * sector_width
            for j, proportion in enumerate(ring):
                previous = current
                current += proportion * 2.0 * math.pi
                canvas.arc(0.0, 0.0, outer_radius, previous, current)
                canvas.line_to(0.0, 0.0)
                canvas.close_path()
                set_nth_colour(canvas, j)
                canvas.fill_preserve()
                canvas.stroke_preserve()
                canvas.set_source_rgb(1.0, 1.0, 1.0)
                canvas.stroke()
        canvas.close_path()
        canvas.arc(0.0, 0.0, min_radius, 0.0, 2.0 * math.pi)
        canvas.set_source_rgb(1.0, 1.0, 1.0)
        canvas.fill()
        canvas.stroke()
        canvas.restore()

        draw_title(canvas, s.left_bound, s.upper_bound, h_scale, v_scale, self.chart_prop.chart_title)
        if self.chart_prop.show_legend:
            draw_legend(canvas, self.chart_prop.legend_values, screen_size, legend_size)