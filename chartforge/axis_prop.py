"""Axis bounds, delimiter scales and the calculations that choose them."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import NamedTuple, Sequence

DATA_FILL = 0.8
MIN_DELIM_SCALE = 0.08
MAX_DELIM_SCALE = 0.2


class AxisRange(NamedTuple):
    """Bounds of an axis and the fraction of its length between delimiters."""

    bounds: tuple[float, float]
    scale: float


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _trim(value: float, digits: int) -> float:
    return float(f"{value:.{digits}f}")


def _finite_values(data: Sequence[Sequence[float]]) -> list[float]:
    return [value for series in data for value in series if not math.isnan(value)]


@dataclass
class AxisProp:
    """Bounds, scales and titles of both chart axes."""

    x_axis_bounds: tuple[float, float]
    y_axis_bounds: tuple[float, float]
    x_axis_scale: float
    y_axis_scale: float
    x_axis_title: str = "x-axis"
    y_axis_title: str = "y-axis"

    def set_x_axis_bounds(self, min_value: float, max_value: float) -> None:
        """Set the x-axis bounds and recalculate its scale."""
        self.x_axis_bounds = (min_value, max_value)
        self.x_axis_scale = calc_scale(min_value, max_value)

    def set_y_axis_bounds(self, min_value: float, max_value: float) -> None:
        """Set the y-axis bounds and recalculate its scale."""
        self.y_axis_bounds = (min_value, max_value)
        self.y_axis_scale = calc_scale(min_value, max_value)

    def set_x_axis_interval(self, new_interval: float) -> None:
        """Set the distance between numbered delimiters on the x-axis."""
        self.x_axis_scale = _interval_scale(new_interval, self.x_axis_bounds)

    def set_y_axis_interval(self, new_interval: float) -> None:
        """Set the distance between numbered delimiters on the y-axis."""
        self.y_axis_scale = _interval_scale(new_interval, self.y_axis_bounds)


def _interval_scale(interval: float, bounds: tuple[float, float]) -> float:
    width = bounds[1] - bounds[0]
    if width == 0:
        raise ValueError("axis bounds have zero width; set the bounds first")
    return interval / width


def percentile(data: Sequence[float], fraction: float) -> float:
    """Interpolated percentile of already sorted data."""
    if not data:
        raise ValueError("percentile of empty data")
    length = len(data)
    n = (length - 1) * fraction + 1.0
    if n == 1.0:
        return data[0]
    if n == float(length):
        return data[-1]
    k = math.floor(n)
    d = n - k
    return data[k - 1] + d * (data[k] - data[k - 1])


def check_outliers(data: Sequence[Sequence[float]], x_axis: bool) -> bool:
    """Warn and return True if any series holds values beyond 1.5 IQR."""
    outliers = False
    for series in data:
        ordered = sorted(series)
        lq = percentile(ordered, 0.25)
        uq = percentile(ordered, 0.75)
        iqr = uq - lq
        lower_limit = lq - iqr * 1.5
        upper_limit = uq + iqr * 1.5
        if any(value < lower_limit or value > upper_limit for value in ordered):
            outliers = True
    if outliers:
        axis = "x" if x_axis else "y"
        warnings.warn(
            "There are possible outliers in the data that could cause "
            f"distorted {axis} axis scaling.",
            UserWarning,
            stacklevel=2,
        )
    return outliers


def calc_scale(min_value: float, max_value: float) -> float:
    """Delimiter scale for user-chosen axis bounds."""
    axis_range = abs(max_value - min_value)
    if axis_range == 0 or math.isnan(axis_range):
        raise ValueError("axis bounds must differ")
    mag = 10.0 ** _round_half_away(math.log10(axis_range))
    interval = mag / 10.0
    scale = interval / axis_range
    while math.fmod(axis_range, interval) != 0.0:
        interval /= 10.0
        scale = interval / axis_range
    return scale


def calc_axis_props(
    data: Sequence[Sequence[float]], start_zero: bool, x_axis: bool
) -> AxisRange:
    """Check for outliers, then choose bounds and scale with default limits."""
    check_outliers(data, x_axis)
    return calc_data_range(data, start_zero, DATA_FILL, MIN_DELIM_SCALE, MAX_DELIM_SCALE)


def _decimal_mod(axis_range: float, interval: float) -> bool:
    """True if interval does not evenly divide axis_range, within float noise."""
    range_check = axis_range
    interval_check = interval
    if interval < 1.0:
        interval_mag = 10.0 ** math.ceil(math.log10(interval))
        inverse = 1.0 / interval_mag * 1000.0
        range_check = axis_range * inverse
        interval_check = interval * inverse
    range_check = _trim(range_check, 12)
    interval_check = _trim(interval_check, 12)
    return math.fmod(range_check, interval_check) != 0.0


def calc_data_range(
    data: Sequence[Sequence[float]],
    start_zero: bool,
    data_fill: float,
    min_delim_scale: float,
    max_delim_scale: float,
) -> AxisRange:
    """Choose axis bounds covering the data and a delimiter scale for them."""
    values = _finite_values(data)
    if not values:
        raise ValueError("no data to fit an axis to")
    data_min = min(values)
    data_max = max(values)

    if data_min == data_max:
        if data_min == 0.0:
            axis_min, axis_max = 0.0, 1.0
        elif data_min > 0.0:
            axis_min, axis_max = 0.0, data_max * 2.0
        else:
            axis_min, axis_max = data_min * 2.0, 0.0
    else:
        data_range = abs(data_max - data_min)
        exp = _round_half_away(math.log10(data_range))
        while True:
            mag = 10.0 ** exp
            axis_min = math.floor(data_min / mag) * mag
            axis_max = math.ceil(data_max / mag) * mag
            if data_range / (axis_max - axis_min) > data_fill:
                break
            exp -= 1.0
        if axis_min > 0.0 and start_zero:
            axis_min = 0.0
        if axis_max < 0.0 and start_zero:
            axis_max = 0.0

    axis_min = _trim(axis_min, 15)
    axis_max = _trim(axis_max, 15)
    axis_range = _trim(abs(axis_max - axis_min), 15)
    mag = 10.0 ** _round_half_away(math.log10(axis_range))
    interval = mag / 10.0
    scale = interval / axis_range

    while _decimal_mod(axis_range, interval):
        interval /= 10.0
        scale = interval / axis_range

    while scale < min_delim_scale:
        scale *= 2.0
        interval = scale * axis_range
        if _decimal_mod(axis_range, interval):
            half_interval = interval / 2.0
            if axis_min == 0.0 or (axis_min > 0.0 and axis_min - half_interval < 0.0):
                axis_max += half_interval
            elif (axis_max - data_max) > (axis_min - data_min):
                axis_max += half_interval
            else:
                axis_min -= half_interval
            axis_range = _trim(abs(axis_max - axis_min), 15)
            scale = interval / axis_range

    while scale > max_delim_scale:
        scale /= 2.0

    return AxisRange((axis_min, axis_max), scale)