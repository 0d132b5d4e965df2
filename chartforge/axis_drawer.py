"""Drawing of categorical and continuous chart axes."""

from __future__ import annotations

import math
from decimal import Decimal

from .drawing import Canvas, Scalings, percentage_in_bounds, text_scales


def calc_zero_intercept(axis_min: float, axis_max: float) -> float:
    """Fraction along the axis where zero lies."""
    return percentage_in_bounds(0.0, axis_min, axis_max)


def calc_x_intercept(zero_intercept: float, vertical_scaling: float, lower_bound: float, upper_bound: float) -> float:
    """Vertical screen position of the x-axis."""
    if zero_intercept < 0.0:
        return lower_bound
    if zero_intercept > 1.0:
        return upper_bound
    return lower_bound - zero_intercept * vertical_scaling


def calc_y_intercept(zero_intercept: float, horizontal_scaling: float, left_bound: float, right_bound: float) -> float:
    """Horizontal screen position of the y-axis."""
    if zero_intercept < 0.0:
        return left_bound
    if zero_intercept > 1.0:
        return right_bound
    return left_bound + zero_intercept * horizontal_scaling


def _shortest_exponent(value: float) -> str:
    if value == 0.0:
        return "0e0"
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    power = len(digits) - 1 + exponent
    text = str(digits[0])
    if len(digits) > 1:
        text += "." + "".join(str(d) for d in digits[1:])
    return f"{'-' if sign else ''}{text}e{power}"


def format_axis_number(value: float, axis_min: float, axis_max: float, zero_as_integer: bool) -> str:
    """Label for an axis number, with precision chosen from the axis magnitude."""
    magnitude = max(abs(axis_max), abs(axis_min))
    if magnitude >= 10000.0 or magnitude <= 0.001:
        if zero_as_integer and value == 0.0:
            return f"{value:.0f}"
        return _shortest_exponent(float(f"{value:.15f}"))
    if magnitude <= 0.1:
        dps = 4
    elif magnitude >= 100.0:
        dps = 0
    else:
        dps = 2
    return f"{value:.{dps}f}"


def _set_scaled_font(canvas: Canvas, h_scale: float, v_scale: float):
    canvas.set_font_size(0.02)
    matrix = canvas.font_matrix
    matrix.scale(h_scale, v_scale)
    canvas.font_matrix = matrix
    return matrix


def _fit_label(canvas: Canvas, label: str, width: float) -> str:
    shown, remaining = label, label
    while canvas.text_extents(shown).width > width and remaining:
        remaining = remaining[:-1]
        shown = remaining + "..."
    return shown


def _draw_x_title(canvas: Canvas, matrix, s: Scalings, delimiter_length: float, title: str) -> None:
    matrix.scale(1.1, 1.1)
    canvas.font_matrix = matrix
    extents = canvas.text_extents(title)
    canvas.move_to(s.right_bound - extents.width, s.lower_bound + delimiter_length * 1.5 + extents.height * 2.0)
    canvas.show_text(title)


def draw_x_axis_cat(canvas, scalings, data_labels, x_axis_scale, zero_intercept, axis_title, screen_size, fill) -> None:
    """Draw a categorical x-axis with one label per category."""
    s = Scalings(*scalings)
    intercept = calc_x_intercept(zero_intercept, s.vertical_scaling, s.lower_bound, s.upper_bound)
    h_scale, v_scale = text_scales(screen_size)
    interval = s.horizontal_scaling * x_axis_scale
    delimiter_length = 0.015 * v_scale

    def position(i: int) -> float:
        if fill:
            return s.left_bound + interval * i
        return s.left_bound - interval / 2.0 + interval * (i + 1)

    canvas.set_source_rgb(0.0, 0.0, 0.0)
    canvas.set_line_width(0.002 * v_scale)
    canvas.move_to(s.left_bound, intercept)
    canvas.rel_line_to(s.horizontal_scaling, 0.0)
    canvas.stroke()
    canvas.set_line_width(0.002 * h_scale)
    for i in range(len(data_labels)):
        canvas.move_to(position(i), intercept - delimiter_length / 2.0)
        canvas.rel_line_to(0.0, delimiter_length)
    canvas.stroke()

    matrix = _set_scaled_font(canvas, h_scale, v_scale)
    for i, label in enumerate(data_labels):
        shown = _fit_label(canvas, label, interval)
        extents = canvas.text_extents(shown)
        side = delimiter_length + extents.height if zero_intercept < 0.55 else -delimiter_length
        canvas.move_to(position(i) - extents.width / 2.0, intercept + side)
        canvas.show_text(shown)

    _draw_x_title(canvas, matrix, s, delimiter_length, axis_title)


def _delimiter_count(scale: float) -> int:
    return int(math.floor(1.0 / scale + 0.5)) + 1


def draw_x_axis_con(canvas, scalings, x_axis_min, x_axis_max, x_axis_scale, zero_intercept, axis_title, screen_size) -> None:
    """Draw a continuous, numbered x-axis."""
    s = Scalings(*scalings)
    intercept = calc_x_intercept(zero_intercept, s.vertical_scaling, s.lower_bound, s.upper_bound)
    other_zero = calc_zero_intercept(x_axis_min, x_axis_max)
    other_intercept = calc_y_intercept(other_zero, s.horizontal_scaling, s.left_bound, s.right_bound)
    h_scale, v_scale = text_scales(screen_size)
    count = _delimiter_count(x_axis_scale)
    interval = s.horizontal_scaling * x_axis_scale
    x_len = 0.015 * v_scale
    y_len = 0.015 * h_scale

    canvas.set_source_rgb(0.0, 0.0, 0.0)
    canvas.set_line_width(0.002 * v_scale)
    canvas.move_to(s.left_bound, intercept)
    canvas.rel_line_to(s.horizontal_scaling, 0.0)
    canvas.stroke()
    canvas.set_line_width(0.002 * h_scale)
    for i in range(count):
        canvas.move_to(s.left_bound + interval * i, intercept - x_len / 2.0)
        canvas.rel_line_to(0.0, x_len)
    canvas.stroke()

    matrix = _set_scaled_font(canvas, h_scale, v_scale)
    for i in range(count):
        number = x_axis_min + (x_axis_max - x_axis_min) * x_axis_scale * i
        label = format_axis_number(number, x_axis_min, x_axis_max, False)
        extents = canvas.text_extents(label)
        x_pos = s.left_bound + interval * i
        if other_intercept - 0.01 < x_pos < other_intercept + 0.01:
            if other_zero < 0.55:
                x_pos += y_len / 2.0 + (x_pos - other_intercept)
            else:
                x_pos += -extents.width - y_len / 2.0 + (other_intercept - x_pos)
        else:
            x_pos -= extents.width / 2.0
        side = x_len + extents.height if zero_intercept < 0.55 else -x_len
        canvas.move_to(x_pos, intercept + side)
        canvas.show_text(label)

    _draw_x_title(canvas, matrix, s, x_len, axis_title)


def draw_y_axis_con(canvas, scalings, y_axis_min, y_axis_max, y_axis_scale, zero_intercept, axis_title, screen_size) -> None:
    """Draw a continuous, numbered y-axis with a rotated title."""
    s = Scalings(*scalings)
    intercept = calc_y_intercept(zero_intercept, s.horizontal_scaling, s.left_bound, s.right_bound)
    other_zero = calc_zero_intercept(y_axis_min, y_axis_max)
    other_intercept = calc_x_intercept(other_zero, s.vertical_scaling, s.lower_bound, s.upper_bound)
    h_scale, v_scale = text_scales(screen_size)
    count = _delimiter_count(y_axis_scale)
    interval = s.vertical_scaling * y_axis_scale
    y_len = 0.015 * h_scale

    canvas.set_source_rgb(0.0, 0.0, 0.0)
    canvas.set_line_width(0.002 * h_scale)
    canvas.move_to(intercept, s.lower_bound)
    canvas.rel_line_to(0.0, -s.vertical_scaling)
    canvas.stroke()
    canvas.set_line_width(0.002 * v_scale)
    for i in range(count):
        canvas.move_to(intercept - y_len / 2.0, s.lower_bound - interval * i)
        canvas.rel_line_to(y_len, 0.0)
    canvas.stroke()

    matrix = _set_scaled_font(canvas, h_scale, v_scale)
    widest = 0.0
    for i in range(count):
        number = y_axis_min + (y_axis_max - y_axis_min) * y_axis_scale * i
        label = format_axis_number(number, y_axis_min, y_axis_max, True)
        extents = canvas.text_extents(label)
        y_pos = s.lower_bound - interval * i
        if other_intercept - 0.01 < y_pos < other_intercept + 0.01:
            if other_zero < 0.55:
                y_pos -= extents.height - (y_pos - other_intercept)
            else:
                y_pos += extents.height - (other_intercept - y_pos)
        side = -y_len - extents.width if zero_intercept < 0.55 else y_len
        canvas.move_to(intercept + side, y_pos + extents.height / 2.0)
        canvas.show_text(label)
        widest = max(widest, extents.width)

    matrix.scale(1.1, 1.1)
    matrix.rotate(-math.pi * 0.5)
    canvas.font_matrix = matrix
    extents = canvas.text_extents(axis_title)
    canvas.move_to(s.left_bound - y_len * 0.5 - widest - extents.width, s.upper_bound + extents.height)
    canvas.show_text(axis_title)