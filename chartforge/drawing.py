"""A small vector canvas that renders to SVG, plus drawing helpers shared by charts."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import NamedTuple
from xml.sax.saxutils import escape

from .chart_prop import ChartProp

COLOURS: tuple[tuple[float, float, float], ...] = (
    (0.9019607843, 0.0980392157, 0.2941176471),  # red
    (0.2352941176, 0.7058823529, 0.2941176471),  # green
    (1.0, 0.8823529412, 0.0980392157),  # yellow
    (0.0, 0.5098039216, 0.7843137255),  # blue
    (0.9607843137, 0.5098039216, 0.1882352941),  # orange
    (0.568627451, 0.1176470588, 0.7058823529),  # purple
    (0.2745098039, 0.9411764706, 0.9411764706),  # cyan
    (0.9411764706, 0.1960784314, 0.9019607843),  # magenta
    (0.8235294118, 1.0, 0.2352941176),  # lime
    (0.9803921569, 0.7450980392, 0.7450980392),  # pink
    (0.0, 0.5019607843, 0.5019607843),  # teal
    (0.9019607843, 0.7450980392, 1.0),  # lavender
    (0.6666666667, 0.431372549, 0.1568627451),  # brown
    (1.0, 0.9803921569, 0.7843137255),  # beige
    (0.5019607843, 0.0, 0.0),  # maroon
    (0.6666666667, 1.0, 0.7647058824),  # mint
    (0.5019607843, 0.5019607843, 0.0),  # olive
    (1.0, 0.8431372549, 0.7058823529),  # coral
    (0.0, 0.0, 0.5019607843),  # navy
    (0.5019607843, 0.5019607843, 0.5019607843),  # grey
)

_CHAR_WIDTH = 0.55
_CAP_HEIGHT = 0.72
_ARC_SEGMENTS = 96


class TextExtents(NamedTuple):
    """Approximate size of a piece of text in user space."""

    width: float
    height: float


@dataclass
class FontMatrix:
    """Affine 2x2 matrix mapping font space to user space."""

    xx: float = 1.0
    yx: float = 0.0
    xy: float = 0.0
    yy: float = 1.0

    def scale(self, sx: float, sy: float) -> None:
        """Apply a scaling before the current transformation."""
        self.xx *= sx
        self.yx *= sx
        self.xy *= sy
        self.yy *= sy

    def rotate(self, angle: float) -> None:
        """Apply a rotation (radians) before the current transformation."""
        c, s = math.cos(angle), math.sin(angle)
        xx, yx, xy, yy = self.xx, self.yx, self.xy, self.yy
        self.xx = xx * c + xy * s
        self.xy = -xx * s + xy * c
        self.yx = yx * c + yy * s
        self.yy = -yx * s + yy * c


class Scalings(NamedTuple):
    """Plot area of a chart as fractions of the screen."""

    horizontal_scaling: float
    vertical_scaling: float
    left_bound: float
    right_bound: float
    lower_bound: float
    upper_bound: float


@dataclass
class _State:
    matrix: tuple[float, float, float, float, float, float]
    source: tuple[float, float, float, float]
    line_width: float
    font_matrix: FontMatrix


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _fmt(value: float) -> str:
    return f"{value:.4f}".rstrip("0").rstrip(".") or "0"


class Canvas:
    """Records drawing operations in the style of a path-based 2D API."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._state = _State((1.0, 0.0, 0.0, 1.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0), 2.0, FontMatrix(10.0, 0.0, 0.0, 10.0))
        self._stack: list[_State] = []
        self._path: list[str] = []
        self._point: tuple[float, float] | None = None
        self._subpath_start: tuple[float, float] | None = None
        self.elements: list[str] = []

    @property
    def font_matrix(self) -> FontMatrix:
        """A copy of the current font matrix."""
        return replace(self._state.font_matrix)

    @font_matrix.setter
    def font_matrix(self, matrix: FontMatrix) -> None:
        self._state.font_matrix = replace(matrix)

    def _device(self, x: float, y: float) -> tuple[float, float]:
        xx, yx, xy, yy, x0, y0 = self._state.matrix
        return xx * x + xy * y + x0, yx * x + yy * y + y0

    def _device_delta(self, dx: float, dy: float) -> tuple[float, float]:
        xx, yx, xy, yy, _, _ = self._state.matrix
        return xx * dx + xy * dy, yx * dx + yy * dy

    def save(self) -> None:
        """Push the graphics state."""
        self._stack.append(replace(self._state, font_matrix=replace(self._state.font_matrix)))

    def restore(self) -> None:
        """Pop the graphics state saved last."""
        if not self._stack:
            raise RuntimeError("restore without matching save")
        self._state = self._stack.pop()

    def scale(self, sx: float, sy: float) -> None:
        xx, yx, xy, yy, x0, y0 = self._state.matrix
        self._state.matrix = (xx * sx, yx * sx, xy * sy, yy * sy, x0, y0)

    def translate(self, tx: float, ty: float) -> None:
        xx, yx, xy, yy, x0, y0 = self._state.matrix
        self._state.matrix = (xx, yx, xy, yy, x0 + xx * tx + xy * ty, y0 + yx * tx + yy * ty)

    def set_source_rgb(self, red: float, green: float, blue: float) -> None:
        self.set_source_rgba(red, green, blue, 1.0)

    def set_source_rgba(self, red: float, green: float, blue: float, alpha: float) -> None:
        self._state.source = (_clamp(red), _clamp(green), _clamp(blue), _clamp(alpha))

    def set_line_width(self, width: float) -> None:
        self._state.line_width = width

    def move_to(self, x: float, y: float) -> None:
        point = self._device(x, y)
        self._path.append(f"M{_fmt(point[0])} {_fmt(point[1])}")
        self._point = self._subpath_start = point

    def _line_to_device(self, point: tuple[float, float]) -> None:
        if self._point is None:
            self._path.append(f"M{_fmt(point[0])} {_fmt(point[1])}")
            self._subpath_start = point
        else:
            self._path.append(f"L{_fmt(point[0])} {_fmt(point[1])}")
        self._point = point

    def line_to(self, x: float, y: float) -> None:
        self._line_to_device(self._device(x, y))

    def rel_line_to(self, dx: float, dy: float) -> None:
        if self._point is None:
            raise RuntimeError("relative line with no current point")
        ddx, ddy = self._device_delta(dx, dy)
        self._line_to_device((self._point[0] + ddx, self._point[1] + ddy))

    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        """Add a clockwise arc (in device orientation) to the path."""
        while angle2 < angle1:
            angle2 += 2 * math.pi
        steps = max(1, math.ceil(_ARC_SEGMENTS * (angle2 - angle1) / (2 * math.pi)))
        for step in range(steps + 1):
            angle = angle1 + (angle2 - angle1) * step / steps
            self._line_to_device(self._device(xc + radius * math.cos(angle), yc + radius * math.sin(angle)))

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self.move_to(x, y)
        self.rel_line_to(width, 0.0)
        self.rel_line_to(0.0, height)
        self.rel_line_to(-width, 0.0)
        self.close_path()

    def close_path(self) -> None:
        if self._point is None:
            return
        self._path.append("Z")
        self._point = self._subpath_start

    def _colour_attrs(self, kind: str) -> str:
        r, g, b, a = self._state.source
        colour = f"rgb({round(r * 255)},{round(g * 255)},{round(b * 255)})"
        opacity = f' {kind}-opacity="{_fmt(a)}"' if a < 1.0 else ""
        return f'{kind}="{colour}"{opacity}'

    def _emit_path(self, kind: str) -> None:
        if not self._path:
            return
        data = " ".join(self._path)
        if kind == "stroke":
            xx, yx, xy, yy, _, _ = self._state.matrix
            width = self._state.line_width * math.sqrt(abs(xx * yy - xy * yx))
            attrs = f'fill="none" {self._colour_attrs("stroke")} stroke-width="{_fmt(width)}"'
        else:
            attrs = f'{self._colour_attrs("fill")} stroke="none"'
        self.elements.append(f'<path d="{data}" {attrs}/>')

    def _clear_path(self) -> None:
        self._path = []
        self._point = self._subpath_start = None

    def stroke(self) -> None:
        self._emit_path("stroke")
        self._clear_path()

    def stroke_preserve(self) -> None:
        self._emit_path("stroke")

    def fill(self) -> None:
        self._emit_path("fill")
        self._clear_path()

    def fill_preserve(self) -> None:
        self._emit_path("fill")

    def set_font_size(self, size: float) -> None:
        self._state.font_matrix = FontMatrix(size, 0.0, 0.0, size)

    def text_extents(self, text: str) -> TextExtents:
        """Estimated width and height of text with the current font matrix."""
        fm = self._state.font_matrix
        if not text:
            return TextExtents(0.0, 0.0)
        width = _CHAR_WIDTH * len(text) * math.hypot(fm.xx, fm.yx)
        height = _CAP_HEIGHT * math.hypot(fm.xy, fm.yy) if text.strip() else 0.0
        return TextExtents(width, height)

    def show_text(self, text: str) -> None:
        """Draw text with its baseline starting at the current point."""
        if self._point is None:
            self._point = self._device(0.0, 0.0)
        fm = self._state.font_matrix
        xx, yx, xy, yy, _, _ = self._state.matrix
        a = xx * fm.xx + xy * fm.yx
        b = yx * fm.xx + yy * fm.yx
        c = xx * fm.xy + xy * fm.yy
        d = yx * fm.xy + yy * fm.yy
        ex, ey = self._point
        transform = " ".join(_fmt(v) if i >= 4 else f"{v:.6g}" for i, v in enumerate((a, b, c, d, ex, ey)))
        self.elements.append(
            f'<text transform="matrix({transform})" font-size="1" font-family="sans-serif" '
            f'{self._colour_attrs("fill")}>{escape(text)}</text>'
        )
        advance = _CHAR_WIDTH * len(text)
        self._point = (ex + a * advance, ey + b * advance)
        self._path = []

    def to_svg(self) -> str:
        """The drawing as an SVG document."""
        w, h = _fmt(self.width), _fmt(self.height)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            f'<rect width="{w}" height="{h}" fill="white"/>',
            *self.elements,
            "</svg>",
        ]
        return "\n".join(parts) + "\n"

    def write(self, path: str | Path) -> None:
        """Write the drawing to an SVG file."""
        Path(path).write_text(self.to_svg(), encoding="utf-8")


class Chart(ABC):
    """A chart that can draw itself on a canvas."""

    chart_prop: ChartProp

    @abstractmethod
    def draw_chart(self, canvas: Canvas) -> None:
        """Draw the chart on the canvas."""

    def _canvas_size(self) -> tuple[float, float]:
        width, height = self.chart_prop.screen_size
        if self.chart_prop.show_legend:
            width += math.ceil(width * 0.30)
        return width, height

    def render(self) -> str:
        """Draw the chart and return it as an SVG document."""
        canvas = Canvas(*self._canvas_size())
        self.draw_chart(canvas)
        return canvas.to_svg()

    def save_svg(self, path: str | Path) -> None:
        """Draw the chart into an SVG file."""
        Path(path).write_text(self.render(), encoding="utf-8")


def percentage_in_bounds(value: float, minimum: float, maximum: float) -> float:
    """Position of value between minimum and maximum as a fraction."""
    return (value - minimum) / (maximum - minimum)


def text_scales(screen_size: tuple[float, float]) -> tuple[float, float]:
    """Horizontal and vertical factors that keep text undistorted and shrinking only."""
    h_scale = screen_size[1] / screen_size[0]
    v_scale = screen_size[0] / screen_size[1]
    if h_scale < v_scale:
        return h_scale, 1.0
    return 1.0, v_scale


def normal_scale() -> Scalings:
    return Scalings(0.76, 0.76, 0.12, 0.88, 0.88, 0.12)


def legend_scale(screen_size: tuple[float, float], legend_size: float) -> Scalings:
    h_scale = (screen_size[0] - legend_size) / screen_size[0]
    return Scalings(0.76 * h_scale, 0.76, 0.12 * h_scale, 0.88 * h_scale, 0.88, 0.12)


def set_defaults(canvas: Canvas, screen_size: tuple[float, float]) -> None:
    canvas.scale(screen_size[0], screen_size[1])
    canvas.set_source_rgb(0.0, 0.0, 0.0)


def set_nth_colour(canvas: Canvas, n: int) -> None:
    canvas.set_source_rgb(*COLOURS[n])


def set_nth_colour_opacity(canvas: Canvas, n: int, opacity: float) -> None:
    canvas.set_source_rgba(*COLOURS[n], opacity)


def draw_title(canvas: Canvas, left_bound: float, upper_bound: float, h_scale: float, v_scale: float, chart_title: str) -> None:
    canvas.set_source_rgb(0.0, 0.0, 0.0)
    canvas.set_font_size(0.025)
    matrix = canvas.font_matrix
    matrix.scale(h_scale, v_scale)
    canvas.font_matrix = matrix
    text_height = canvas.text_extents(chart_title).height
    canvas.move_to(left_bound, upper_bound * 0.5 + text_height * 0.5)
    canvas.show_text(chart_title)


def draw_legend(canvas: Canvas, legend_values: list[str], screen_size: tuple[float, float], legend_size: float) -> None:
    h_scale, v_scale = text_scales(screen_size)
    scale_boundary = (screen_size[0] - legend_size) / screen_size[0]
    scale_width = legend_size / screen_size[0]

    canvas.set_font_size(0.022)
    matrix = canvas.font_matrix
    matrix.scale(h_scale, v_scale)
    canvas.font_matrix = matrix

    max_height = canvas.text_extents("ABCDEFGHIJKLMNOPQRSTUVWXYZ").height
    top = 0.5 - (len(legend_values) * max_height * 1.5) / 2.0
    for i, value in enumerate(legend_values):
        set_nth_colour(canvas, i)
        text_height = canvas.text_extents(value).height
        row = top + i * max_height * 1.5
        canvas.rectangle(
            scale_boundary + scale_width * 0.1,
            row - max_height * 0.4,
            max_height * 0.8 * h_scale,
            max_height * 0.8,
        )
        canvas.fill()
        canvas.set_source_rgb(0.0, 0.0, 0.0)
        canvas.move_to(scale_boundary + scale_width * 0.1 + max_height * 1.5 * h_scale, row + text_height / 2.0)
        canvas.show_text(value)
        canvas.stroke()