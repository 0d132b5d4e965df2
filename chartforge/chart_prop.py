"""Properties shared by every chart: title, screen size and legend."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class AxisType(Enum):
    """Which axes a chart's data needs room for."""

    NO_AXIS = auto()
    SINGLE = auto()
    DOUBLE_HORIZONTAL = auto()
    DOUBLE_VERTICAL = auto()
    FULL = auto()

    @property
    def default_screen_size(self) -> tuple[float, float]:
        """Window size suited to this axis layout."""
        return _SCREEN_SIZES[self]


_SCREEN_SIZES = {
    AxisType.NO_AXIS: (700.0, 700.0),
    AxisType.SINGLE: (700.0, 700.0),
    AxisType.DOUBLE_HORIZONTAL: (800.0, 700.0),
    AxisType.DOUBLE_VERTICAL: (700.0, 800.0),
    AxisType.FULL: (800.0, 800.0),
}


@dataclass
class ChartProp:
    """Title, screen size (before any legend area) and legend settings."""

    chart_title: str
    screen_size: tuple[float, float] = (700.0, 700.0)
    legend_values: list[str] = field(default_factory=list)
    show_legend: bool = False

    @classmethod
    def for_axis_type(cls, chart_title: str, axis_type: AxisType) -> "ChartProp":
        """Create properties with the screen size suited to the axis layout."""
        return cls(chart_title, axis_type.default_screen_size)

    def set_screen_size(self, width: float, height: float) -> None:
        """Set the screen size before the legend portion is added."""
        self.screen_size = (width, height)