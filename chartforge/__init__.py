"""Area, box-and-whisker, bubble, doughnut, histogram and line charts with automatic axis scaling, rendered to SVG."""

__version__ = "0.1.0"