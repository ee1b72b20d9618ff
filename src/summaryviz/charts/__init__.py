"""Trend chart layout and SVG rendering."""

from .svg import create_trend_graph, render_svg
from .trend import (
    AxisLabels,
    ChartDimensions,
    ChartGeometry,
    Point,
    layout,
    linear_scale,
    parse_window_duration,
)

__all__ = [
    "AxisLabels",
    "ChartDimensions",
    "ChartGeometry",
    "Point",
    "create_trend_graph",
    "layout",
    "linear_scale",
    "parse_window_duration",
    "render_svg",
]
