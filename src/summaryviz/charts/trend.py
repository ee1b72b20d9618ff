r"""Trend chart geometry.

Maps a series of per-window samples to pixel coordinates for a small
sparkline-style chart::

      y_max label  +----------------------------+
                   |        /\      ___         |
                   |-------/--\----/---\--------|  <- mean line
                   |  ____/    \__/     \___    |
          0 label  +----------------------------+
                   0s                         50s

The y axis always starts at zero so charts show absolute magnitude, with 5%
headroom above the largest sample. Only the top and bottom y labels and the
first and last x labels are produced.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from summaryviz._constants import (
    CHART_HEIGHT,
    CHART_MARGIN_BOTTOM,
    CHART_MARGIN_LEFT,
    CHART_MARGIN_RIGHT,
    CHART_MARGIN_TOP,
    CHART_POINT_WIDTH,
    Y_HEADROOM,
)
from summaryviz.formatting import format_number

_DURATION_RE = re.compile(r"^(\d+)(.*)$")


@dataclass(frozen=True)
class ChartDimensions:
    """Fixed layout constants for a trend chart (pixels)."""

    point_width: int = CHART_POINT_WIDTH
    height: int = CHART_HEIGHT
    margin_top: int = CHART_MARGIN_TOP
    margin_right: int = CHART_MARGIN_RIGHT
    margin_bottom: int = CHART_MARGIN_BOTTOM
    margin_left: int = CHART_MARGIN_LEFT


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class AxisLabels:
    y_max: str
    y_min: str
    x_start: str
    x_end: str


@dataclass(frozen=True)
class ChartGeometry:
    """Everything needed to draw one trend chart.

    Coordinates are relative to the plot area's top-left corner; the caller
    offsets by the margins in ``dimensions``.
    """

    width: float
    height: float
    y_max: float
    points: tuple[Point, ...]
    line_path: str
    area_path: str
    mean_y: float | None
    axis_labels: AxisLabels
    dimensions: ChartDimensions


def parse_window_duration(window_duration: str) -> tuple[int, str]:
    """Split ``"10s"`` into ``(10, "s")``.

    Raises:
        ValueError: If the duration does not start with digits
    """
    match = _DURATION_RE.match(window_duration)
    if not match:
        raise ValueError(f"Window duration must start with a number: {window_duration!r}")
    return int(match.group(1)), match.group(2)


def linear_scale(
    domain: tuple[float, float], output: tuple[float, float]
) -> Callable[[float], float]:
    """Linear map from ``domain`` to ``output``.

    A zero-width domain maps everything to the middle of the output range.
    """
    d0, d1 = domain
    r0, r1 = output
    span = d1 - d0
    if span == 0:
        middle = (r0 + r1) / 2
        return lambda _value: middle
    return lambda value: r0 + (value - d0) / span * (r1 - r0)


def _coord(value: float) -> str:
    text = f"{round(value, 2) + 0.0:.2f}"
    return text.rstrip("0").rstrip(".")


def _path(points: Sequence[Point]) -> str:
    return "M" + "L".join(f"{_coord(p.x)},{_coord(p.y)}" for p in points)


def layout(
    series: Sequence[float],
    mean: float | None,
    window_duration: str,
    unit: str | None,
    dimensions: ChartDimensions | None = None,
) -> ChartGeometry:
    """Compute the geometry of a trend chart.

    Args:
        series: One non-negative sample per time window
        mean: Value for the horizontal mean line, or None for no line
        window_duration: Size of each window, e.g. ``"10s"``
        unit: Suffix for the y axis labels (None for no suffix)
        dimensions: Layout constants (defaults to :class:`ChartDimensions`)

    Returns:
        ChartGeometry for the series

    Raises:
        ValueError: If the series is empty, a sample or the mean is non-finite,
                    or the window duration cannot be parsed
    """
    if not series:
        raise ValueError("Cannot lay out a trend chart for an empty series")
    if not all(math.isfinite(v) for v in series):
        raise ValueError("Trend series contains a non-finite sample")
    if mean is not None and not math.isfinite(mean):
        raise ValueError(f"Trend mean is not a finite number: {mean}")

    dims = dimensions or ChartDimensions()
    unit = unit or ""
    count = len(series)

    width = count * dims.point_width - dims.margin_left - dims.margin_right
    height = dims.height - dims.margin_top - dims.margin_bottom

    max_val = max(series)
    y_max = max_val + max_val * Y_HEADROOM

    x = linear_scale((0, count - 1), (0, width))
    y = linear_scale((0, y_max), (height, 0))

    points = tuple(Point(x(i), y(v)) for i, v in enumerate(series))
    line_path = _path(points)
    area_path = (
        f"{line_path}"
        f"L{_coord(points[-1].x)},{_coord(height)}"
        f"L{_coord(points[0].x)},{_coord(height)}Z"
    )

    duration_value, duration_unit = parse_window_duration(window_duration)
    total_duration = duration_value * count

    labels = AxisLabels(
        y_max=f"{format_number(max_val, 3)}{unit}",
        y_min=f"0{unit}",
        x_start=f"0{duration_unit}",
        x_end=f"{format_number(total_duration, 3)}{duration_unit}",
    )

    return ChartGeometry(
        width=width,
        height=height,
        y_max=y_max,
        points=points,
        line_path=line_path,
        area_path=area_path,
        mean_y=y(mean) if mean is not None else None,
        axis_labels=labels,
        dimensions=dims,
    )
