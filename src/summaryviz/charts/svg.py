"""Inline SVG rendering of trend chart geometry (no JS dependencies)."""

from __future__ import annotations

from collections.abc import Sequence

from markupsafe import Markup, escape

from .trend import ChartDimensions, ChartGeometry, layout

# Gap between the plot area and the axis labels
_LABEL_OFFSET = 5
_X_LABEL_DROP = 15


def render_svg(container_id: str, geometry: ChartGeometry) -> Markup:
    """Render a laid-out trend chart as an ``<svg>`` element."""
    dims = geometry.dimensions
    labels = geometry.axis_labels
    width = geometry.width
    height = geometry.height

    mean_line = ""
    if geometry.mean_y is not None:
        mean_line = (
            f'<line class="mean-line" x1="0" x2="{width}" '
            f'y1="{geometry.mean_y:.2f}" y2="{geometry.mean_y:.2f}"/>'
        )

    return Markup(
        f'<svg id="{escape(container_id)}" class="trend-graph" '
        f'width="{width + dims.margin_left + dims.margin_right}" '
        f'height="{height + dims.margin_top + dims.margin_bottom}" '
        f'xmlns="http://www.w3.org/2000/svg">'
        f'<g transform="translate({dims.margin_left},{dims.margin_top})">'
        f'<path class="trend-area" d="{geometry.area_path}"/>'
        f'<path class="trend-line" d="{geometry.line_path}"/>'
        f"{mean_line}"
        f'<text class="axis-label" x="-{_LABEL_OFFSET}" y="0" text-anchor="end" '
        f'alignment-baseline="middle">{escape(labels.y_max)}</text>'
        f'<text class="axis-label" x="-{_LABEL_OFFSET}" y="{height}" text-anchor="end" '
        f'alignment-baseline="middle">{escape(labels.y_min)}</text>'
        f'<text class="axis-label" x="0" y="{height + _X_LABEL_DROP}" '
        f'text-anchor="start">{escape(labels.x_start)}</text>'
        f'<text class="axis-label" x="{width}" y="{height + _X_LABEL_DROP}" '
        f'text-anchor="end">{escape(labels.x_end)}</text>'
        f"</g></svg>"
    )


def create_trend_graph(
    container_id: str,
    series: Sequence[float] | None,
    mean: float | None,
    window_duration: str,
    unit: str | None = None,
    dimensions: ChartDimensions | None = None,
) -> Markup:
    """Lay out and render one trend chart.

    An empty or missing series renders a placeholder instead of a chart.
    """
    if not series:
        return Markup(
            f'<div id="{escape(container_id)}" class="no-trend-graph">No trend data</div>'
        )
    geometry = layout(series, mean, window_duration, unit, dimensions)
    return render_svg(container_id, geometry)
