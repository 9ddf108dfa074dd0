"""
Trace creation module for cluster visualization.

This module handles the creation of all Plotly traces including:
- Property scatter traces colored by a third property
- Least-squares trend line traces
- Milky Way reference marker
- 3D coordinate axis traces for the scene
- Trace styling and hover text formatting
"""

from typing import List, Optional

import plotly.graph_objs as go

from cluster_plotter.utils.colordefinitions import (
    METALLICITY_COLORSCALE,
    REFERENCE_MARKER_COLOR,
    TREND_LINE_COLOR,
    axis_colors,
)


class TraceCreator:
    """Handles creation of all Plotly traces for cluster visualization."""

    def __init__(self, colorscale=None, trend_color=None, marker_size=8):
        """
        Initialize TraceCreator with color schemes.

        Args:
            colorscale: Continuous colorscale for the scatter color axis
            trend_color: Color of the fitted trend line
            marker_size: Scatter marker size in pixels
        """
        self.colorscale = colorscale or METALLICITY_COLORSCALE
        self.trend_color = trend_color or TREND_LINE_COLOR
        self.marker_size = marker_size

    def create_scatter_traces(self, projection, trend=None, reference=None) -> List:
        """
        Create all traces of the property scatter plot.

        Args:
            projection: Projection with aligned xs/ys/colors/labels
            trend: TrendLine to draw over the points (optional)
            reference: (entity, (x, y)) of the reference marker (optional)

        Returns:
            List of Plotly trace objects, points first
        """
        traces: List = [self.create_scatter_trace(projection)]

        if reference is not None:
            entity, point = reference
            traces.append(self.create_reference_trace(entity, point))

        if trend is not None:
            traces.append(self.create_trend_trace(trend))

        return traces

    def create_scatter_trace(self, projection) -> go.Scattergl:
        """Scatter points colored by the observed range of the color property."""
        marker = dict(
            size=self.marker_size,
            symbol="circle",
            color=projection.colors,
            colorscale=self.colorscale,
            line=dict(width=0.5, color="DarkSlateGrey"),
        )
        if projection.color_range is not None:
            cmin, cmax = projection.color_range
            marker.update(
                cmin=cmin,
                cmax=cmax,
                showscale=True,
                colorbar=dict(title=dict(text=projection.color_property), x=1.02),
            )

        return go.Scattergl(
            x=projection.xs,
            y=projection.ys,
            mode="markers",
            marker=marker,
            name="Clusters",
            text=[
                f"Name: {label}<br>X: {x:.4g}<br>Y: {y:.4g}<br>Color: {c:.4g}"
                for label, x, y, c in zip(projection.labels, projection.xs, projection.ys, projection.colors)
            ],
            customdata=projection.labels,
            hoverinfo="text",
            hoverlabel=dict(bgcolor="white", font_size=12, font_family="Arial"),
            showlegend=False,
        )

    def create_trend_trace(self, trend) -> go.Scatter:
        """Two-point line over the observed x-range."""
        (x0, y0), (x1, y1) = trend.points
        return go.Scatter(
            x=[x0, x1],
            y=[y0, y1],
            mode="lines",
            line=dict(color=self.trend_color, width=2),
            name=f"Fit: y = {trend.slope:.3g}x + {trend.intercept:.3g}",
            hoverinfo="name",
            showlegend=True,
        )

    def create_reference_trace(self, entity, point) -> go.Scatter:
        x, y = point
        return go.Scatter(
            x=[x],
            y=[y],
            mode="markers",
            marker=dict(size=14, symbol="diamond", color=REFERENCE_MARKER_COLOR,
                        line=dict(width=1, color="black")),
            name=entity.id,
            text=[f"{entity.id}<br>X: {x:.4g}<br>Y: {y:.4g}"],
            hoverinfo="text",
            showlegend=True,
        )

    def create_axis_traces(self, length: float = 5.0) -> List[go.Scatter3d]:
        """X/Y/Z axis lines from the origin, drawn after the spheres."""
        traces = []
        for axis, (dx, dy, dz) in (("x", (1, 0, 0)), ("y", (0, 1, 0)), ("z", (0, 0, 1))):
            traces.append(
                go.Scatter3d(
                    x=[0, dx * length],
                    y=[0, dy * length],
                    z=[0, dz * length],
                    mode="lines",
                    line=dict(color=axis_colors[axis], width=4),
                    name=f"{axis.upper()} axis",
                    hoverinfo="skip",
                    showlegend=False,
                )
            )
        return traces

    def create_empty_scatter_message(self, projection) -> Optional[str]:
        """Message shown instead of points when nothing could be projected."""
        if projection is None or not projection.is_empty:
            return None
        return (
            f"No cluster has numeric values for all of "
            f"'{projection.x_property}', '{projection.y_property}' and '{projection.color_property}'"
        )
