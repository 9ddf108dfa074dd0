"""
Figure management module for cluster visualization.

This module handles figure configuration and layout settings for the
property scatter plot and the 3D cluster scene, camera rotation and
vector image export.
"""

import math
import os
from typing import Dict, List, Optional

import plotly.graph_objs as go

SCENE_UIREVISION = "cluster-scene"


class FigureManager:
    """Handles Plotly figure configuration and layout management."""

    def __init__(self, camera_distance: float = 2.0, camera_elevation: float = 0.8):
        """
        Initialize FigureManager.

        Args:
            camera_distance: Horizontal distance of the scene camera eye
            camera_elevation: Height of the scene camera eye
        """
        self.camera_distance = camera_distance
        self.camera_elevation = camera_elevation

    def create_scatter_figure(self, traces: list, x_property: str, y_property: str) -> go.Figure:
        """
        Create the property scatter figure.

        Args:
            traces: Scatter, reference and trend traces
            x_property: Horizontal axis property (axis title)
            y_property: Vertical axis property (axis title)

        Returns:
            Configured Plotly Figure object
        """
        fig = go.Figure(traces)

        fig.update_layout(
            title=f'{x_property} vs {y_property}',
            xaxis_title=x_property,
            yaxis_title=y_property,
            legend=dict(
                orientation='h',
                xanchor='left',
                x=0,
                yanchor='bottom',
                y=1.02,
                font=dict(size=10)
            ),
            hovermode='closest',
            margin=dict(l=50, r=40, t=80, b=50),
            autosize=True,
            template='plotly_white'
        )
        fig.update_xaxes(automargin=True)
        fig.update_yaxes(automargin=True)

        return fig

    def create_empty_figure(self, message: str = "Select X, Y and color properties to generate a plot",
                            color: str = "gray") -> go.Figure:
        """
        Create an empty figure carrying a centered message.

        Args:
            message: Text shown in the middle of the plot area
            color: Message font color

        Returns:
            Empty Plotly Figure with hidden axes
        """
        fig = go.Figure()

        fig.update_layout(
            title='',
            margin=dict(l=40, r=20, t=40, b=40),
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            autosize=True,
            showlegend=False,
            annotations=[
                dict(
                    text=message,
                    xref="paper", yref="paper",
                    x=0.5, y=0.5, xanchor='center', yanchor='middle',
                    showarrow=False,
                    font=dict(size=16, color=color)
                )
            ]
        )
        return fig

    def create_scene_figure(self, sphere_traces: List, axis_traces: Optional[List] = None,
                            title: str = 'Globular Cluster Map') -> go.Figure:
        """
        Create the 3D scene figure.

        Sphere traces come first so that a render handle equals its trace index.

        Args:
            sphere_traces: Mesh3d traces from the SceneRenderer
            axis_traces: Coordinate axis traces drawn after the spheres
            title: Figure title

        Returns:
            Configured Plotly Figure object
        """
        fig = go.Figure(list(sphere_traces) + list(axis_traces or []))

        axis_style = dict(
            backgroundcolor='black',
            gridcolor='#444444',
            zerolinecolor='#888888',
            color='white',
            showspikes=False,
        )

        fig.update_layout(
            title=dict(text=title, font=dict(color='white')),
            paper_bgcolor='black',
            showlegend=False,
            margin=dict(l=0, r=0, t=40, b=0),
            uirevision=SCENE_UIREVISION,
            scene=dict(
                xaxis=dict(title='X (kpc)', **axis_style),
                yaxis=dict(title='Y (kpc)', **axis_style),
                zaxis=dict(title='Z (kpc)', **axis_style),
                aspectmode='data',
                bgcolor='black',
                camera=self.rotated_camera(0.0),
            ),
        )
        return fig

    def rotated_camera(self, angle: float) -> Dict:
        """
        Scene camera rotated by ``angle`` degrees about the Z axis.

        Args:
            angle: Rotation angle in degrees

        Returns:
            Plotly scene camera dict (eye, up, center)
        """
        radians = math.radians(angle)
        return dict(
            eye=dict(
                x=self.camera_distance * math.cos(radians),
                y=self.camera_distance * math.sin(radians),
                z=self.camera_elevation,
            ),
            up=dict(x=0, y=0, z=1),
            center=dict(x=0, y=0, z=0),
        )

    def export_svg(self, fig, path: str) -> str:
        """
        Write a figure to an SVG file.

        Args:
            fig: go.Figure or figure dict (as stored by dcc.Graph)
            path: Output file path

        Returns:
            Path of the written file
        """
        if not isinstance(fig, go.Figure):
            fig = go.Figure(fig)

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig.write_image(path, format='svg')
        print(f"✓ Exported figure to {path}")
        return path
