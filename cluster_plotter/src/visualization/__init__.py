"""
Visualization modules for cluster survey data.

This package contains modules for projecting properties, fitting trend
lines, building the 3D sphere scene, creating Plotly traces and figures.
"""

from .figures import FigureManager
from .projection import Projection, project
from .scene import SceneRenderer
from .traces import TraceCreator
from .trend import TrendLine, fit_trend

__all__ = [
    "TraceCreator",
    "FigureManager",
    "SceneRenderer",
    "Projection",
    "project",
    "TrendLine",
    "fit_trend",
]
