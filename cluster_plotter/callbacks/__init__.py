"""
Callbacks package for the cluster plotter app.

This package contains all Dash callback implementations organized by functionality.
"""

from .main_plot import MainPlotCallbacks
from .scene_callbacks import SceneCallbacks
from .ui_callbacks import UICallbacks

__all__ = [
    "MainPlotCallbacks",
    "SceneCallbacks",
    "UICallbacks",
]
