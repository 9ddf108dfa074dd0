"""
Core package for the cluster plotter app.

This package contains the server and browser management logic.
"""

from .app import ClusterVisualizationCore

__all__ = ["ClusterVisualizationCore"]
