"""
Cluster Plotter Package

Interactive web-based visualization of globular cluster survey data:
a 3D sphere map of cluster positions with orbit and camera animation, and
a property scatter plot with a fitted trend line.
"""

__version__ = "1.0.0"
