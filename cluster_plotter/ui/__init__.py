"""
UI layout package for the cluster plotter.

This package contains the UI layout definitions for the Dash application.
"""

from .layout import AppLayout

__all__ = ["AppLayout"]
