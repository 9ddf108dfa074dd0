"""
Data handling modules for the cluster plotter.

This package contains the cluster entity model and the modules for loading
and caching survey tables.
"""

from .entity import ClusterEntity, Point3D
from .loader import DataLoader, DatasetError

__all__ = ["ClusterEntity", "Point3D", "DataLoader", "DatasetError"]
