# Utils package for the cluster plotter
# Contains the color ramp definitions and magnitude utilities

from .colordefinitions import derive_color, color_from_metallicity_value
from .magnitude import Magnitude, normalize_radii

__all__ = ["derive_color", "color_from_metallicity_value", "Magnitude", "normalize_radii"]
