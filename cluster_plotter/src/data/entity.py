"""
Cluster entity model.

One ClusterEntity is created per survey record (plus the synthetic
reference bodies). It keeps the raw property bag of the record as strings
and derives the visual attributes used by the 3D scene:
- render color from metallicity ([Fe/H]), memoized on first read
- absolute magnitude from M_V,t, parsed on every read
- semi-major axis and eccentricity from the orbital elements
"""

import math
from typing import Dict, NamedTuple, Optional, Tuple

from cluster_plotter.utils.colordefinitions import (
    MAX_METALLICITY,
    MIN_METALLICITY,
    color_from_metallicity_value,
)
from cluster_plotter.utils.magnitude import Magnitude


class Point3D(NamedTuple):
    """Position in kiloparsecs (galactocentric frame)."""

    x: float
    y: float
    z: float

    def delta_to(self, other: "Point3D") -> Tuple[float, float, float]:
        return other.x - self.x, other.y - self.y, other.z - self.z


class _MemoCell:
    """Holds a value computed at most once."""

    __slots__ = ("computed", "value")

    def __init__(self):
        self.computed = False
        self.value = None

    def set(self, value):
        self.value = value
        self.computed = True

    def get_or_compute(self, compute):
        if not self.computed:
            self.set(compute())
        return self.value


class ClusterEntity:
    """A surveyed object (or reference body) with its derived render attributes."""

    METALLICITY_KEY = "[Fe/H]"
    MAGNITUDE_KEY = Magnitude.column
    DEFAULT_RADIUS = 0.1

    def __init__(
        self,
        id: str = "",
        position: Optional[Point3D] = None,
        properties: Optional[Dict[str, str]] = None,
        color: Optional[str] = None,
        radius: float = DEFAULT_RADIUS,
        pericenter: float = 0.0,
        apocenter: float = 0.0,
        angular_momentum: Tuple[float, float, float] = (0.0, 0.0, 0.0),
        index: Optional[int] = None,
        metallicity_domain: Tuple[float, float] = (MIN_METALLICITY, MAX_METALLICITY),
    ):
        self.id = id
        self.position = position if position is not None else Point3D(0.0, 0.0, 0.0)
        self.properties: Dict[str, str] = dict(properties) if properties else {}
        self.render_radius = radius
        self.pericenter = pericenter
        self.apocenter = apocenter
        self.angular_momentum = angular_momentum
        self.index = index
        self.metallicity_domain = metallicity_domain

        self._color = _MemoCell()
        if color is not None:
            self._color.set(color)

    def __repr__(self):
        return f"ClusterEntity(id={self.id!r}, position={tuple(self.position)}, radius={self.render_radius:.3f})"

    @property
    def render_color(self) -> str:
        """Explicit color, or the metallicity color derived once and cached."""
        return self._color.get_or_compute(self._derive_color)

    @render_color.setter
    def render_color(self, color: str) -> None:
        self._color.set(color)

    def _derive_color(self) -> str:
        min_metallicity, max_metallicity = self.metallicity_domain
        return color_from_metallicity_value(
            self.properties.get(self.METALLICITY_KEY), min_metallicity, max_metallicity
        )

    @property
    def absolute_magnitude(self) -> float:
        # Missing or unparsable magnitudes count as 0
        return Magnitude.parse(self.properties.get(self.MAGNITUDE_KEY))

    @property
    def semi_major_axis(self) -> float:
        return (self.pericenter + self.apocenter) / 2

    @property
    def eccentricity(self) -> float:
        """
        (apocenter - pericenter) / (apocenter + pericenter), unvalidated.

        Only meaningful when apocenter > pericenter >= 0; a zero sum gives nan.
        """
        total = self.apocenter + self.pericenter
        if total == 0:
            return math.nan
        return (self.apocenter - self.pericenter) / total

    def try_get_float(self, name: Optional[str]) -> Optional[float]:
        """Parse a property as a finite float, or return None."""
        if name is None or name not in self.properties:
            return None
        raw_value = self.properties[name]
        if raw_value is None:
            return None
        try:
            value = float(str(raw_value).strip())
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return value
