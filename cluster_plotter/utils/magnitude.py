"""
Magnitude utilities for cluster rendering.

This module parses absolute magnitudes from the raw survey properties and
maps them onto render radii for the 3D scene.
"""

import math

import numpy as np

MIN_RADIUS = 0.05
MAX_RADIUS = 0.5


class Magnitude:
    """Magnitude parsing and magnitude -> radius normalization utilities."""

    column = "M_V,t"

    @staticmethod
    def parse(raw_value, default=0.0):
        """!
        Parse a raw magnitude value.

        Args: raw_value  String value from the survey record (may be None)
        Args: default    Value returned when the magnitude is missing or unparsable
        """
        if raw_value is None:
            return default
        try:
            magnitude = float(str(raw_value).strip())
        except ValueError:
            return default
        if not math.isfinite(magnitude):
            return default
        return magnitude

    @staticmethod
    def magnitude_range(magnitudes):
        """
        Get the (min, max) magnitude of a collection.

        Raises:
            ValueError: If the collection is empty
        """
        values = np.asarray(list(magnitudes), dtype=float)
        if values.size == 0:
            raise ValueError("Cannot compute a magnitude range for an empty entity set")
        return float(np.min(values)), float(np.max(values))

    @staticmethod
    def normalized_brightness(magnitude, min_magnitude, max_magnitude):
        """
        Map a magnitude into [0, 1].

        0 corresponds to ``max_magnitude`` and 1 to ``min_magnitude``, so the
        most negative magnitude gets the largest radius. A zero spread maps
        every magnitude to 0.5.
        """
        spread = min_magnitude - max_magnitude
        if spread == 0:
            return 0.5
        normalized = (magnitude - max_magnitude) / spread
        return max(0.0, min(1.0, normalized))

    @staticmethod
    def magnitude_to_radius(magnitude, min_magnitude, max_magnitude,
                            min_radius=MIN_RADIUS, max_radius=MAX_RADIUS):
        normalized = Magnitude.normalized_brightness(magnitude, min_magnitude, max_magnitude)
        return min_radius + normalized * (max_radius - min_radius)


def normalize_radii(entities, min_radius=MIN_RADIUS, max_radius=MAX_RADIUS):
    """
    Overwrite ``render_radius`` on every entity from its absolute magnitude.

    Args:
        entities: Sequence of ClusterEntity objects (must not be empty)
        min_radius: Radius given to the faintest entity
        max_radius: Radius given to the brightest entity

    Returns:
        Tuple (min_magnitude, max_magnitude) used for the normalization

    Raises:
        ValueError: If ``entities`` is empty
    """
    magnitudes = [entity.absolute_magnitude for entity in entities]
    min_magnitude, max_magnitude = Magnitude.magnitude_range(magnitudes)

    for entity, magnitude in zip(entities, magnitudes):
        entity.render_radius = Magnitude.magnitude_to_radius(
            magnitude, min_magnitude, max_magnitude, min_radius, max_radius
        )

    return min_magnitude, max_magnitude
