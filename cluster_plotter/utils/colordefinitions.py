# !/bin/python3
# -*- coding: utf-8 -*-
# colordefinitions.py
# This file contains color definitions for cluster rendering.
# It includes the metallicity color ramp, fixed colors for the reference
# bodies and trend line, and the fallback color for unparsable data.

import math

from plotly.colors import sample_colorscale

# Perceptual ramp used for metallicity: metal-poor (purple) -> metal-rich (yellow)
METALLICITY_COLORSCALE = "Viridis"

MIN_METALLICITY = -2.5  # Metal-poor
MAX_METALLICITY = 0.5  # Metal-rich

FALLBACK_COLOR = "rgb(0, 255, 0)"  # bright green, flags bad [Fe/H]
SUN_COLOR = "rgb(255, 255, 0)"  # yellow
GALAXY_COLOR = "rgb(255, 255, 255)"  # white
TREND_LINE_COLOR = "red"
REFERENCE_MARKER_COLOR = "yellow"

axis_colors = {
    "x": "#d62728",  # red
    "y": "#2ca02c",  # green
    "z": "#1f77b4",  # blue
}


def clamp01(value):
    return max(0.0, min(1.0, value))


def metallicity_fraction(metallicity, min_metallicity=MIN_METALLICITY, max_metallicity=MAX_METALLICITY):
    """Position of a metallicity on the color ramp, clamped to [0, 1]."""
    normalized = (metallicity - min_metallicity) / (max_metallicity - min_metallicity)
    return clamp01(normalized)


def ramp_color(fraction):
    """Sample the metallicity ramp at ``fraction`` and return an ``rgb(...)`` string."""
    return sample_colorscale(METALLICITY_COLORSCALE, [clamp01(fraction)])[0]


def derive_color(metallicity, min_metallicity=MIN_METALLICITY, max_metallicity=MAX_METALLICITY):
    return ramp_color(metallicity_fraction(metallicity, min_metallicity, max_metallicity))


def color_from_metallicity_value(raw_value, min_metallicity=MIN_METALLICITY, max_metallicity=MAX_METALLICITY):
    """
    Derive a render color from a raw (string) metallicity value.

    Missing, non-numeric and non-finite values map to FALLBACK_COLOR.
    """
    if raw_value is None:
        return FALLBACK_COLOR
    try:
        metallicity = float(str(raw_value).strip())
    except ValueError:
        return FALLBACK_COLOR
    if not math.isfinite(metallicity):
        return FALLBACK_COLOR
    return derive_color(metallicity, min_metallicity, max_metallicity)
