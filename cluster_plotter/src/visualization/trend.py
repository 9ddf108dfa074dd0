"""
Least-squares trend line for the scatter plot.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np


class TrendLine(NamedTuple):
    slope: float
    intercept: float
    points: Tuple[Tuple[float, float], Tuple[float, float]]

    def __call__(self, x: float) -> float:
        return self.slope * x + self.intercept


def fit_trend(xs: Sequence[float], ys: Sequence[float]) -> Optional[TrendLine]:
    """
    Ordinary least-squares fit of ys against xs.

    The returned segment spans the observed x-range only. A single point or
    constant xs gives a zero-slope line through the mean of ys.

    Returns:
        TrendLine, or None when there are no points

    Raises:
        ValueError: If xs and ys differ in length
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"xs and ys must have equal length, got {x.size} and {y.size}")
    if x.size == 0:
        return None

    x_min = float(np.min(x))
    x_max = float(np.max(x))

    if x.size < 2 or x_min == x_max:
        slope = 0.0
        intercept = float(np.mean(y))
    else:
        design = np.vstack([np.ones(x.size), x]).T
        a, b = np.linalg.lstsq(design, y, rcond=None)[0]
        intercept, slope = float(a), float(b)

    points = (
        (x_min, slope * x_min + intercept),
        (x_max, slope * x_max + intercept),
    )
    return TrendLine(slope, intercept, points)
