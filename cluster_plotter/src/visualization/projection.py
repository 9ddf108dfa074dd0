"""
Property projection for the 2D scatter plot.

Selects three named properties (x, y, color) across all entities and builds
aligned numeric series. An entity contributes only when all three values
parse; otherwise it is skipped entirely.
"""

from typing import Iterable, List, NamedTuple, Optional, Tuple


class Projection(NamedTuple):
    x_property: str
    y_property: str
    color_property: str
    xs: List[float]
    ys: List[float]
    colors: List[float]
    labels: List[str]
    color_range: Optional[Tuple[float, float]]
    skipped: int

    @property
    def size(self) -> int:
        return len(self.xs)

    @property
    def is_empty(self) -> bool:
        return not self.xs


def project(
    entities: Iterable,
    x_property: Optional[str],
    y_property: Optional[str],
    color_property: Optional[str],
) -> Optional[Projection]:
    """
    Project entities onto the (x, y, color) property plane.

    Args:
        entities: ClusterEntity objects
        x_property: Property for the horizontal axis
        y_property: Property for the vertical axis
        color_property: Property mapped onto the marker color

    Returns:
        Projection, or None when any of the three property names is unset
        (the caller keeps its previous plot)
    """
    if x_property is None or y_property is None or color_property is None:
        return None

    xs: List[float] = []
    ys: List[float] = []
    colors: List[float] = []
    labels: List[str] = []
    skipped = 0

    for entity in entities:
        x_value = entity.try_get_float(x_property)
        y_value = entity.try_get_float(y_property)
        color_value = entity.try_get_float(color_property)
        if x_value is None or y_value is None or color_value is None:
            skipped += 1
            continue

        xs.append(x_value)
        ys.append(y_value)
        colors.append(color_value)
        labels.append(entity.id)

    # Observed range of the selected color property, not a fixed domain
    color_range = (min(colors), max(colors)) if colors else None

    if skipped:
        print(f"Debug: Projection {x_property} vs {y_property} skipped {skipped} entities")

    return Projection(
        x_property, y_property, color_property, xs, ys, colors, labels, color_range, skipped
    )


def reference_point(entity, x_property: str, y_property: str) -> Optional[Tuple[float, float]]:
    """(x, y) of a reference entity when both properties parse for it."""
    x_value = entity.try_get_float(x_property)
    y_value = entity.try_get_float(y_property)
    if x_value is None or y_value is None:
        return None
    return x_value, y_value
