"""
Animation state for the 3D scene.

Two independent animators are driven by the same periodic tick:
- OrbitalStateSimulator moves every entity along a circular orbit of radius
  semi-major axis in the XY plane (placeholder model: eccentricity, the
  individual apsides and the angular momentum direction are ignored)
- RotationAnimator spins the camera about the Z axis
"""

import math
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from cluster_plotter.src.data.entity import Point3D

FULL_TURN = 360.0
DEFAULT_ROTATION_STEP = 0.5


def whole_seconds() -> int:
    """Wall-clock time truncated to whole seconds."""
    return int(time.time())


def orbital_position(entity, t: int) -> Point3D:
    """
    Position of ``entity`` at time ``t`` (whole seconds) on its circular orbit.

    The orbit angle in degrees is ``t mod 360``; z keeps the entity's last value.
    """
    angle = math.radians(int(t) % 360)
    a = entity.semi_major_axis
    return Point3D(a * math.cos(angle), a * math.sin(angle), entity.position.z)


def compute_orbital_positions(entities: Iterable, t: int) -> List[Point3D]:
    return [orbital_position(entity, t) for entity in entities]


class OrbitalStateSimulator:
    """Advances entity positions along their orbits, one tick at a time."""

    def __init__(self, entities: List, clock: Optional[Callable[[], int]] = None):
        """
        Args:
            entities: ClusterEntity list (positions are updated in place)
            clock: Returns the current time in whole seconds (default: wall clock)
        """
        self.entities = entities
        self.clock = clock or whole_seconds

    def tick(self, t: Optional[int] = None) -> List[Tuple[Optional[int], Tuple[float, float, float]]]:
        """
        Move every entity to its position at time ``t``.

        Returns:
            List of (entity index, (dx, dy, dz)) against the previous positions
        """
        if t is None:
            t = self.clock()

        updates = []
        for entity, new_position in zip(self.entities, compute_orbital_positions(self.entities, t)):
            delta = entity.position.delta_to(new_position)
            entity.position = new_position
            updates.append((entity.index, delta))
        return updates

    def step(self, renderer, t: Optional[int] = None) -> Dict[int, Tuple[float, float, float]]:
        """
        Tick and push the translations to the scene renderer.

        Entities without a render handle, or that did not move, are skipped.

        Returns:
            Dict of handle -> applied (dx, dy, dz)
        """
        applied = {}
        for entity_index, delta in self.tick(t):
            if delta == (0.0, 0.0, 0.0):
                continue
            handle = renderer.handle_for(entity_index)
            if handle is None:
                continue
            renderer.translate(handle, delta)
            applied[handle] = delta
        return applied


class RotationAnimator:
    """Single camera angle (degrees) advanced by a fixed step per tick."""

    def __init__(self, step: float = DEFAULT_ROTATION_STEP, angle: float = 0.0):
        self.step = step
        self.angle = angle

    def tick(self) -> float:
        self.angle += self.step
        if self.angle >= FULL_TURN:
            self.angle -= FULL_TURN
        return self.angle

    def reset(self) -> None:
        self.angle = 0.0
