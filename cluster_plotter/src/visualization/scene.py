"""
3D scene rendering for cluster visualization.

Each entity is drawn as a Plotly Mesh3d sphere. The renderer returns an
integer handle per sphere (its trace index in the scene figure) and keeps
an entity index -> handle table, written only by build(), that the
animation ticks use to move spheres.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np
import plotly.graph_objs as go


def sphere_points(center, radius: float, resolution: int = 10) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vertices on a sphere surface (latitude/longitude grid)."""
    theta = np.linspace(0.0, np.pi, resolution)
    phi = np.linspace(0.0, 2.0 * np.pi, 2 * resolution, endpoint=False)
    theta, phi = np.meshgrid(theta, phi)

    x = center[0] + radius * np.sin(theta) * np.cos(phi)
    y = center[1] + radius * np.sin(theta) * np.sin(phi)
    z = center[2] + radius * np.cos(theta)
    return x.ravel(), y.ravel(), z.ravel()


class SceneRenderer:
    """Builds sphere meshes and tracks the entity -> handle correlation."""

    def __init__(self, resolution: int = 10):
        """
        Args:
            resolution: Number of latitude rings per sphere
        """
        self.resolution = resolution
        self._meshes: List[Dict] = []
        self._handles: Dict[int, int] = {}

    def __len__(self):
        return len(self._meshes)

    def clear(self) -> None:
        self._meshes = []
        self._handles = {}

    def build(self, entities) -> None:
        """Rebuild the scene from scratch, one sphere per entity."""
        self.clear()
        for entity in entities:
            handle = self.add_sphere(entity.position, entity.render_radius, entity.render_color, name=entity.id)
            if entity.index is not None:
                self._handles[entity.index] = handle
        print(f"✓ Scene built with {len(self._meshes)} spheres")

    def add_sphere(self, position, radius: float, color: str, name: Optional[str] = None) -> int:
        """Create a sphere and return its handle."""
        x, y, z = sphere_points(position, radius, self.resolution)
        self._meshes.append({
            "x": x,
            "y": y,
            "z": z,
            "color": color,
            "name": name or "",
            "center": tuple(float(c) for c in position),
            "radius": radius,
        })
        return len(self._meshes) - 1

    def handle_for(self, entity_index: Optional[int]) -> Optional[int]:
        if entity_index is None:
            return None
        return self._handles.get(entity_index)

    def translate(self, handle: int, delta) -> None:
        """Shift a sphere by (dx, dy, dz)."""
        mesh = self._meshes[handle]
        dx, dy, dz = delta
        mesh["x"] = mesh["x"] + dx
        mesh["y"] = mesh["y"] + dy
        mesh["z"] = mesh["z"] + dz
        cx, cy, cz = mesh["center"]
        mesh["center"] = (cx + dx, cy + dy, cz + dz)

    def center(self, handle: int) -> Tuple[float, float, float]:
        return self._meshes[handle]["center"]

    def vertices(self, handle: int) -> Tuple[list, list, list]:
        mesh = self._meshes[handle]
        return mesh["x"].tolist(), mesh["y"].tolist(), mesh["z"].tolist()

    def traces(self) -> List[go.Mesh3d]:
        """Mesh3d traces in handle order (trace index == handle)."""
        traces = []
        for mesh in self._meshes:
            traces.append(
                go.Mesh3d(
                    x=mesh["x"],
                    y=mesh["y"],
                    z=mesh["z"],
                    alphahull=0,
                    color=mesh["color"],
                    name=mesh["name"],
                    hovertext=mesh["name"],
                    hoverinfo="text",
                    showscale=False,
                    flatshading=False,
                    lighting=dict(ambient=0.5, diffuse=0.8, specular=0.2),
                    lightposition=dict(x=1000, y=-1000, z=-1000),
                )
            )
        return traces
