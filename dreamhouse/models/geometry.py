"""Renderable geometry units and the aggregate building result."""

from __future__ import annotations
from pydantic import BaseModel


class Point3D(BaseModel):
    """Point in 3D space (Y up, Three.js convention)."""
    x: float
    y: float
    z: float


class Position(BaseModel):
    """Object-space origin placement applied at render time."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class GeometryData(BaseModel):
    """
    A renderable unit: flat vertex buffer + triangle indices + material.

    Vertices are always centered on the local origin. `position` is the
    only translation; it is never baked into the vertex buffer so the same
    arrays can be placed more than once.
    """
    vertices: list[float] = []       # [x0, y0, z0, x1, y1, z1, ...]
    indices: list[int] = []          # Consecutive triples, CCW from outside
    material_type: str = "stucco"
    color: str = "white"
    position: Position | None = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def world_vertices(self) -> list[tuple[float, float, float]]:
        """Vertices with `position` applied, as the renderer would see them."""
        px, py, pz = (0.0, 0.0, 0.0)
        if self.position is not None:
            px, py, pz = self.position.x, self.position.y, self.position.z
        v = self.vertices
        return [
            (v[i] + px, v[i + 1] + py, v[i + 2] + pz)
            for i in range(0, len(v), 3)
        ]


class RoofGeometry(BaseModel):
    """A roof geometry unit plus roof-specific metadata."""
    geometry: GeometryData = GeometryData()
    height: float = 0.0     # Ridge height above the roof base (0 for flat)
    roof_type: str = "flat"
    pitch: float = 0.0      # Rise per 12 units of run
    thickness: float = 0.0  # Slab thickness (flat roofs only)
    parapets: list[GeometryData] = []


class BuildingGeometry(BaseModel):
    """The complete generated building, ready for the renderer."""
    sections: list[GeometryData] = []
    roofs: list[RoofGeometry] = []
    parapets: list[GeometryData] = []
    windows: list[GeometryData] = []         # Reserved, not generated yet
    interior_walls: list[GeometryData] = []  # Reserved, not generated yet
    foundation: GeometryData | None = None
    total_height: float = 0.0
    max_dimension: float = 0.0


class LegacyMesh(BaseModel):
    """Single-box house mesh used by the OBJ export path."""
    vertices: list[Point3D] = []
    indices: list[int] = []
