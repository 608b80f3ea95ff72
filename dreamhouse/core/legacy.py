"""Legacy single-box house mesh, sized straight from the lot size.

Predates the layout pipeline and is only used by the OBJ export path.
"""

from __future__ import annotations
import math

from dreamhouse.models import LegacyMesh, Point3D

HEIGHT_RATIO = 0.6

# Bottom, top, front, back, left, right; two triangles each
LEGACY_BOX_INDICES: list[int] = [
    0, 2, 1, 0, 3, 2,
    4, 5, 6, 4, 6, 7,
    0, 1, 5, 0, 5, 4,
    2, 3, 7, 2, 7, 6,
    3, 0, 4, 3, 4, 7,
    1, 2, 6, 1, 6, 5,
]


def legacy_dimensions(lot_size: float) -> tuple[float, float]:
    """(base, height) of the legacy box: base = sqrt(lot), height = 0.6 base."""
    base = math.sqrt(lot_size)
    return base, base * HEIGHT_RATIO


def build_legacy_mesh(lot_size: float) -> LegacyMesh:
    base, height = legacy_dimensions(lot_size)
    h = base / 2
    corners = [(-h, -h), (h, -h), (h, h), (-h, h)]

    vertices = [Point3D(x=x, y=0.0, z=z) for x, z in corners]
    vertices += [Point3D(x=x, y=height, z=z) for x, z in corners]

    return LegacyMesh(vertices=vertices, indices=list(LEGACY_BOX_INDICES))
