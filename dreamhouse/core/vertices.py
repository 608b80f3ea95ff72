"""Vertex coordinate generators for the primitive shapes.

Every function returns a flat ``[x0, y0, z0, x1, y1, z1, ...]`` list
centered on the local origin. The count and order of vertices are a fixed
interface: the index tables in ``faces.py`` refer to them by position.

Box-topology order (shared by box, flat roof and parapet)::

    0 bottom-left-front    4 bottom-left-back
    1 bottom-right-front   5 bottom-right-back
    2 top-right-front      6 top-right-back
    3 top-left-front       7 top-left-back

Front is +Z, right is +X, up is +Y.
"""

from __future__ import annotations


def _box_corners(
    hw: float, y0: float, y1: float, hd: float,
) -> list[float]:
    return [
        -hw, y0, hd,
        hw, y0, hd,
        hw, y1, hd,
        -hw, y1, hd,
        -hw, y0, -hd,
        hw, y0, -hd,
        hw, y1, -hd,
        -hw, y1, -hd,
    ]


def box(width: float, height: float, depth: float) -> list[float]:
    """8 vertices of an axis-aligned box centered on the origin."""
    hh = height / 2
    return _box_corners(width / 2, -hh, hh, depth / 2)


def gabled_roof(
    width: float, depth: float, roof_height: float, overhang: float,
) -> list[float]:
    """
    6 vertices of a gabled roof with the ridge running along Z.

    The overhang expands the footprint on all four sides before the
    ridge height is applied. Eaves sit at y=0, the ridge at y=roof_height.
    """
    hw = (width + 2 * overhang) / 2
    hd = (depth + 2 * overhang) / 2
    return [
        0.0, roof_height, hd,     # 0: ridge front
        0.0, roof_height, -hd,    # 1: ridge back
        -hw, 0.0, hd,             # 2: left front eave
        hw, 0.0, hd,              # 3: right front eave
        hw, 0.0, -hd,             # 4: right back eave
        -hw, 0.0, -hd,            # 5: left back eave
    ]


def flat_roof(
    width: float, depth: float, thickness: float, overhang: float,
) -> list[float]:
    """8 vertices of a thin slab, footprint expanded by the overhang."""
    ht = thickness / 2
    return _box_corners(
        (width + 2 * overhang) / 2, -ht, ht, (depth + 2 * overhang) / 2,
    )


def parapet_wall(
    length: float, height: float, thickness: float, along_depth: bool = False,
) -> list[float]:
    """
    8 vertices of a thin upright wall from y=0 to y=height.

    The wall runs along X. With ``along_depth`` it is turned a quarter turn
    about +Y so it runs along Z; a rotation keeps the winding of the shared
    box index table intact.
    """
    verts = _box_corners(length / 2, 0.0, height, thickness / 2)
    if not along_depth:
        return verts
    rotated: list[float] = []
    for i in range(0, len(verts), 3):
        x, y, z = verts[i], verts[i + 1], verts[i + 2]
        rotated.extend((z, y, -x))
    return rotated


def quad(width: float, height: float) -> list[float]:
    """4 vertices of a planar rectangle in the XY plane, facing +Z."""
    hw = width / 2
    hh = height / 2
    return [
        -hw, -hh, 0.0,
        hw, -hh, 0.0,
        hw, hh, 0.0,
        -hw, hh, 0.0,
    ]
