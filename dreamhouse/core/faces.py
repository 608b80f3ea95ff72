"""Triangle index tables paired with the vertex generators in vertices.py.

Each consecutive triple is one triangle, counter-clockwise when viewed from
outside the shape so the computed normals face outward.
"""

from __future__ import annotations


def box_faces() -> list[int]:
    """36 indices (12 triangles) for the 8-vertex box."""
    return [
        # Front (+Z)
        0, 1, 2,
        0, 2, 3,
        # Back (-Z)
        5, 4, 7,
        5, 7, 6,
        # Top (+Y)
        3, 2, 6,
        3, 6, 7,
        # Bottom (-Y)
        4, 5, 1,
        4, 1, 0,
        # Right (+X)
        1, 5, 6,
        1, 6, 2,
        # Left (-X)
        4, 0, 3,
        4, 3, 7,
    ]


def gabled_roof_faces() -> list[int]:
    """24 indices (8 triangles) for the 6-vertex gabled roof."""
    return [
        # Left slope
        0, 5, 2,
        0, 1, 5,
        # Right slope
        0, 3, 4,
        0, 4, 1,
        # Front gable
        0, 2, 3,
        # Back gable
        1, 4, 5,
        # Soffit under the eaves
        2, 5, 4,
        2, 4, 3,
    ]


def flat_roof_faces() -> list[int]:
    return box_faces()


def parapet_faces() -> list[int]:
    return box_faces()


def quad_faces() -> list[int]:
    """6 indices (2 triangles) for a 4-vertex planar quad."""
    return [
        0, 1, 2,
        0, 2, 3,
    ]
