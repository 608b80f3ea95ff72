"""Primitives — a vertex set bundled with its matching face table.

Callers never pair a vertex generator with an index table themselves;
each constructor here does both, so a mismatched pair cannot be built.
"""

from __future__ import annotations
from typing import NamedTuple

from dreamhouse.core import faces, vertices


class Primitive(NamedTuple):
    vertices: list[float]
    indices: list[int]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3


def box(width: float, height: float, depth: float) -> Primitive:
    return Primitive(vertices.box(width, height, depth), faces.box_faces())


def gabled_roof(
    width: float, depth: float, roof_height: float, overhang: float,
) -> Primitive:
    return Primitive(
        vertices.gabled_roof(width, depth, roof_height, overhang),
        faces.gabled_roof_faces(),
    )


def flat_roof(
    width: float, depth: float, thickness: float, overhang: float,
) -> Primitive:
    return Primitive(
        vertices.flat_roof(width, depth, thickness, overhang),
        faces.flat_roof_faces(),
    )


def parapet_wall(
    length: float, height: float, thickness: float, along_depth: bool = False,
) -> Primitive:
    return Primitive(
        vertices.parapet_wall(length, height, thickness, along_depth),
        faces.parapet_faces(),
    )


def quad(width: float, height: float) -> Primitive:
    return Primitive(vertices.quad(width, height), faces.quad_faces())
