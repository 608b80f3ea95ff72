"""Geometry service — turns primitives into positioned, shaded geometry units."""

from __future__ import annotations

from dreamhouse import config
from dreamhouse.core import primitives
from dreamhouse.core.primitives import Primitive
from dreamhouse.models import GeometryData, Position


class GeometryService:
    """
    Stateless builder for GeometryData units.

    Vertices stay centered on the local origin; placement goes into
    `GeometryData.position` only. Safe to share between threads.
    """

    def create_box(
        self,
        width: float,
        height: float,
        depth: float,
        x: float,
        y: float,
        z: float,
        material_type: str = "stucco",
        color: str = "white",
    ) -> GeometryData:
        return self._from_primitive(
            primitives.box(width, height, depth),
            material_type, color, Position(x=x, y=y, z=z),
        )

    @staticmethod
    def roof_height(width: float, pitch: float, overhang: float) -> float:
        """
        Ridge height of a gabled roof.

        Uses the overhang-expanded half width as the run:
        ``((width + 2 * overhang) / 2) * (pitch / 12)``.
        """
        return ((width + 2 * overhang) / 2) * (pitch / 12.0)

    def create_gabled_roof(
        self,
        width: float,
        depth: float,
        pitch: float,
        overhang: float,
    ) -> GeometryData:
        if pitch <= 0:
            raise ValueError(
                f"gabled roof needs a positive pitch, got {pitch}; use a flat roof"
            )
        roof_height = self.roof_height(width, pitch, overhang)
        return self._from_primitive(
            primitives.gabled_roof(width, depth, roof_height, overhang),
            "roof", "#8b4513", Position(),
        )

    def create_flat_roof(
        self,
        width: float,
        depth: float,
        overhang: float,
        thickness: float = config.FLAT_ROOF_THICKNESS,
    ) -> GeometryData:
        return self._from_primitive(
            primitives.flat_roof(width, depth, thickness, overhang),
            "roof", "#333333", Position(),
        )

    def create_parapet_walls(
        self,
        width: float,
        depth: float,
        overhang: float,
        parapet_height: float = config.PARAPET_HEIGHT,
        thickness: float = config.PARAPET_THICKNESS,
    ) -> list[GeometryData]:
        """
        Four parapet walls around the expanded roof footprint.

        Order: front (+Z), back (-Z), right (+X), left (-X). The front and
        back walls are one thickness longer so they close the corners.
        """
        roof_width = width + 2 * overhang
        roof_depth = depth + 2 * overhang
        y = parapet_height / 2

        front_back = primitives.parapet_wall(
            roof_width + thickness, parapet_height, thickness,
        )
        sides = primitives.parapet_wall(
            roof_depth, parapet_height, thickness, along_depth=True,
        )

        placements = [
            (front_back, Position(x=0.0, y=y, z=roof_depth / 2)),
            (front_back, Position(x=0.0, y=y, z=-roof_depth / 2)),
            (sides, Position(x=roof_width / 2, y=y, z=0.0)),
            (sides, Position(x=-roof_width / 2, y=y, z=0.0)),
        ]
        return [
            self._from_primitive(prim, "concrete", "#e0e0e0", pos)
            for prim, pos in placements
        ]

    def create_quad(
        self,
        width: float,
        height: float,
        x: float,
        y: float,
        z: float,
        material_type: str = "glass",
        color: str = "#87ceeb",
    ) -> GeometryData:
        """Planar window/door panel without thickness."""
        return self._from_primitive(
            primitives.quad(width, height),
            material_type, color, Position(x=x, y=y, z=z),
        )

    def _from_primitive(
        self,
        prim: Primitive,
        material_type: str,
        color: str,
        position: Position,
    ) -> GeometryData:
        # Copy so callers can never alias the shared index tables
        return GeometryData(
            vertices=list(prim.vertices),
            indices=list(prim.indices),
            material_type=material_type,
            color=color,
            position=position,
        )
