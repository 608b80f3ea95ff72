"""Flat roof — a thin slab, optionally ringed by parapet walls."""

from __future__ import annotations

from dreamhouse import config
from dreamhouse.strategies.base import RoofStrategy
from dreamhouse.models import (
    GeometryData, Position, RoofGeometry, RoofSection, RoofType,
)


class FlatRoofStrategy(RoofStrategy):
    """
    Slab of fixed thickness whose bottom face sits on the section top.

    A flat roof adds no ridge height; `RoofGeometry.thickness` carries the
    slab depth instead. Parapets stand on top of the slab.
    """

    thickness: float = config.FLAT_ROOF_THICKNESS

    def get_id(self) -> str:
        return RoofType.FLAT.value

    def calculate_roof(
        self,
        section: RoofSection,
        pitch: float,
        overhang: float,
        has_parapet: bool = False,
    ) -> RoofGeometry:
        slab = self.geometry.create_flat_roof(
            section.width, section.depth, overhang, self.thickness,
        )
        # Slab vertices are centered on y=0, lift by half the thickness
        slab.position = Position(
            x=section.x,
            y=section.y + self.thickness / 2,
            z=section.z,
        )

        parapets: list[GeometryData] = []
        if has_parapet:
            parapets = self._parapets(section, overhang)

        return RoofGeometry(
            geometry=slab,
            height=0.0,
            roof_type=self.get_id(),
            pitch=0.0,
            thickness=self.thickness,
            parapets=parapets,
        )

    def _parapets(self, section: RoofSection, overhang: float) -> list[GeometryData]:
        walls = self.geometry.create_parapet_walls(
            section.width, section.depth, overhang,
        )
        # Wall vertices start at y=0, so the base goes on the slab top
        roof_top = section.y + self.thickness
        for wall in walls:
            local = wall.position or Position()
            wall.position = Position(
                x=local.x + section.x,
                y=roof_top,
                z=local.z + section.z,
            )
        return walls
