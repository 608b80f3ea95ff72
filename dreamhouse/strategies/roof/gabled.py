"""Gabled roof — two slopes meeting at a ridge that runs front to back."""

from __future__ import annotations

from dreamhouse.strategies.base import RoofStrategy
from dreamhouse.models import Position, RoofGeometry, RoofSection, RoofType


class GabledRoofStrategy(RoofStrategy):
    """
    Ridge height from the pitch over the overhang-expanded half width.

    The roof's local y=0 is the eave line, so it is positioned directly
    at the section top. Parapets do not apply to pitched roofs.
    """

    def get_id(self) -> str:
        return RoofType.GABLED.value

    def calculate_roof(
        self,
        section: RoofSection,
        pitch: float,
        overhang: float,
        has_parapet: bool = False,
    ) -> RoofGeometry:
        roof = self.geometry.create_gabled_roof(
            section.width, section.depth, pitch, overhang,
        )
        roof.position = Position(x=section.x, y=section.y, z=section.z)

        return RoofGeometry(
            geometry=roof,
            height=self.geometry.roof_height(section.width, pitch, overhang),
            roof_type=self.get_id(),
            pitch=pitch,
        )
