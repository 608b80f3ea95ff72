"""Angled layout — a stacked tower plus a ground-floor wing.

The wing is meant to be shown turned 30 degrees about the vertical axis.
That rotation is applied by the renderer; sections here stay axis-aligned.
"""

from __future__ import annotations

from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.models import LayoutData, LayoutSection, LayoutShape, RoofSection

TOWER_RATIO = 0.7
WING_RATIO = 0.5
WING_OFFSET_RATIO = 0.4


class AngledLayoutStrategy(LayoutStrategy):

    def get_id(self) -> str:
        return LayoutShape.ANGLED.value

    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        tower_width = width * TOWER_RATIO
        tower_depth = depth * TOWER_RATIO
        wing_width = width * WING_RATIO
        wing_depth = depth * WING_RATIO
        wing_x = width * WING_OFFSET_RATIO
        wing_z = depth * WING_OFFSET_RATIO

        sections = [
            LayoutSection(
                width=tower_width, height=ceiling_height, depth=tower_depth,
                x=0.0, y=(floor - 0.5) * ceiling_height, z=0.0,
                floor=floor,
            )
            for floor in range(1, stories + 1)
        ]
        sections.append(LayoutSection(
            width=wing_width, height=ceiling_height, depth=wing_depth,
            x=wing_x, y=ceiling_height / 2, z=wing_z,
            floor=1,
        ))

        total_height = ceiling_height * stories
        return LayoutData(
            sections=sections,
            roof_sections=[
                RoofSection(
                    width=tower_width, depth=tower_depth,
                    x=0.0, y=total_height, z=0.0,
                ),
                RoofSection(
                    width=wing_width, depth=wing_depth,
                    x=wing_x, y=ceiling_height, z=wing_z,
                ),
            ],
            total_width=width,
            total_depth=depth,
            total_height=total_height,
            shape=self.get_id(),
        )
