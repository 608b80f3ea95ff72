"""L-shape layout — a full-width main wing at the back, a side wing front-right."""

from __future__ import annotations

from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.models import LayoutData, LayoutSection, LayoutShape, RoofSection

WING_DEPTH_RATIO = 0.6
SIDE_WING_WIDTH_RATIO = 0.5


class LShapeLayoutStrategy(LayoutStrategy):
    """
    Two full-height wings, each with its own roof.

    The main wing spans the full width and is pushed toward the back;
    the side wing covers the right half and is pushed toward the front.
    Together they reach the full footprint depth.
    """

    def get_id(self) -> str:
        return LayoutShape.L_SHAPE.value

    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        height = ceiling_height * stories
        wing_depth = depth * WING_DEPTH_RATIO
        side_width = width * SIDE_WING_WIDTH_RATIO
        z_offset = depth * 0.2

        # (width, x, z) per wing: main (back), side (front-right)
        wings = [
            (width, 0.0, -z_offset),
            (side_width, width * 0.25, z_offset),
        ]

        return LayoutData(
            sections=[
                LayoutSection(
                    width=w, height=height, depth=wing_depth,
                    x=x, y=height / 2, z=z,
                    floor=1,
                )
                for w, x, z in wings
            ],
            roof_sections=[
                RoofSection(width=w, depth=wing_depth, x=x, y=height, z=z)
                for w, x, z in wings
            ],
            total_width=width,
            total_depth=depth,
            total_height=height,
            shape=self.get_id(),
        )
