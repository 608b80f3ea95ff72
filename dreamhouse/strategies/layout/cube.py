"""Cube layout — one box spanning every story."""

from __future__ import annotations

from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.models import LayoutData, LayoutSection, LayoutShape, RoofSection


class CubeLayoutStrategy(LayoutStrategy):
    """Single section over the full footprint, single roof on top."""

    def get_id(self) -> str:
        return LayoutShape.CUBE.value

    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        height = ceiling_height * stories

        return LayoutData(
            sections=[
                LayoutSection(
                    width=width, height=height, depth=depth,
                    x=0.0, y=height / 2, z=0.0,
                    floor=1,
                ),
            ],
            roof_sections=[
                RoofSection(width=width, depth=depth, x=0.0, y=height, z=0.0),
            ],
            total_width=width,
            total_depth=depth,
            total_height=height,
            shape=self.get_id(),
        )
