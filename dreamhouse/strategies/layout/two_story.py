"""Two-story layout — one full-footprint section stacked per floor."""

from __future__ import annotations

from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.models import LayoutData, LayoutSection, LayoutShape, RoofSection


class TwoStoryLayoutStrategy(LayoutStrategy):

    def get_id(self) -> str:
        return LayoutShape.TWO_STORY.value

    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        sections = [
            LayoutSection(
                width=width, height=ceiling_height, depth=depth,
                x=0.0, y=(floor - 0.5) * ceiling_height, z=0.0,
                floor=floor,
            )
            for floor in range(1, stories + 1)
        ]

        total_height = ceiling_height * stories
        return LayoutData(
            sections=sections,
            roof_sections=[
                RoofSection(width=width, depth=depth, x=0.0, y=total_height, z=0.0),
            ],
            total_width=width,
            total_depth=depth,
            total_height=total_height,
            shape=self.get_id(),
        )
