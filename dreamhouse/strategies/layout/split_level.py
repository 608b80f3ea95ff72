"""Split-level layout — a low full-width level with a half level stacked to the right."""

from __future__ import annotations

from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.models import LayoutData, LayoutSection, LayoutShape, RoofSection

LOWER_HEIGHT_RATIO = 0.7
UPPER_HEIGHT_RATIO = 0.5
DEPTH_RATIO = 0.7
UPPER_WIDTH_RATIO = 0.6
TOTAL_HEIGHT_RATIO = 1.2


class SplitLevelLayoutStrategy(LayoutStrategy):
    """
    Two levels at different heights.

    Height follows its own proportions of one ceiling height and ignores
    the story count: total height is always 1.2 x ceiling height.
    """

    def get_id(self) -> str:
        return LayoutShape.SPLIT_LEVEL.value

    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        lower_height = ceiling_height * LOWER_HEIGHT_RATIO
        upper_height = ceiling_height * UPPER_HEIGHT_RATIO
        level_depth = depth * DEPTH_RATIO
        upper_width = width * UPPER_WIDTH_RATIO
        upper_x = width * 0.2

        lower = LayoutSection(
            width=width, height=lower_height, depth=level_depth,
            x=0.0, y=lower_height / 2, z=0.0,
            floor=1,
        )
        upper = LayoutSection(
            width=upper_width, height=upper_height, depth=level_depth,
            x=upper_x, y=lower_height + upper_height / 2, z=0.0,
            floor=2,
        )

        return LayoutData(
            sections=[lower, upper],
            roof_sections=[
                RoofSection(
                    width=width, depth=level_depth,
                    x=0.0, y=lower_height, z=0.0,
                ),
                RoofSection(
                    width=upper_width, depth=level_depth,
                    x=upper_x, y=lower_height + upper_height, z=0.0,
                ),
            ],
            total_width=width,
            total_depth=depth,
            total_height=ceiling_height * TOTAL_HEIGHT_RATIO,
            shape=self.get_id(),
        )
