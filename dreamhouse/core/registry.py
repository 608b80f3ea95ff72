"""Strategy registry — stores and selects layout and roof strategies."""

from __future__ import annotations
import logging

from dreamhouse.models import LayoutShape, RoofType
from dreamhouse.services.geometry_service import GeometryService
from dreamhouse.strategies.base import LayoutStrategy, RoofStrategy

logger = logging.getLogger(__name__)


def normalize_name(name: str | None) -> str:
    """Lower-case and trim a shape or roof-type label."""
    return (name or "").strip().lower()


class StrategyRegistry:
    """
    Closed tables of layout and roof strategies.

    Selection is total: any string resolves to a strategy. Unknown shapes
    fall back to the cube layout and unknown roof types to the flat roof.
    """

    def __init__(self) -> None:
        self._layouts: dict[str, LayoutStrategy] = {}
        self._roofs: dict[str, RoofStrategy] = {}

    def register_layout(self, strategy: LayoutStrategy) -> None:
        self._layouts[strategy.get_id()] = strategy

    def register_roof(self, strategy: RoofStrategy) -> None:
        self._roofs[strategy.get_id()] = strategy

    def list_layouts(self) -> list[str]:
        return list(self._layouts)

    def list_roofs(self) -> list[str]:
        return list(self._roofs)

    def select_layout(self, shape: str | None, stories: int) -> LayoutStrategy:
        """
        Pick the layout strategy for a shape name.

        `two-story` is only honored with at least two stories.
        """
        key = normalize_name(shape)
        if key == LayoutShape.TWO_STORY.value and stories < 2:
            key = LayoutShape.CUBE.value
        strategy = self._layouts.get(key)
        if strategy is None:
            logger.debug("Unknown building shape %r, using cube layout", shape)
            strategy = self._layouts[LayoutShape.CUBE.value]
        return strategy

    def select_roof(self, roof_type: str | None, pitch: float) -> RoofStrategy:
        """
        Pick the roof strategy for a roof-type name.

        A gabled roof without pitch has no ridge and is built as flat.
        """
        key = normalize_name(roof_type)
        if key == RoofType.GABLED.value and pitch <= 0:
            logger.debug("Gabled roof requested with pitch %s, using flat roof", pitch)
            key = RoofType.FLAT.value
        strategy = self._roofs.get(key)
        if strategy is None:
            logger.debug("Unknown roof type %r, using flat roof", roof_type)
            strategy = self._roofs[RoofType.FLAT.value]
        return strategy


def create_default_registry(
    geometry_service: GeometryService | None = None,
) -> StrategyRegistry:
    """Create a registry with every layout and roof strategy."""
    from dreamhouse.strategies.layout.angled import AngledLayoutStrategy
    from dreamhouse.strategies.layout.cube import CubeLayoutStrategy
    from dreamhouse.strategies.layout.l_shape import LShapeLayoutStrategy
    from dreamhouse.strategies.layout.split_level import SplitLevelLayoutStrategy
    from dreamhouse.strategies.layout.two_story import TwoStoryLayoutStrategy
    from dreamhouse.strategies.roof.flat import FlatRoofStrategy
    from dreamhouse.strategies.roof.gabled import GabledRoofStrategy

    geometry_service = geometry_service or GeometryService()

    registry = StrategyRegistry()
    registry.register_layout(CubeLayoutStrategy())
    registry.register_layout(TwoStoryLayoutStrategy())
    registry.register_layout(LShapeLayoutStrategy())
    registry.register_layout(SplitLevelLayoutStrategy())
    registry.register_layout(AngledLayoutStrategy())
    registry.register_roof(FlatRoofStrategy(geometry_service))
    registry.register_roof(GabledRoofStrategy(geometry_service))
    return registry
