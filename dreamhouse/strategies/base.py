"""Abstract base classes for layout and roof strategies.

Strategies are:
- Pure: output depends only on the arguments, no shared state
- Deterministic: identical input gives identical output
- Closed: the variant set is fixed and selected through core.registry
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from dreamhouse.models import LayoutData, RoofGeometry, RoofSection
from dreamhouse.services.geometry_service import GeometryService


class LayoutStrategy(ABC):
    """
    Decomposes a footprint into positioned sections and roof slots.

    Every strategy reports the full footprint in `total_width` and
    `total_depth`; only the internal proportions change.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Shape name this strategy answers to (e.g., 'l-shape')."""
        ...

    @abstractmethod
    def calculate_layout(
        self,
        width: float,
        depth: float,
        ceiling_height: float,
        stories: int,
    ) -> LayoutData:
        ...


class RoofStrategy(ABC):
    """Builds the roof geometry for one roof slot."""

    def __init__(self, geometry_service: GeometryService | None = None) -> None:
        self.geometry = geometry_service or GeometryService()

    @abstractmethod
    def get_id(self) -> str:
        """Roof type this strategy answers to (e.g., 'gabled')."""
        ...

    @abstractmethod
    def calculate_roof(
        self,
        section: RoofSection,
        pitch: float,
        overhang: float,
        has_parapet: bool = False,
    ) -> RoofGeometry:
        """
        Return the roof for `section`, positioned so its base sits on the
        section top (`section.y`).
        """
        ...
