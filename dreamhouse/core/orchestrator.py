"""Design orchestrator — layout, section geometry and roofs into one building."""

from __future__ import annotations
import logging
import time

from dreamhouse import config
from dreamhouse.core.registry import (
    StrategyRegistry, create_default_registry, normalize_name,
)
from dreamhouse.models import (
    BuildingGeometry, GeometryData, HouseParameters, LayoutData, RoofGeometry,
)
from dreamhouse.services.geometry_service import GeometryService

logger = logging.getLogger(__name__)


class DesignOrchestrator:
    """
    Stateless building generator.

    Takes HouseParameters, decomposes the footprint with the selected
    layout strategy, builds one box per section and one roof per roof
    slot, and returns a complete BuildingGeometry.
    """

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        geometry_service: GeometryService | None = None,
    ) -> None:
        self.geometry = geometry_service or GeometryService()
        self.registry = registry or create_default_registry(self.geometry)

    def generate(self, params: HouseParameters) -> BuildingGeometry:
        logger.info(
            "Generating geometry: shape=%s roof=%s %.1fx%.1f ft, %d stories",
            params.building_shape, params.roof_type,
            params.footprint_width, params.footprint_depth, params.stories,
        )
        started = time.perf_counter()

        # Layout phase: sections and roof slots
        layout = self.calculate_layout(params)

        # Geometry phase: one box per section
        sections = [
            self.geometry.create_box(
                s.width, s.height, s.depth, s.x, s.y, s.z,
                params.exterior_material or "stucco",
                params.material.color or "white",
            )
            for s in layout.sections
        ]

        # Roof phase: one roof per slot
        roofs = self.calculate_roofs(layout, params)

        max_roof_height = max((r.height for r in roofs), default=0.0)
        building = BuildingGeometry(
            sections=sections,
            roofs=roofs,
            parapets=[p for r in roofs for p in r.parapets],
            foundation=self.create_foundation(params),
            total_height=layout.total_height + max_roof_height,
            max_dimension=max(layout.total_width, layout.total_depth),
        )

        logger.info(
            "Geometry generated in %.1fms: %d sections, %d roofs, height=%.1f",
            (time.perf_counter() - started) * 1000,
            len(building.sections), len(building.roofs), building.total_height,
        )
        return building

    def calculate_layout(self, params: HouseParameters) -> LayoutData:
        strategy = self.registry.select_layout(params.building_shape, params.stories)
        layout = strategy.calculate_layout(
            params.footprint_width,
            params.footprint_depth,
            params.ceiling_height,
            params.stories,
        )
        logger.debug(
            "Layout %s: %d sections, %d roof sections",
            layout.shape, len(layout.sections), len(layout.roof_sections),
        )
        return layout

    def calculate_roofs(
        self, layout: LayoutData, params: HouseParameters,
    ) -> list[RoofGeometry]:
        strategy = self.registry.select_roof(params.roof_type, params.roof_pitch)
        overhang = params.effective_overhang
        logger.debug(
            "Calculating %d roofs: type=%s pitch=%s overhang=%s parapet=%s",
            len(layout.roof_sections), strategy.get_id(),
            params.roof_pitch, overhang, params.has_parapet,
        )
        return [
            strategy.calculate_roof(
                section, params.roof_pitch, overhang, params.has_parapet,
            )
            for section in layout.roof_sections
        ]

    def create_foundation(self, params: HouseParameters) -> GeometryData | None:
        """Slab under the footprint with its top at grade (y=0)."""
        slab_depth = config.FOUNDATION_DEPTHS.get(normalize_name(params.foundation_type))
        if slab_depth is None:
            return None
        margin = 2 * config.FOUNDATION_MARGIN
        return self.geometry.create_box(
            params.footprint_width + margin,
            slab_depth,
            params.footprint_depth + margin,
            0.0, -slab_depth / 2, 0.0,
            "concrete", "#9e9e9e",
        )
