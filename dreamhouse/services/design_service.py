"""High-level design service — facade for the API layer."""

from __future__ import annotations
import logging

from dreamhouse.core.orchestrator import DesignOrchestrator
from dreamhouse.core.registry import StrategyRegistry, create_default_registry
from dreamhouse.core.rooms import RoomLayoutGenerator
from dreamhouse.core.templates import STYLE_TEMPLATES, resolve_template
from dreamhouse.models import (
    BuildingGeometry, HouseParameters, Material, StyleTemplate, derive_footprint,
)
from dreamhouse.services.obj_exporter import export_to_obj

logger = logging.getLogger(__name__)


class DesignService:
    """Resolves a style, builds parameters, delegates to the orchestrator."""

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.orchestrator = DesignOrchestrator(self.registry)

    def build_parameters(
        self,
        lot_size: float,
        template: StyleTemplate,
        building_shape: str | None = None,
        stories: int | None = None,
    ) -> HouseParameters:
        """
        Seed HouseParameters from a template, applying optional overrides.

        Raises pydantic.ValidationError for a non-positive lot size or
        story count.
        """
        shape = building_shape or template.building_shape
        story_count = stories if stories is not None else template.typical_stories

        rooms = []
        if lot_size > 0 and story_count >= 1:
            width, depth = derive_footprint(lot_size, story_count)
            rooms = RoomLayoutGenerator(template.window_to_wall_ratio).generate(
                width, depth, template.room_count, story_count, shape,
            )

        return HouseParameters(
            lot_size=lot_size,
            roof_type=template.roof_type,
            window_style=template.window_style,
            room_count=template.room_count,
            material=Material(color=template.color, texture=template.texture),
            ceiling_height=template.typical_ceiling_height,
            stories=story_count,
            building_shape=shape,
            window_to_wall_ratio=template.window_to_wall_ratio,
            foundation_type=template.foundation_type,
            exterior_material=template.exterior_material,
            roof_pitch=template.roof_pitch,
            has_parapet=template.has_parapet,
            has_eaves=template.has_eaves,
            eaves_overhang=template.eaves_overhang,
            rooms=rooms,
        )

    def parameters_from_prompt(
        self,
        lot_size: float,
        style_prompt: str,
        building_shape: str | None = None,
        stories: int | None = None,
    ) -> tuple[HouseParameters, StyleTemplate]:
        template = resolve_template(style_prompt)
        logger.info("Style prompt %r resolved to %s", style_prompt, template.name)
        params = self.build_parameters(lot_size, template, building_shape, stories)
        return params, template

    def generate(self, params: HouseParameters) -> BuildingGeometry:
        return self.orchestrator.generate(params)

    def export_obj(self, params: HouseParameters) -> str:
        return export_to_obj(params)

    def list_styles(self) -> list[StyleTemplate]:
        return list(STYLE_TEMPLATES)

    def list_shapes(self) -> list[str]:
        return self.registry.list_layouts()

    def list_roof_types(self) -> list[str]:
        return self.registry.list_roofs()
