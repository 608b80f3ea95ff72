"""Architectural input parameters and style presets."""

from __future__ import annotations
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dreamhouse import config
from .building import Material, Room


def derive_footprint(
    lot_size: float,
    stories: int,
    width: float | None = None,
    depth: float | None = None,
) -> tuple[float, float]:
    """
    Split a lot size into a (width, depth) footprint per story.

    A dimension that is already known is kept and the other one is solved
    from the footprint area.
    """
    area = lot_size / config.LOT_COVERAGE / max(stories, 1)
    if width:
        return width, area / width
    if depth:
        return area / depth, depth
    width = math.sqrt(area / config.FOOTPRINT_ASPECT)
    return width, area / width


class StyleTemplate(BaseModel):
    """A named architectural preset that seeds HouseParameters."""
    model_config = ConfigDict(frozen=True)

    name: str
    roof_type: str = "flat"
    window_style: str = "large"
    room_count: int = 4
    color: str = "white"
    texture: str = "stucco"
    typical_ceiling_height: float = 9.0   # 8, 9, 10, 12 ft
    typical_stories: int = 1
    building_shape: str = "cube"
    window_to_wall_ratio: float = 0.15    # 0.10 - 0.30
    foundation_type: str = "slab"         # slab | crawlspace | basement
    exterior_material: str = "stucco"
    roof_pitch: float = 6.0               # Rise per 12 run, 0 for flat
    has_parapet: bool = False
    has_eaves: bool = True
    eaves_overhang: float = 1.5


class HouseParameters(BaseModel):
    """
    Everything the geometry pipeline needs for one building.

    Frozen: a new instance is built for every generation request.
    Missing footprint dimensions are derived from the lot size and story
    count; a single given dimension is kept and the other solved from the
    footprint area.
    """
    model_config = ConfigDict(frozen=True)

    lot_size: float = Field(gt=0)                     # sq ft
    roof_type: str = "flat"                           # flat | gabled
    window_style: str = "large"
    room_count: int = Field(default=4, ge=0)
    material: Material = Material()
    ceiling_height: float = Field(default=9.0, gt=0)  # ft
    stories: int = Field(default=1, ge=1)
    building_shape: str = "cube"
    window_to_wall_ratio: float = Field(default=0.15, ge=0, le=1)
    foundation_type: str = "slab"
    exterior_material: str = "stucco"
    roof_pitch: float = Field(default=0.0, ge=0)      # Rise per 12 run
    has_parapet: bool = False
    has_eaves: bool = False
    eaves_overhang: float = Field(default=0.0, ge=0)  # ft
    # A footprint that could not be derived stays at 0 and fails validation
    footprint_width: float = Field(default=0.0, gt=0, validate_default=True)
    footprint_depth: float = Field(default=0.0, gt=0, validate_default=True)
    rooms: list[Room] = []

    @model_validator(mode="before")
    @classmethod
    def _fill_footprint(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        width = data.get("footprint_width")
        depth = data.get("footprint_depth")
        if width and depth:
            return data
        try:
            lot_size = float(data.get("lot_size"))
            stories = int(data.get("stories") or 1)
            width = float(width) if width else None
            depth = float(depth) if depth else None
        except (TypeError, ValueError):
            # Leave it to field validation to reject
            return data
        if lot_size <= 0:
            return data
        width, depth = derive_footprint(lot_size, stories, width, depth)
        return {**data, "footprint_width": width, "footprint_depth": depth}

    @property
    def effective_overhang(self) -> float:
        """Eaves overhang forwarded to roofs: 0 without eaves, 1.5 ft default."""
        if not self.has_eaves:
            return 0.0
        if self.eaves_overhang > 0:
            return self.eaves_overhang
        return config.DEFAULT_EAVES_OVERHANG
