"""Building vocabulary — shapes, roof types, materials, rooms."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class LayoutShape(str, Enum):
    CUBE = "cube"
    TWO_STORY = "two-story"
    L_SHAPE = "l-shape"
    SPLIT_LEVEL = "split-level"
    ANGLED = "angled"


class RoofType(str, Enum):
    FLAT = "flat"
    GABLED = "gabled"


class Material(BaseModel):
    """Exterior finish of the building body."""
    color: str = "white"
    texture: str = "stucco"


class Room(BaseModel):
    """
    A floor-plan rectangle.

    Coordinates are building-local with the origin at a footprint corner,
    not centered. Subtract (width / 2, depth / 2) of the footprint to get
    centered coordinates.
    """
    name: str
    floor: int = 1
    x: float
    z: float
    width: float
    depth: float
    windows: int = Field(default=1, ge=0, le=5)
    has_door: bool = True

    @property
    def area(self) -> float:
        return self.width * self.depth
