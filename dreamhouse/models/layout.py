"""Layout decomposition models — sections, roof slots, aggregate layout."""

from __future__ import annotations
from pydantic import BaseModel


class LayoutSection(BaseModel):
    """One rectangular volume of the building (a wing, floor, or tower)."""
    width: float
    height: float
    depth: float
    x: float = 0.0   # Center position
    y: float = 0.0
    z: float = 0.0
    floor: int = 1   # 1-based
    add_windows: bool = True


class RoofSection(BaseModel):
    """The footprint a roof must cover. `y` is the top of the walls below."""
    width: float
    depth: float
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class LayoutData(BaseModel):
    """All sections and roof slots for one building."""
    sections: list[LayoutSection] = []
    roof_sections: list[RoofSection] = []
    total_width: float = 0.0
    total_depth: float = 0.0
    total_height: float = 0.0
    shape: str = "cube"
