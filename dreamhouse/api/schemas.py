"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from dreamhouse.models import BuildingGeometry, HouseParameters, StyleTemplate


class GenerateRequest(BaseModel):
    """Request body for /designs/generate and /designs/export."""
    lot_size: float = Field(gt=0)          # sq ft
    style_prompt: str = Field(min_length=1)
    building_shape: str | None = None      # Overrides the template shape
    stories: int | None = Field(default=None, ge=1)


class GenerateResponse(BaseModel):
    """Response from the /designs/generate endpoint."""
    house_parameters: HouseParameters
    geometry: BuildingGeometry
    style_name: str


class StyleListResponse(BaseModel):
    version: int
    styles: list[StyleTemplate]
    shapes: list[str]
    roof_types: list[str]
