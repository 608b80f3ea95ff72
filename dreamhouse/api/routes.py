"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from dreamhouse.core.templates import TEMPLATES_VERSION
from dreamhouse.services.design_service import DesignService
from dreamhouse.services.obj_exporter import export_filename
from dreamhouse.api.schemas import (
    GenerateRequest, GenerateResponse, StyleListResponse,
)

router = APIRouter()

# Shared service instance; every strategy behind it is stateless
_service = DesignService()


@router.post("/designs/generate", response_model=GenerateResponse)
async def generate_design(request: GenerateRequest) -> GenerateResponse:
    """Resolve a style prompt and generate the complete building geometry."""
    params, template = _service.parameters_from_prompt(
        request.lot_size,
        request.style_prompt,
        request.building_shape,
        request.stories,
    )
    geometry = _service.generate(params)

    return GenerateResponse(
        house_parameters=params,
        geometry=geometry,
        style_name=template.name,
    )


@router.post("/designs/export", response_class=PlainTextResponse)
async def export_design(request: GenerateRequest) -> PlainTextResponse:
    """Export the legacy single-box house as a Wavefront OBJ download."""
    params, template = _service.parameters_from_prompt(
        request.lot_size,
        request.style_prompt,
        request.building_shape,
        request.stories,
    )
    filename = export_filename(style_name=template.name)
    return PlainTextResponse(
        _service.export_obj(params),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/styles", response_model=StyleListResponse)
async def list_styles() -> StyleListResponse:
    """List the style presets and the available shapes and roof types."""
    return StyleListResponse(
        version=TEMPLATES_VERSION,
        styles=_service.list_styles(),
        shapes=_service.list_shapes(),
        roof_types=_service.list_roof_types(),
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
