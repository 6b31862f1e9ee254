"""Template API routes: list, inspect and render templates."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from template_forge.api.schemas import (
    HealthResponse,
    RenderRequest,
    TemplateDetailResponse,
    TemplateListItem,
    TemplateListResponse,
)
from template_forge.models.result import Rejected, Rendered
from template_forge.services.registry import TemplateRegistry
from template_forge.services.renderer import RendererService
from template_forge.utils.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared registry and renderer, set via init_router() from app.py
registry: Optional[TemplateRegistry] = None
renderer: Optional[RendererService] = None


def init_router(shared_registry: TemplateRegistry, shared_renderer: RendererService):
    """Set the shared registry and renderer (called from app.py)."""
    global registry, renderer
    registry = shared_registry
    renderer = shared_renderer


def _get_registry() -> TemplateRegistry:
    global registry
    if registry is None:
        registry = TemplateRegistry()
    return registry


def _get_renderer() -> RendererService:
    global renderer
    if renderer is None:
        renderer = RendererService.from_settings(get_settings())
    return renderer


def _get_template(name: str):
    template = _get_registry().get_template(name)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template '{name}' not found")
    return template


@router.get("/api/templates", response_model=TemplateListResponse)
async def list_templates():
    """List available templates."""
    return TemplateListResponse(templates=[
        TemplateListItem(
            name=t.name,
            title=t.title or "",
            description=t.description or "",
            field_count=len(t.fields),
        )
        for t in _get_registry().list_templates()
    ])


@router.get("/api/templates/{name}", response_model=TemplateDetailResponse)
async def get_template(name: str):
    """Return field definitions and body of one template."""
    return TemplateDetailResponse.from_schema(_get_template(name))


@router.post("/api/templates/{name}/render", response_model=Rendered)
async def render_template(name: str, request: RenderRequest):
    """Render a template.

    Returns 200 with the document, or 422 with every violation when the
    values do not satisfy the template's fields.
    """
    template = _get_template(name)
    result = _get_renderer().render(template, request.values)

    if isinstance(result, Rejected):
        return JSONResponse(status_code=422, content=result.model_dump(mode="json"))
    return result


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return HealthResponse(status="ok", templates=len(_get_registry()))
