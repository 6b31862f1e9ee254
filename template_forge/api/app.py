"""FastAPI application factory"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from template_forge.api.routes.templates import init_router, router as templates_router
from template_forge.services.registry import TemplateRegistry
from template_forge.services.renderer import RendererService
from template_forge.utils.config import get_settings


def create_app(templates_dir: Optional[str] = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = get_settings()

    app = FastAPI(
        title="Template Forge API",
        description="Validate field values and render documentation templates",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    init_router(
        TemplateRegistry(templates_dir or settings.templates_dir),
        RendererService.from_settings(settings),
    )
    app.include_router(templates_router)

    return app
