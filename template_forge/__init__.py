"""Template instantiation and validation engine for documentation templates"""

from template_forge.models import (
    ErrorKind,
    FieldKind,
    FieldSpec,
    FieldValues,
    Rejected,
    Rendered,
    RenderResult,
    SchemaError,
    TemplateError,
    TemplateLoadError,
    TemplateSchema,
    Violation,
)
from template_forge.services.renderer import RendererService, render

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "FieldKind",
    "FieldSpec",
    "FieldValues",
    "Rejected",
    "Rendered",
    "RenderResult",
    "SchemaError",
    "TemplateError",
    "TemplateLoadError",
    "TemplateSchema",
    "Violation",
    "RendererService",
    "render",
]
