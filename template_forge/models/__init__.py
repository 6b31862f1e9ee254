"""Data models"""

from template_forge.models.result import (
    ErrorKind,
    Violation,
    Rendered,
    Rejected,
    RenderResult,
)
from template_forge.models.values import FieldValues
from template_forge.models.template import (
    TemplateError,
    SchemaError,
    TemplateLoadError,
    FieldKind,
    FieldSpec,
    TemplateSchema,
)

__all__ = [
    "ErrorKind",
    "Violation",
    "Rendered",
    "Rejected",
    "RenderResult",
    "FieldValues",
    "TemplateError",
    "SchemaError",
    "TemplateLoadError",
    "FieldKind",
    "FieldSpec",
    "TemplateSchema",
]
