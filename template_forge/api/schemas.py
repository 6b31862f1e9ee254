"""Request/response schemas for the Template API"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from template_forge.models.template import TemplateSchema


class TemplateListItem(BaseModel):
    """A template in the templates list"""
    name: str
    title: str = ""
    description: str = ""
    field_count: int = 0


class TemplateListResponse(BaseModel):
    """Response for listing templates"""
    templates: list[TemplateListItem] = []


class FieldItem(BaseModel):
    """A single declared field"""
    name: str
    kind: str
    required: bool = True
    allowed_values: Optional[list[str]] = None
    default_value: Optional[Any] = None
    label: Optional[str] = None
    description: Optional[str] = None


class TemplateDetailResponse(BaseModel):
    """Field definitions and body of one template"""
    name: str
    title: str = ""
    description: str = ""
    fields: list[FieldItem]
    placeholders: list[str] = []
    template_body: str

    @classmethod
    def from_schema(cls, schema: TemplateSchema) -> "TemplateDetailResponse":
        return cls(
            name=schema.name,
            title=schema.title or "",
            description=schema.description or "",
            fields=[
                FieldItem(
                    name=spec.name,
                    kind=spec.kind.value,
                    required=spec.required,
                    allowed_values=list(spec.allowed_values) if spec.allowed_values else None,
                    default_value=spec.default_value,
                    label=spec.label,
                    description=spec.description,
                )
                for spec in schema.fields
            ],
            placeholders=schema.placeholders,
            template_body=schema.template_body,
        )


class RenderRequest(BaseModel):
    """Field values for one render"""
    values: dict[str, Any] = Field(default_factory=dict, description="Field values keyed by field name")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str  # "ok"
    version: str = "0.1.0"
    templates: int = 0
