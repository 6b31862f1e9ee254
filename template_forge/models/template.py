"""Template schema models"""

import re
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Placeholder tokens look like {{field_name}}; no whitespace inside the braces.
NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
PLACEHOLDER_PATTERN = re.compile(r"\{\{(" + NAME_PATTERN.pattern + r")\}\}")


class TemplateError(Exception):
    """Base exception for template errors."""
    pass


class SchemaError(TemplateError):
    """Raised when a template schema definition is inconsistent."""
    pass


class TemplateLoadError(TemplateError):
    """Raised when a template file cannot be read or parsed."""
    pass


class FieldKind(str, Enum):
    """Value kinds a template field can declare"""
    STRING = "string"
    ENUM = "enum"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST_OF_STRING = "list-of-string"
    DATE = "date"


class FieldSpec(BaseModel):
    """A declared field of a template"""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind = FieldKind.STRING
    required: bool = True
    allowed_values: Optional[Tuple[str, ...]] = None  # enum only
    default_value: Optional[Any] = None
    label: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, name: str) -> str:
        if not NAME_PATTERN.fullmatch(name):
            raise SchemaError(
                f"Invalid field name {name!r}: must match {NAME_PATTERN.pattern}"
            )
        return name

    @model_validator(mode="after")
    def check_consistency(self) -> "FieldSpec":
        if self.kind == FieldKind.ENUM:
            if not self.allowed_values:
                raise SchemaError(f"Enum field '{self.name}' has no allowed values")
            if len(set(self.allowed_values)) != len(self.allowed_values):
                raise SchemaError(f"Enum field '{self.name}' repeats an allowed value")
        elif self.allowed_values is not None:
            raise SchemaError(
                f"Field '{self.name}' declares allowed values but is of kind '{self.kind.value}'"
            )

        if self.default_value is None:
            return self

        if self.required:
            raise SchemaError(f"Required field '{self.name}' cannot declare a default")

        from template_forge.services.coercion import ValueCoercionError, coerce_value

        try:
            typed = coerce_value(self, self.default_value)
        except ValueCoercionError as e:
            raise SchemaError(f"Default for field '{self.name}' is invalid: {e}") from e

        # Store the typed default so rendering never re-parses it
        object.__setattr__(self, "default_value", typed)
        return self

    @property
    def has_default(self) -> bool:
        return self.default_value is not None


class TemplateSchema(BaseModel):
    """A template: ordered field declarations plus the body they fill"""
    model_config = ConfigDict(frozen=True)

    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    fields: Tuple[FieldSpec, ...] = ()
    template_body: str = ""

    @model_validator(mode="after")
    def check_references(self) -> "TemplateSchema":
        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise SchemaError(f"Template '{self.name}' declares field '{spec.name}' twice")
            seen.add(spec.name)

        undeclared = [name for name in self.placeholders if name not in seen]
        if undeclared:
            raise SchemaError(
                f"Template '{self.name}' references undeclared field(s): {', '.join(undeclared)}"
            )
        return self

    @property
    def placeholders(self) -> List[str]:
        """Field names referenced by the body, in first-occurrence order"""
        names: List[str] = []
        for match in PLACEHOLDER_PATTERN.finditer(self.template_body):
            if match.group(1) not in names:
                names.append(match.group(1))
        return names

    def field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    @property
    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]
