"""Renderer service: validate, then fill placeholders"""

import logging
from typing import Any, Mapping

from template_forge.models.result import Rejected, Rendered, RenderResult
from template_forge.models.template import TemplateSchema
from template_forge.models.values import FieldValues
from template_forge.services.resolver import (
    DEFAULT_LIST_SEPARATOR,
    DEFAULT_UNRESOLVED_MARKER,
    PlaceholderResolver,
)
from template_forge.services.validator import TemplateValidator
from template_forge.utils.config import Settings

logger = logging.getLogger(__name__)


class RendererService:
    """Service for rendering documents from template schemas.

    Holds only the rendering policy; each call is independent, so one
    instance can be shared across threads.
    """

    def __init__(
        self,
        unresolved_marker: str = DEFAULT_UNRESOLVED_MARKER,
        list_separator: str = DEFAULT_LIST_SEPARATOR,
    ):
        self.validator = TemplateValidator()
        self.resolver = PlaceholderResolver(
            unresolved_marker=unresolved_marker,
            list_separator=list_separator,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "RendererService":
        return cls(
            unresolved_marker=settings.unresolved_marker,
            list_separator=settings.list_separator,
        )

    def render(
        self,
        schema: TemplateSchema,
        values: "Mapping[str, Any] | FieldValues | None",
    ) -> RenderResult:
        """
        Render a document from a schema and field values.

        Values that fail validation are never substituted: the result is
        Rejected with every violation, in declaration order.
        """
        values = FieldValues.of(values)

        violations = self.validator.validate(schema, values)
        if violations:
            logger.info(
                f"Rejected render of '{schema.name}': "
                f"{len(violations)} violation(s) in {', '.join(v.field_name for v in violations)}"
            )
            return Rejected(violations=violations)

        document = self.resolver.resolve(schema.template_body, schema, values)
        logger.info(f"Rendered '{schema.name}' ({len(document)} chars)")
        return Rendered(document=document)


def render(
    schema: TemplateSchema,
    values: "Mapping[str, Any] | FieldValues | None",
) -> RenderResult:
    """Convenience function to render a document with the default policy"""
    return RendererService().render(schema, values)
