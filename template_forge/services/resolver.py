"""Placeholder substitution for template bodies"""

import logging
import re
from typing import Any, List, Mapping

from template_forge.models.template import PLACEHOLDER_PATTERN, TemplateSchema
from template_forge.models.values import FieldValues
from template_forge.services.coercion import ValueCoercionError, coerce_value, format_value

logger = logging.getLogger(__name__)

DEFAULT_UNRESOLVED_MARKER = "[{name}]"
DEFAULT_LIST_SEPARATOR = ", "


def find_placeholders(template_body: str) -> List[str]:
    """Return every placeholder name in the body, left to right, repeats included"""
    return [match.group(1) for match in PLACEHOLDER_PATTERN.finditer(template_body)]


class PlaceholderResolver:
    """
    Substitutes {{name}} tokens with field values.

    Lookup order for each token: supplied value, field default, then the
    unresolved marker. The body is scanned once; substituted text is never
    scanned again, so values containing {{...}} come through literally.
    """

    def __init__(
        self,
        unresolved_marker: str = DEFAULT_UNRESOLVED_MARKER,
        list_separator: str = DEFAULT_LIST_SEPARATOR,
    ):
        self.unresolved_marker = unresolved_marker
        self.list_separator = list_separator

    def resolve(
        self,
        template_body: str,
        schema: TemplateSchema,
        values: "Mapping[str, Any] | FieldValues | None",
    ) -> str:
        """
        Substitute all placeholders in a template body.

        Only call this with values that passed validation. It does not raise:
        a token it cannot fill becomes the unresolved marker.

        Args:
            template_body: Text containing {{name}} tokens
            schema: Schema declaring the referenced fields
            values: Validated values keyed by field name

        Returns:
            Substituted text
        """
        values = FieldValues.of(values)

        def replacer(match: re.Match) -> str:
            name = match.group(1)
            spec = schema.field(name)
            if spec is None:
                return self._marker(name)

            raw = values.get(name)
            if raw is not None:
                try:
                    typed = coerce_value(spec, raw)
                except ValueCoercionError as e:
                    logger.warning(f"Unvalidated value for '{name}' left unresolved: {e}")
                    return self._marker(name)
                return format_value(spec.kind, typed, self.list_separator)

            if spec.has_default:
                return format_value(spec.kind, spec.default_value, self.list_separator)

            return self._marker(name)

        return PLACEHOLDER_PATTERN.sub(replacer, template_body)

    def _marker(self, name: str) -> str:
        return self.unresolved_marker.replace("{name}", name)


def resolve(
    template_body: str,
    schema: TemplateSchema,
    values: "Mapping[str, Any] | FieldValues | None",
) -> str:
    """Convenience function to resolve placeholders with the default policy"""
    return PlaceholderResolver().resolve(template_body, schema, values)
