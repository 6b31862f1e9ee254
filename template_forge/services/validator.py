"""Validation of supplied field values against a template schema"""

import logging
from typing import Any, List, Mapping

from template_forge.models.result import ErrorKind, Violation
from template_forge.models.template import TemplateSchema
from template_forge.models.values import FieldValues
from template_forge.services.coercion import ValueCoercionError, coerce_value

logger = logging.getLogger(__name__)


class TemplateValidator:
    """Checks field values against a schema and reports every problem at once"""

    def validate(
        self,
        schema: TemplateSchema,
        values: "Mapping[str, Any] | FieldValues | None",
    ) -> List[Violation]:
        """
        Validate values against the schema.

        Violations are returned in field declaration order, whatever order
        the caller supplied the values in. Validation never stops at the
        first problem.

        Args:
            schema: Template schema
            values: Raw values keyed by field name

        Returns:
            List of violations (empty if valid)
        """
        values = FieldValues.of(values)
        violations: List[Violation] = []

        for spec in schema.fields:
            raw = values.get(spec.name)

            if raw is None:
                if spec.required:
                    label = f" ({spec.label})" if spec.label else ""
                    violations.append(Violation(
                        field_name=spec.name,
                        reason=ErrorKind.MISSING_REQUIRED,
                        message=f"Missing required field: {spec.name}{label}",
                    ))
                continue

            try:
                coerce_value(spec, raw)
            except ValueCoercionError as e:
                violations.append(Violation(
                    field_name=spec.name,
                    reason=e.reason,
                    message=str(e),
                ))

        extra = [name for name in values if schema.field(name) is None]
        if extra:
            logger.debug(f"Ignoring values for undeclared fields in '{schema.name}': {', '.join(extra)}")

        return violations


def validate(
    schema: TemplateSchema,
    values: "Mapping[str, Any] | FieldValues | None",
) -> List[Violation]:
    """Convenience function to validate values against a schema"""
    return TemplateValidator().validate(schema, values)
