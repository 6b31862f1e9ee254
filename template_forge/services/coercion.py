"""Conversion of raw field values into typed values and back into text.

Every value crosses the boundary untyped (JSON, YAML, CLI strings). Before the
engine trusts a value it is converted into the typed form for its field kind:

- string: ``str``
- enum: ``str`` (member of the allowed values)
- number: ``int`` or ``float``
- boolean: ``bool``
- list-of-string: ``tuple`` of ``str``
- date: ``datetime.date``

``format_value`` turns a typed value into the text placed in a document.
"""

import math
import re
from datetime import date, datetime
from typing import Any

from template_forge.models.result import ErrorKind
from template_forge.models.template import FieldKind, FieldSpec

NUMBER_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


class ValueCoercionError(Exception):
    """A value does not conform to the kind its field declares."""

    def __init__(self, reason: ErrorKind, message: str):
        super().__init__(message)
        self.reason = reason


def coerce_value(spec: FieldSpec, raw: Any) -> Any:
    """
    Convert a raw value into the typed value for ``spec.kind``.

    Args:
        spec: Field the value was supplied for
        raw: Untyped value as received from the caller

    Returns:
        Typed value

    Raises:
        ValueCoercionError: If the value does not conform to the field kind
    """
    kind = spec.kind

    if kind == FieldKind.STRING:
        return _coerce_string(spec, raw)
    if kind == FieldKind.ENUM:
        return _coerce_enum(spec, raw)
    if kind == FieldKind.NUMBER:
        return _coerce_number(spec, raw)
    if kind == FieldKind.BOOLEAN:
        return _coerce_boolean(spec, raw)
    if kind == FieldKind.LIST_OF_STRING:
        return _coerce_list(spec, raw)
    if kind == FieldKind.DATE:
        return _coerce_date(spec, raw)

    raise ValueCoercionError(ErrorKind.TYPE_MISMATCH, f"Unsupported field kind: {kind}")


def _coerce_string(spec: FieldSpec, raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueCoercionError(
            ErrorKind.TYPE_MISMATCH,
            f"Field '{spec.name}' expects text, got {type(raw).__name__}",
        )
    if spec.required and not raw.strip():
        raise ValueCoercionError(
            ErrorKind.MISSING_REQUIRED,
            f"Missing required field: {spec.name}" + (f" ({spec.label})" if spec.label else ""),
        )
    return raw


def _coerce_enum(spec: FieldSpec, raw: Any) -> str:
    allowed = spec.allowed_values or ()
    if not isinstance(raw, str) or raw not in allowed:
        raise ValueCoercionError(
            ErrorKind.INVALID_ENUM_VALUE,
            f"Field '{spec.name}' must be one of {', '.join(allowed)}; got {_describe(raw)}",
        )
    return raw


def _coerce_number(spec: FieldSpec, raw: Any):
    # bool is an int subclass but never a number here
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise _not_a_number(spec, raw)

    if isinstance(raw, str):
        literal = raw.strip()
        if not NUMBER_LITERAL.fullmatch(literal):
            raise _not_a_number(spec, raw)
        try:
            value = float(literal) if any(c in literal for c in ".eE") else int(literal)
        except ValueError:
            # int() refuses literals past sys.get_int_max_str_digits()
            raise _out_of_range(spec)
        if isinstance(value, float) and not math.isfinite(value):
            raise _out_of_range(spec)
        return value

    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise _not_a_number(spec, raw)
        return raw

    try:
        str(raw)
    except ValueError:
        raise _out_of_range(spec)
    return raw


def _not_a_number(spec: FieldSpec, raw: Any) -> ValueCoercionError:
    return ValueCoercionError(
        ErrorKind.TYPE_MISMATCH,
        f"Field '{spec.name}' expects a finite number, got {_describe(raw)}",
    )


def _out_of_range(spec: FieldSpec) -> ValueCoercionError:
    return ValueCoercionError(
        ErrorKind.TYPE_MISMATCH,
        f"Field '{spec.name}' is out of range: the number is too large to represent",
    )


def _coerce_boolean(spec: FieldSpec, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw == TRUE_LITERAL:
        return True
    if raw == FALSE_LITERAL:
        return False
    raise ValueCoercionError(
        ErrorKind.TYPE_MISMATCH,
        f"Field '{spec.name}' expects {TRUE_LITERAL} or {FALSE_LITERAL}, got {_describe(raw)}",
    )


def _coerce_list(spec: FieldSpec, raw: Any) -> tuple:
    if not isinstance(raw, (list, tuple)) or not all(isinstance(item, str) for item in raw):
        raise ValueCoercionError(
            ErrorKind.TYPE_MISMATCH,
            f"Field '{spec.name}' expects a list of strings, got {_describe(raw)}",
        )
    return tuple(raw)


def _coerce_date(spec: FieldSpec, raw: Any) -> date:
    if isinstance(raw, date) and not isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and ISO_DATE.fullmatch(raw.strip()):
        try:
            return date.fromisoformat(raw.strip())
        except ValueError:
            pass
    raise ValueCoercionError(
        ErrorKind.INVALID_DATE_FORMAT,
        f"Field '{spec.name}' expects an ISO-8601 date (YYYY-MM-DD), got {_describe(raw)}",
    )


def format_value(kind: FieldKind, value: Any, list_separator: str = ", ") -> str:
    """Render a typed value as document text"""
    if kind == FieldKind.BOOLEAN:
        return TRUE_LITERAL if value else FALSE_LITERAL
    if kind == FieldKind.LIST_OF_STRING:
        return list_separator.join(value)
    if kind == FieldKind.DATE:
        return value.isoformat()
    return str(value)


def _describe(raw: Any) -> str:
    # repr() of a huge int (or a container holding one) raises ValueError
    try:
        return repr(raw)
    except ValueError:
        return f"an oversized {type(raw).__name__}"
