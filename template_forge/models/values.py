"""Field value store for a single render request"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional


class FieldValues(Mapping):
    """Read-only mapping of field name to the raw value supplied by a caller.

    Values are copied once at construction and never checked here; the
    validator decides what they mean. A value of ``None`` counts as absent.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        data = {k: v for k, v in dict(values or {}).items() if v is not None}
        self._values = MappingProxyType(data)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldValues({dict(self._values)!r})"

    def to_dict(self) -> dict:
        return dict(self._values)

    @classmethod
    def of(cls, values: "Mapping[str, Any] | FieldValues | None") -> "FieldValues":
        """Wrap a plain mapping, passing an existing store through unchanged"""
        if isinstance(values, FieldValues):
            return values
        return cls(values)
