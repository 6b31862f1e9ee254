"""Validation and rendering result models"""

from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Reasons a supplied value can be rejected"""
    MISSING_REQUIRED = "missing_required"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_DATE_FORMAT = "invalid_date_format"


class Violation(BaseModel):
    """A single mismatch between supplied values and the template schema"""
    model_config = ConfigDict(frozen=True)

    field_name: str
    reason: ErrorKind
    message: str = ""


class Rendered(BaseModel):
    """A finished document"""
    model_config = ConfigDict(frozen=True)

    status: Literal["rendered"] = "rendered"
    document: str

    @property
    def ok(self) -> bool:
        return True


class Rejected(BaseModel):
    """Values failed validation; nothing was rendered"""
    model_config = ConfigDict(frozen=True)

    status: Literal["rejected"] = "rejected"
    violations: List[Violation]

    @property
    def ok(self) -> bool:
        return False


RenderResult = Annotated[Union[Rendered, Rejected], Field(discriminator="status")]
