"""Internal datatypes for type inference and conversion output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

PrimitiveName = Literal["string", "number", "boolean", "null", "undefined", "any"]


@dataclass(frozen=True)
class PrimitiveType:
    """A scalar type rendered by its bare name."""

    name: PrimitiveName

    def render(self) -> str:
        """Return the field type text."""
        return self.name


@dataclass(frozen=True)
class NamedReference:
    """A reference to a generated interface declaration."""

    name: str

    def render(self) -> str:
        """Return the field type text."""
        return self.name


@dataclass(frozen=True)
class ArrayOf:
    """A homogeneous array of ``element``."""

    element: TypeDescriptor

    def render(self) -> str:
        """Return the field type text."""
        return f"{self.element.render()}[]"


type TypeDescriptor = Union[PrimitiveType, NamedReference, ArrayOf]

ANY_ARRAY = ArrayOf(PrimitiveType("any"))


@dataclass(frozen=True)
class FieldDecl:
    """One ``key: type`` line of an interface."""

    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class Declaration:
    """A named structural type with fields in source key order."""

    name: str
    fields: tuple[FieldDecl, ...]


@dataclass(frozen=True)
class RequestConfig:
    """Request settings echoed back alongside the generated types."""

    method: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversionResult:
    """Generated declaration text plus the request that produced it."""

    types: str
    request_config: Optional[RequestConfig] = None
