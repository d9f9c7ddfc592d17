"""Infer structural type declarations from decoded JSON values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
import logging
from typing import Optional

from .json_types import UNDEFINED, JSONObject, JSONValue
from .model_types import (
    ANY_ARRAY,
    ArrayOf,
    Declaration,
    FieldDecl,
    NamedReference,
    PrimitiveType,
    TypeDescriptor,
)
from .naming import declaration_name, element_declaration_name

logger = logging.getLogger(__name__)


def classify_value(value: JSONValue, hint: Optional[str] = None) -> TypeDescriptor:
    """Describe the type of one JSON value.

    Args:
        value (JSONValue): Decoded JSON value, or ``UNDEFINED`` for an absent one.
        hint (Optional[str]): Key the value was found under; names object types.

    Returns:
        TypeDescriptor: Primitive, named reference or array descriptor.
    """
    return describe_value(
        value,
        object_name=declaration_name(hint),
        element_name=element_declaration_name(hint),
    )


def describe_value(value: JSONValue, *, object_name: str, element_name: str) -> TypeDescriptor:
    """Describe a value with explicit names for objects and array elements.

    Array elements are described with ``element_name`` at every nesting level,
    so ``[[{...}]]`` under ``rows`` becomes ``RowType[][]``.
    """
    if value is None:
        return PrimitiveType("null")
    if value is UNDEFINED:
        return PrimitiveType("undefined")
    if isinstance(value, bool):
        return PrimitiveType("boolean")
    if isinstance(value, (int, float)):
        return PrimitiveType("number")
    if isinstance(value, str):
        return PrimitiveType("string")
    if isinstance(value, list):
        return _describe_array(value, element_name=element_name)
    if isinstance(value, Mapping):
        return NamedReference(object_name)
    return PrimitiveType("any")


def _describe_array(items: list[JSONValue], *, element_name: str) -> TypeDescriptor:
    if not items:
        return ANY_ARRAY

    # Keyed by rendered text so distinct forms keep first-seen order.
    forms: dict[str, TypeDescriptor] = {}
    for item in items:
        descriptor = describe_value(item, object_name=element_name, element_name=element_name)
        forms.setdefault(descriptor.render(), descriptor)

    if len(forms) != 1:
        return ANY_ARRAY
    (element,) = forms.values()
    return ArrayOf(element)


def iter_referenced_samples(
    descriptor: TypeDescriptor,
    value: JSONValue,
) -> Iterator[tuple[str, JSONObject]]:
    """Yield ``(declaration name, sample object)`` for references in a descriptor.

    Arrays contribute the references of their first element, which is the
    object a declaration for a uniform array is built from.
    """
    if isinstance(descriptor, NamedReference):
        if isinstance(value, Mapping):
            yield descriptor.name, value
        return
    if isinstance(descriptor, ArrayOf) and isinstance(value, list) and value:
        yield from iter_referenced_samples(descriptor.element, value[0])


@dataclass
class _InferenceContext:
    declarations: list[Declaration] = field(default_factory=list)
    registry: set[str] = field(default_factory=set)


class TypeInferrer:
    """Build de-duplicated interface declarations for one JSON document.

    Each ``build_*`` call allocates a fresh registry, so an instance can be
    shared between independent conversions.
    """

    def build_declarations(self, value: JSONObject, name: str) -> list[Declaration]:
        """Build the declaration for ``value`` and everything it references.

        Args:
            value (JSONObject): Object to describe.
            name (str): Name of the top-level declaration.

        Returns:
            list[Declaration]: Declarations ordered so that every referenced
            declaration precedes the one referencing it; ``name`` is last.
        """
        context = _InferenceContext()
        context.registry.add(name)
        self._build_object(value=value, name=name, context=context)
        return context.declarations

    def build_referenced_declarations(
        self,
        descriptor: TypeDescriptor,
        value: JSONValue,
    ) -> list[Declaration]:
        """Build the declarations a standalone descriptor refers to."""
        context = _InferenceContext()
        self._declare_references(descriptor=descriptor, value=value, context=context)
        return context.declarations

    def _build_object(self, *, value: JSONObject, name: str, context: _InferenceContext) -> None:
        fields: list[FieldDecl] = []
        for key, child in value.items():
            descriptor = classify_value(child, key)
            self._declare_references(descriptor=descriptor, value=child, context=context)
            fields.append(FieldDecl(name=key, type=descriptor))

        context.declarations.append(Declaration(name=name, fields=tuple(fields)))

    def _declare_references(
        self,
        *,
        descriptor: TypeDescriptor,
        value: JSONValue,
        context: _InferenceContext,
    ) -> None:
        for reference_name, sample in iter_referenced_samples(descriptor, value):
            if reference_name in context.registry:
                logger.debug(
                    "reusing existing declaration",
                    extra={"data": {"declaration": reference_name}},
                )
                continue
            # Registered before recursing so a repeated key cannot re-enter this name.
            context.registry.add(reference_name)
            self._build_object(value=sample, name=reference_name, context=context)
