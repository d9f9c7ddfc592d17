"""Render inferred declarations as TypeScript source text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final, Optional

from .model_types import ANY_ARRAY, Declaration, TypeDescriptor
from .naming import ROOT_DECLARATION_NAME

EMPTY_ARRAY_COMMENT: Final = "// API 返回空数组"

_BLOCK_SEPARATOR = "\n\n"
_FIELD_INDENT = "  "


def render_declaration(declaration: Declaration) -> str:
    """Render one declaration as an ``interface`` block.

    Args:
        declaration (Declaration): Declaration to render.

    Returns:
        str: ``interface`` block without a trailing newline.
    """
    lines = [f"interface {declaration.name} {{"]
    for field in declaration.fields:
        lines.append(f"{_FIELD_INDENT}{field.name}: {field.type.render()};")
    lines.append("}")
    return "\n".join(lines)


def render_alias(descriptor: TypeDescriptor) -> str:
    """Render the root ``type ApiResponse = ...;`` alias."""
    return f"type {ROOT_DECLARATION_NAME} = {descriptor.render()};"


def render_empty_array() -> str:
    """Render the result for a document that is an empty array."""
    return f"{EMPTY_ARRAY_COMMENT}\n{render_alias(ANY_ARRAY)}"


def render_document(declarations: Iterable[Declaration], *, alias: Optional[str] = None) -> str:
    """Join declaration blocks and an optional trailing alias.

    Args:
        declarations (Iterable[Declaration]): Declarations in emission order.
        alias (Optional[str]): Rendered alias line appended after the declarations.

    Returns:
        str: Complete declaration text, blocks separated by a blank line.
    """
    blocks = [render_declaration(declaration) for declaration in declarations]
    if alias is not None:
        blocks.append(alias)
    return _BLOCK_SEPARATOR.join(blocks)
