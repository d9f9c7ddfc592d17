"""Naming helpers for generated interface declarations."""

from __future__ import annotations

import re
from typing import Final, Optional

ROOT_DECLARATION_NAME: Final = "ApiResponse"
ROOT_ITEM_DECLARATION_NAME: Final = "ApiResponseItem"

_DECLARATION_SUFFIX = "Type"
_DEFAULT_OBJECT_BASE = "Object"
_DEFAULT_ITEM_BASE = "Item"

_NON_ALPHANUMERIC_RE = re.compile(r"[^A-Za-z0-9]")


def declaration_name(hint: Optional[str], *, default: str = _DEFAULT_OBJECT_BASE) -> str:
    """Convert a key into an interface name.

    Every character outside ``[A-Za-z0-9]`` is dropped, the first remaining
    character is uppercased and ``Type`` is appended. The same key always
    yields the same name.

    Args:
        hint (Optional[str]): Object key or field name the value was found under.
        default (str): Base used when the hint is missing or strips to nothing.

    Returns:
        str: Generated declaration name, e.g. ``user_profile`` -> ``UserprofileType``.
    """
    cleaned = _NON_ALPHANUMERIC_RE.sub("", hint or "")
    if not cleaned:
        cleaned = default
    return f"{cleaned[0].upper()}{cleaned[1:]}{_DECLARATION_SUFFIX}"


def singular_hint(hint: str) -> str:
    """Strip one trailing ``s`` from a raw array field name."""
    if hint.endswith("s"):
        return hint[:-1]
    return hint


def element_declaration_name(hint: Optional[str]) -> str:
    """Name the declaration describing the objects inside an array field."""
    if hint is None:
        return declaration_name(None, default=_DEFAULT_ITEM_BASE)
    return declaration_name(singular_hint(hint), default=_DEFAULT_ITEM_BASE)
