"""Loading of saved sample payloads from disk."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from .json_types import JSONValue

_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class DocumentLoadError(RuntimeError):
    """Raised when a saved payload cannot be loaded."""


def load_json_document(path: Path) -> JSONValue:
    """Load a sample payload saved as JSON (or YAML).

    Args:
        path (Path): File holding one JSON document; ``.yaml``/``.yml`` files
            are parsed with ``yaml.safe_load``.

    Returns:
        JSONValue: Decoded document.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in _YAML_SUFFIXES:
                payload = yaml.safe_load(handle)
            else:
                payload = json.load(handle)
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read payload file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Failed to parse YAML in {path}: {exc}") from exc
    except ValueError as exc:
        raise DocumentLoadError(f"Failed to parse JSON in {path}: {exc}") from exc

    payload_value: JSONValue = payload
    return payload_value
