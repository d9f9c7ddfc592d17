"""Filesystem writer for generated declaration text."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class WriteError(RuntimeError):
    """Raised when output files cannot be written."""


def write_types(path: Path, types: str, *, overwrite: bool = False) -> Path:
    """Write generated declarations to a ``.ts`` file.

    Args:
        path (Path): Destination file.
        types (str): Declaration text as produced by the converter.
        overwrite (bool): Whether an existing file may be replaced.

    Returns:
        Path: The written file.
    """
    if path.exists() and not overwrite:
        raise WriteError(f"Output file already exists: {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{types}\n", encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {path}: {exc}") from exc

    logger.info("wrote type declarations", extra={"data": {"path": str(path)}})
    return path
