"""Shared helpers for fixture-driven tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import ParamSpec, TypeVar

import pytest

_FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "json_payloads"
_P = ParamSpec("_P")
_R = TypeVar("_R")


def fixture_dir() -> Path:
    """Return the JSON payload fixtures directory."""
    return _FIXTURE_DIR


def iter_fixture_paths() -> list[Path]:
    """Return all JSON payload fixture paths sorted by name."""
    return [path for path in sorted(_FIXTURE_DIR.glob("*.json")) if path.is_file()]


def expected_types_path(fixture_path: Path) -> Path:
    """Return the expected ``.ts`` output stored next to a payload fixture."""
    return fixture_path.with_suffix(".ts")


def read_expected_types(fixture_path: Path) -> str:
    """Read expected declarations without the file's trailing newline."""
    return expected_types_path(fixture_path).read_text(encoding="utf-8").rstrip("\n")


def parametrize_fixtures() -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Parametrize a test over all fixture paths."""

    def _decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        decorator: Callable[[Callable[_P, _R]], Callable[_P, _R]]
        decorator = pytest.mark.parametrize(
            "fixture_path",
            iter_fixture_paths(),
            ids=lambda path: path.name,
        )
        return decorator(func)

    return _decorator
