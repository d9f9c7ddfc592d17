"""Infer TypeScript type declarations from JSON API responses."""

from __future__ import annotations

from .cli import main
from .converter import (
    convert_api_to_types,
    convert_file_to_types,
    convert_json_to_types,
    convert_url_to_types,
)
from .fetcher import ConversionError
from .model_types import ConversionResult, RequestConfig
from .request_types import ApiRequest, Header

__all__ = [
    "ApiRequest",
    "ConversionError",
    "ConversionResult",
    "Header",
    "RequestConfig",
    "convert_api_to_types",
    "convert_file_to_types",
    "convert_json_to_types",
    "convert_url_to_types",
    "main",
]
