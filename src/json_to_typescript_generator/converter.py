"""High-level conversion of JSON payloads into TypeScript declarations."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Optional

import httpx

from .codegen import render_alias, render_document, render_empty_array
from .fetcher import ConversionError, fetch_json
from .inference import TypeInferrer, describe_value
from .json_types import JSONValue
from .loader import DocumentLoadError, load_json_document
from .model_types import ArrayOf, ConversionResult, NamedReference, RequestConfig
from .naming import ROOT_DECLARATION_NAME, ROOT_ITEM_DECLARATION_NAME
from .request_types import ApiRequest, headers_to_record
from .settings import ConverterSettings

logger = logging.getLogger(__name__)


def convert_json_to_types(document: JSONValue) -> str:
    """Infer TypeScript declarations for one decoded JSON document.

    Args:
        document (JSONValue): Fully decoded payload. It is never mutated.

    Returns:
        str: Declaration blocks, nested ones first, followed by the root
        ``type ApiResponse = ...;`` alias unless the document is an object.
    """
    inferrer = TypeInferrer()

    if isinstance(document, Mapping):
        declarations = inferrer.build_declarations(document, ROOT_DECLARATION_NAME)
        return render_document(declarations)

    if isinstance(document, list):
        if not document:
            return render_empty_array()
        first = document[0]
        if isinstance(first, Mapping):
            declarations = inferrer.build_declarations(first, ROOT_ITEM_DECLARATION_NAME)
            root = ArrayOf(NamedReference(ROOT_ITEM_DECLARATION_NAME))
            return render_document(declarations, alias=render_alias(root))

    descriptor = describe_value(
        document,
        object_name=ROOT_DECLARATION_NAME,
        element_name=ROOT_ITEM_DECLARATION_NAME,
    )
    declarations = inferrer.build_referenced_declarations(descriptor, document)
    return render_document(declarations, alias=render_alias(descriptor))


async def convert_api_to_types(
    request: ApiRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[ConverterSettings] = None,
) -> ConversionResult:
    """Fetch a payload and infer declarations for it.

    Args:
        request (ApiRequest): Endpoint, method and headers to fetch with.
        client (Optional[httpx.AsyncClient]): Optional client to send through.
        settings (Optional[ConverterSettings]): Settings for an owned client.

    Returns:
        ConversionResult: Declaration text and the effective request config.
    """
    document = await fetch_json(request, client=client, settings=settings)
    types = convert_json_to_types(document)
    logger.info(
        "converted payload",
        extra={"data": {"method": request.method, "url": request.url, "chars": len(types)}},
    )
    return ConversionResult(
        types=types,
        request_config=RequestConfig(
            method=request.method,
            headers=headers_to_record(request.headers),
        ),
    )


async def convert_url_to_types(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> ConversionResult:
    """Convert the payload of a plain ``GET`` request to ``url``."""
    return await convert_api_to_types(ApiRequest(url=url), client=client)


def convert_file_to_types(path: Path) -> ConversionResult:
    """Infer declarations for a payload saved on disk."""
    document = load_json_document(path)
    return ConversionResult(types=convert_json_to_types(document))


__all__ = [
    "ConversionError",
    "DocumentLoadError",
    "convert_api_to_types",
    "convert_file_to_types",
    "convert_json_to_types",
    "convert_url_to_types",
]
