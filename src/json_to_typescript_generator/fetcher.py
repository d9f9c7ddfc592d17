"""Fetch a JSON payload from a user-supplied HTTP endpoint."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Optional, cast

import httpx

from .json_types import JSONValue
from .request_types import ApiRequest, Header, headers_to_record
from .settings import ConverterSettings

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

_JSON_CONTENT_TYPE = "application/json"
_SECURE_SCHEME = "https://"
_KNOWN_SCHEMES: tuple[str, ...] = ("http://", "https://")


class ConversionError(RuntimeError):
    """Raised when a payload cannot be fetched for conversion."""


class InvalidUrlError(ConversionError):
    """Raised when the request URL is missing or blank."""


class HttpStatusError(ConversionError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"API request failed: {status_code} {reason}".rstrip())
        self.status_code = status_code


class NonJsonResponseError(ConversionError):
    """Raised when the response content type is not JSON."""


class ResponseDecodeError(ConversionError):
    """Raised when a JSON response body cannot be decoded."""


class NetworkError(ConversionError):
    """Raised when the request fails below the HTTP layer."""


def normalize_url(url: str) -> str:
    """Trim the URL and default to ``https://`` when no scheme is given.

    Args:
        url (str): Raw URL as typed by the caller.

    Returns:
        str: URL with an explicit ``http://`` or ``https://`` scheme.
    """
    stripped = url.strip() if url else ""
    if not stripped:
        raise InvalidUrlError("Please provide a valid API URL")
    candidate = stripped if stripped.startswith(_KNOWN_SCHEMES) else f"{_SECURE_SCHEME}{stripped}"
    try:
        httpx.URL(candidate)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(f"Invalid API URL {stripped!r}: {exc}") from exc
    return candidate


def build_request_headers(headers: Iterable[Header]) -> dict[str, str]:
    """Merge caller headers over the default JSON content type."""
    return {**DEFAULT_HEADERS, **headers_to_record(headers)}


async def fetch_json(
    request: ApiRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[ConverterSettings] = None,
) -> JSONValue:
    """Perform one request and return the decoded JSON body.

    Args:
        request (ApiRequest): Endpoint, method and headers to use.
        client (Optional[httpx.AsyncClient]): Client to send through; it is
            left open. When omitted a client is created and closed here.
        settings (Optional[ConverterSettings]): Timeout and redirect settings
            for an owned client.

    Returns:
        JSONValue: Decoded response body.
    """
    url = normalize_url(request.url)
    headers = build_request_headers(request.headers)
    logger.info(
        "fetching payload",
        extra={"data": {"method": request.method, "url": url}},
    )

    if client is not None:
        response = await _send(client, method=request.method, url=url, headers=headers)
    else:
        resolved = settings or ConverterSettings()
        async with httpx.AsyncClient(
            timeout=resolved.timeout_seconds,
            follow_redirects=resolved.follow_redirects,
        ) as owned_client:
            response = await _send(owned_client, method=request.method, url=url, headers=headers)

    return _decode_json_response(response)


async def _send(
    client: httpx.AsyncClient,
    *,
    method: str,
    url: str,
    headers: dict[str, str],
) -> httpx.Response:
    try:
        response = await client.request(method, url, headers=headers)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(f"Invalid API URL {url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        logger.warning(
            "payload request failed",
            extra={"data": {"url": url, "error_type": type(exc).__name__, "error": str(exc)}},
        )
        raise NetworkError(f"API request failed: {exc}") from exc
    return response


def _decode_json_response(response: httpx.Response) -> JSONValue:
    if not response.is_success:
        logger.warning(
            "payload request returned error status",
            extra={"data": {"status": response.status_code, "url": str(response.url)}},
        )
        raise HttpStatusError(response.status_code, response.reason_phrase)

    content_type = response.headers.get("content-type")
    if not content_type or _JSON_CONTENT_TYPE not in content_type.lower():
        raise NonJsonResponseError(
            f"API response is not JSON (content-type: {content_type or 'missing'})"
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(f"Failed to decode API response as JSON: {exc}") from exc
    return cast(JSONValue, payload)


__all__ = [
    "ConversionError",
    "DEFAULT_HEADERS",
    "HttpStatusError",
    "InvalidUrlError",
    "NetworkError",
    "NonJsonResponseError",
    "ResponseDecodeError",
    "build_request_headers",
    "fetch_json",
    "normalize_url",
]
