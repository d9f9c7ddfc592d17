"""Request descriptors accepted by the converter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

HTTP_METHODS: tuple[str, ...] = get_args(HttpMethod)


class Header(BaseModel):
    """One caller-supplied header row; blank rows are allowed and ignored."""

    model_config = ConfigDict(frozen=True)

    key: str = ""
    value: str = ""


class ApiRequest(BaseModel):
    """Endpoint, method and headers to fetch a JSON payload from."""

    model_config = ConfigDict(frozen=True)

    url: str
    method: HttpMethod = "GET"
    headers: list[Header] = []

    @field_validator("method", mode="before")
    @classmethod
    def uppercase_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def headers_to_record(headers: Iterable[Header]) -> dict[str, str]:
    """Collapse header rows into a mapping.

    Keys and values are trimmed; rows where either is blank are dropped and a
    later row replaces an earlier one with the same key.

    Args:
        headers (Iterable[Header]): Header rows in caller order.

    Returns:
        dict[str, str]: Header mapping.
    """
    record: dict[str, str] = {}
    for header in headers:
        key = header.key.strip()
        value = header.value.strip()
        if key and value:
            record[key] = value
    return record


def parse_header(text: str) -> Header:
    """Parse a ``Key: Value`` string into a header row."""
    key, separator, value = text.partition(":")
    if not separator or not key.strip():
        raise ValueError(f"Header must look like 'Key: Value', got {text!r}")
    return Header(key=key.strip(), value=value.strip())
