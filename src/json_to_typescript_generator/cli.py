"""Command line interface for JSON to TypeScript type generation."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .converter import convert_api_to_types, convert_file_to_types
from .examples import EXAMPLE_URLS_BY_METHOD
from .fetcher import ConversionError
from .loader import DocumentLoadError
from .logging_config import configure_logging
from .model_types import ConversionResult
from .request_types import HTTP_METHODS, ApiRequest, parse_header
from .settings import ConverterSettings
from .writer import WriteError, write_types


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="json-to-typescript-generator",
        description="Infer TypeScript interfaces from a JSON API response",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Endpoint returning JSON; https:// is assumed")
    source.add_argument("--input", help="Path to a saved JSON (or YAML) payload")
    source.add_argument(
        "--examples",
        action="store_true",
        help="List example endpoints for --method and exit",
    )
    parser.add_argument(
        "--method",
        default="GET",
        type=str.upper,
        choices=HTTP_METHODS,
        help="HTTP method used with --url",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="KEY: VALUE",
        help="Extra request header; may be repeated",
    )
    parser.add_argument("--output", help="Write declarations to this file instead of stdout")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace --output when it already exists",
    )
    parser.add_argument("--log-level", help="Log level for diagnostics written to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.examples:
        for url in EXAMPLE_URLS_BY_METHOD[args.method]:
            print(url)
        return 0

    settings = ConverterSettings()
    configure_logging(args.log_level or settings.log_level)

    try:
        result = _run(args, settings=settings)
        if args.output:
            write_types(Path(args.output), result.types, overwrite=bool(args.overwrite))
        else:
            print(result.types)
    except (ConversionError, DocumentLoadError, WriteError) as exc:
        parser.error(str(exc))
        return 2

    return 0


def _run(args: argparse.Namespace, *, settings: ConverterSettings) -> ConversionResult:
    if args.input:
        return convert_file_to_types(Path(args.input))

    try:
        headers = [parse_header(text) for text in args.header]
        request = ApiRequest(url=args.url, method=args.method, headers=headers)
    except (ValueError, ValidationError) as exc:
        raise ConversionError(str(exc)) from exc
    return asyncio.run(convert_api_to_types(request, settings=settings))


if __name__ == "__main__":
    raise SystemExit(main())
