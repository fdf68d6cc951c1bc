#!/usr/bin/env python3
"""
Command-line theme.json generator.

Run it after a front-end build to regenerate theme.json from the
theme config:

    chuk-theme-json --file theme.config.yaml --tokens tokens.yaml
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from chuk_mcp_theme_json.constants import (
    DEFAULT_INDENT,
    DEFAULT_SCHEMA_URL,
    DEFAULT_SOURCE_FILE,
    DEFAULT_TARGET_FILE,
    DEFAULT_VERSION,
)
from chuk_mcp_theme_json.generator import ThemeJsonGenerator
from chuk_mcp_theme_json.models import GeneratorOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Generate theme.json from design tokens")
    parser.add_argument(
        "--path",
        default=None,
        help="Base directory (default: current directory)",
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_SOURCE_FILE,
        help=f"Theme config file (default: {DEFAULT_SOURCE_FILE})",
    )
    parser.add_argument(
        "--target",
        default=DEFAULT_TARGET_FILE,
        help=f"Output file (default: {DEFAULT_TARGET_FILE})",
    )
    parser.add_argument(
        "--tokens",
        default=None,
        help="Design-token document referenced by !token / !transform",
    )
    parser.add_argument(
        "--schema",
        default=DEFAULT_SCHEMA_URL,
        help="$schema URL written to the document",
    )
    parser.add_argument(
        "--schema-version",
        type=int,
        default=DEFAULT_VERSION,
        help=f"theme.json version (default: {DEFAULT_VERSION})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_INDENT,
        help=f"JSON indentation (default: {DEFAULT_INDENT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Generate theme.json.

    Returns:
        Exit code (0 on success, 1 on failure)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    options = GeneratorOptions().merged(
        path=args.path,
        file=args.file,
        target=args.target,
        tokens=args.tokens,
        schema_url=args.schema,
        version=args.schema_version,
        indent=args.indent,
    )

    output = ThemeJsonGenerator(options).generate()
    if output is None:
        return 1

    logger.debug(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
