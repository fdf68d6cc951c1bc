#!/usr/bin/env python3
"""
Entry point for the CHUK theme.json MCP Server.

    chuk-mcp-theme-json --path ./wp-content/themes/my-theme
    chuk-mcp-theme-json --transport http --port 8010
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="CHUK theme.json MCP Server")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Theme directory theme_generate reads from and writes to (default: cwd)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server on the requested transport."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    if args.path is not None and not args.path.is_dir():
        logger.error(f"Theme directory does not exist: {args.path}")
        return 1

    from chuk_mcp_theme_json.async_server import create_server

    mcp = create_server(args.path)

    if args.transport == "stdio":
        logger.info("Starting CHUK theme.json MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK theme.json MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
