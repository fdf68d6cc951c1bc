#!/usr/bin/env python3
"""
Async theme.json MCP Server using chuk-mcp-server

This server exposes the design-token transform engine as MCP tools.

The server provides tools for:
- Flattening nested design tokens into dash-joined keys
- Shaping tokens into palette, font size and spacing size options
- Formatting token slugs as display labels
- Generating theme.json files from theme configs under a base directory
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theme_json.tools import register_theme_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-theme-json"


def create_server(base_path: Path | None = None) -> ChukMCPServer:
    """
    Create the MCP server with all theme tools registered.

    Args:
        base_path: Directory theme_generate resolves configs and output
            against (default: current directory)

    Returns:
        The configured server
    """
    base_path = (base_path or Path.cwd()).resolve()

    mcp = ChukMCPServer(SERVER_NAME)
    tools = register_theme_tools(mcp, base_path)

    logger.info("CHUK theme.json MCP Server initialized")
    logger.info(f"  Base path: {base_path}")
    logger.debug(f"  Tools: {', '.join(sorted(tools))}")
    return mcp
