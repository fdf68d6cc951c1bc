"""
Theme tools - MCP tools for transforming tokens and generating theme.json.

Tools for flattening token trees, shaping them into palette / size
options, formatting labels and writing theme.json files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_theme_json.core import flatten_tokens, title_case, transform
from chuk_mcp_theme_json.generator import ThemeJsonGenerator
from chuk_mcp_theme_json.models import GeneratorOptions

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theme_tools(
    mcp: ChukMCPServer,
    base_path: Path,
) -> dict[str, Any]:
    """
    Register theme tools with the MCP server.

    Args:
        mcp: The MCP server instance
        base_path: Directory theme_generate reads from and writes to

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theme_transform(
        kind: str,
        tokens: dict[str, Any] | None = None,
        only: list[str] | None = None,
    ) -> str:
        """
        Transform design tokens into a theme.json fragment.

        Args:
            kind: 'plain', 'palette', 'fontSizes' or 'spacingSizes'
            tokens: Nested token data (e.g. a Tailwind colors object)
            only: Optional slugs to keep

        Returns:
            JSON string with the transformed fragment

        Example:
            theme_transform(kind="palette", tokens={"red": "#ff0000"})
        """
        try:
            result = transform(kind, tokens, only)
            return json.dumps({"status": "success", "kind": kind, "result": result})
        except Exception as e:
            logger.exception("Failed to transform tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_transform"] = theme_transform

    @mcp.tool  # type: ignore[arg-type]
    async def theme_flatten(tokens: dict[str, Any]) -> str:
        """
        Flatten nested design tokens into dash-joined keys.

        Args:
            tokens: Nested token data

        Returns:
            JSON string with the flat token map

        Example:
            theme_flatten(tokens={"blue": {"light": "#aaf"}})
        """
        try:
            flat = flatten_tokens(tokens)
            return json.dumps({"status": "success", "tokens": flat, "count": len(flat)})
        except Exception as e:
            logger.exception("Failed to flatten tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_flatten"] = theme_flatten

    @mcp.tool  # type: ignore[arg-type]
    async def theme_title_case(slug: str) -> str:
        """
        Format a token slug as a display label.

        Args:
            slug: Token slug (e.g. 'state-of-the-art')

        Returns:
            JSON string with the label

        Example:
            theme_title_case(slug="blue-grey_dark")
        """
        try:
            return json.dumps({"status": "success", "slug": slug, "name": title_case(slug)})
        except Exception as e:
            logger.exception("Failed to format label")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_title_case"] = theme_title_case

    @mcp.tool  # type: ignore[arg-type]
    async def theme_generate(
        file: str | None = None,
        target: str | None = None,
        tokens: str | None = None,
        schema: str | None = None,
        version: int | None = None,
    ) -> str:
        """
        Generate a theme.json file from a theme config.

        Paths are relative to the server's working directory.

        Args:
            file: Theme config (default: theme.config.yaml)
            target: Output file (default: theme.json)
            tokens: Optional design-token document for !token / !transform
            schema: Optional $schema URL
            version: Optional theme.json version

        Returns:
            JSON string with the output path

        Example:
            theme_generate(file="theme.config.yaml", tokens="tokens.yaml")
        """
        try:
            options = GeneratorOptions(path=str(base_path)).merged(
                file=file,
                target=target,
                tokens=tokens,
                schema_url=schema,
                version=version,
            )
            output = ThemeJsonGenerator(options).generate()
            if output is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": "theme.json generation failed. Check the server log.",
                    }
                )

            return json.dumps({"status": "success", "path": str(output)})
        except Exception as e:
            logger.exception("Failed to generate theme.json")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_generate"] = theme_generate

    return tools
