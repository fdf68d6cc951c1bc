"""
Path handling for theme.json generation.

All locations are relative to the configured base path and may not
back out of it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_theme_json.constants import ErrorMessages
from chuk_mcp_theme_json.models.theme import GeneratedPaths, GeneratorOptions

logger = logging.getLogger(__name__)

PARENT_REFERENCE = "../"


def validate_paths(options: GeneratorOptions) -> bool:
    """
    Check that path, file and target are set and stay inside the base path.

    Logs the reason when validation fails.

    Returns:
        True if the paths are usable
    """
    if not options.path or not options.file or not options.target:
        logger.error(ErrorMessages.MISSING_PARAMETERS)
        return False

    candidates = [options.path, options.file, options.target]
    if options.tokens:
        candidates.append(options.tokens)

    if any(PARENT_REFERENCE in candidate for candidate in candidates):
        logger.error(ErrorMessages.OUTSIDE_DIRECTORY)
        return False

    return True


def normalize_relative(name: str) -> str:
    """
    Normalize a file option to a single leading slash.

    "./theme.json" -> "/theme.json", "theme.json" -> "/theme.json"
    """
    if name.startswith("."):
        name = name[1:]
    if not name.startswith("/"):
        name = f"/{name}"
    return name


def generate_paths(options: GeneratorOptions) -> GeneratedPaths:
    """Resolve file, target and tokens against the base path."""
    base = options.path.rstrip("/")
    tokens = Path(f"{base}{normalize_relative(options.tokens)}") if options.tokens else None

    return GeneratedPaths(
        file=Path(f"{base}{normalize_relative(options.file)}"),
        target=Path(f"{base}{normalize_relative(options.target)}"),
        tokens=tokens,
    )
