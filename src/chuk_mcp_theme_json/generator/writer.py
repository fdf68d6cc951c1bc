"""
Theme.json generator - loads a theme config and writes the document.

Each run:
1. Validates and resolves the configured paths
2. Loads the theme config fresh from disk
3. Merges it under the $schema / version metadata
4. Writes the JSON document atomically
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import weakref
from pathlib import Path
from typing import Any

from chuk_mcp_theme_json.constants import ErrorMessages, SuccessMessages
from chuk_mcp_theme_json.generator.loader import ThemeConfigLoader
from chuk_mcp_theme_json.generator.paths import generate_paths, validate_paths
from chuk_mcp_theme_json.models.theme import GeneratorOptions

logger = logging.getLogger(__name__)

_locks_guard = threading.Lock()
# Entries drop out once no writer holds the lock
_target_locks: weakref.WeakValueDictionary[Path, threading.Lock] = weakref.WeakValueDictionary()


def _lock_for(target: Path) -> threading.Lock:
    """Get the write lock for a target path."""
    key = target.resolve()
    with _locks_guard:
        lock = _target_locks.get(key)
        if lock is None:
            lock = _target_locks[key] = threading.Lock()
        return lock


def build_document(config: dict[str, Any], options: GeneratorOptions) -> dict[str, Any]:
    """
    Merge a theme config under the document metadata.

    Keys from the config win over $schema and version.
    """
    return {
        "$schema": options.schema_url,
        "version": options.version,
        **config,
    }


def write_document(document: dict[str, Any], target: Path, indent: int) -> Path:
    """
    Serialize a document to JSON and write it to target.

    Writes go through a temporary file in the target directory that then
    replaces the target. Concurrent writers to the same target are
    serialized.

    Raises:
        TypeError: If the document holds values JSON cannot encode
        ValueError: If the document contains circular references
        OSError: If the file cannot be written
    """
    content = json.dumps(document, indent=indent, ensure_ascii=False)

    with _lock_for(target):
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    return target


class ThemeJsonGenerator:
    """
    Generates theme.json from a theme config.

    The generator never caches the config. Call generate() after every
    build to pick up changes.
    """

    def __init__(self, options: GeneratorOptions | None = None):
        """
        Initialize the generator.

        Args:
            options: Generator options (defaults to the current directory)
        """
        self.options = options or GeneratorOptions()

    def generate(self) -> Path | None:
        """
        Generate the theme.json document.

        Returns:
            Path to the written file, or None if generation failed
        """
        options = self.options
        logger.debug(f"Generating theme.json with options: {options.model_dump(by_alias=True)}")

        document = self.render()
        if document is None:
            return None

        target = generate_paths(options).target
        try:
            output = write_document(document, target, options.indent)
        except (TypeError, ValueError) as e:
            logger.error(ErrorMessages.SERIALIZE_FAILED.format(error=e))
            return None
        except OSError as e:
            logger.error(ErrorMessages.WRITE_FAILED.format(target=target, error=e))
            return None

        logger.info(SuccessMessages.CREATED.format(target=output.name))
        return output

    def render(self) -> dict[str, Any] | None:
        """
        Build the document without writing it.

        Returns:
            The document, or None if the paths are invalid or the config
            could not be loaded
        """
        options = self.options
        if not validate_paths(options):
            return None

        paths = generate_paths(options)
        if not paths.file.exists():
            logger.error(ErrorMessages.SOURCE_NOT_FOUND)
            return None

        try:
            config = ThemeConfigLoader(tokens_path=paths.tokens).load(paths.file)
        except (ValueError, OSError) as e:
            logger.error(f"Unable to load {paths.file}: {e}")
            return None

        return build_document(config, options)


def generate_theme_json(options: GeneratorOptions | None = None, **overrides: Any) -> Path | None:
    """
    Generate theme.json in one call.

    Args:
        options: Base options
        **overrides: Option values to replace (None values are ignored)

    Returns:
        Path to the written file, or None if generation failed
    """
    options = (options or GeneratorOptions()).merged(**overrides)
    return ThemeJsonGenerator(options).generate()
