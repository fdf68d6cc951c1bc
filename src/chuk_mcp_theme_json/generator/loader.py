"""
Theme config loader - reads theme configs and design-token documents.

Configs can come from:
1. YAML files (.yaml/.yml), optionally referencing tokens with tags
2. JSON files (.json)
3. Python modules (.py) exposing a module-level THEME mapping

Nothing is cached. Every load re-reads the file so edits between builds
are always picked up. Python modules are executed into a fresh module
object that is never registered in sys.modules.

YAML tags:
    !token theme.extend.colors.blue
        The raw token value at a dotted path (null when missing)
    !transform {kind: palette, tokens: theme.extend.colors, only: [blue]}
        transform() applied to the tokens at that path (false when missing)
"""

from __future__ import annotations

import importlib.machinery
import importlib.util
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_theme_json.constants import (
    JSON_SUFFIXES,
    PYTHON_SUFFIXES,
    THEME_ATTRIBUTE,
    TOKENS_ATTRIBUTE,
    YAML_SUFFIXES,
    ErrorMessages,
    OutputKind,
)
from chuk_mcp_theme_json.core.transform import parse_kind, transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenRef:
    """Placeholder for a !token reference."""

    path: str


@dataclass(frozen=True)
class TransformDirective:
    """Placeholder for a !transform directive."""

    kind: OutputKind
    tokens: str
    only: list[str] = field(default_factory=list)


class FreshSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never reads or writes cached bytecode."""

    def path_stats(self, path: str) -> dict[str, Any]:
        raise OSError("bytecode cache disabled")


class ThemeYamlLoader(yaml.SafeLoader):
    """Safe YAML loader that understands !token and !transform."""


def _construct_token(loader: yaml.SafeLoader, node: yaml.Node) -> TokenRef:
    if not isinstance(node, yaml.ScalarNode):
        raise ValueError(ErrorMessages.INVALID_DIRECTIVE.format(detail="!token expects a path"))
    return TokenRef(path=str(loader.construct_scalar(node)))


def _construct_transform(loader: yaml.SafeLoader, node: yaml.Node) -> TransformDirective:
    if isinstance(node, yaml.MappingNode):
        data = loader.construct_mapping(node, deep=True)
    elif isinstance(node, yaml.SequenceNode):
        # Short form: !transform [palette, theme.extend.colors, [blue, teal]]
        items = loader.construct_sequence(node, deep=True)
        data = dict(zip(("kind", "tokens", "only"), items))
    else:
        raise ValueError(
            ErrorMessages.INVALID_DIRECTIVE.format(detail="expected a mapping or sequence")
        )

    if "kind" not in data or "tokens" not in data:
        raise ValueError(
            ErrorMessages.INVALID_DIRECTIVE.format(detail="'kind' and 'tokens' are required")
        )

    only = data.get("only") or []
    if isinstance(only, (str, int)):
        only = [only]

    return TransformDirective(
        kind=parse_kind(data["kind"]),
        tokens=str(data["tokens"]),
        only=[str(slug) for slug in only],
    )


ThemeYamlLoader.add_constructor("!token", _construct_token)
ThemeYamlLoader.add_constructor("!transform", _construct_transform)


def lookup(tokens: Any, path: str) -> Any:
    """
    Resolve a dotted path inside a token document.

    Numeric segments also match integer keys and list indexes, so
    "theme.spacing.5" finds {"theme": {"spacing": {5: "1.25rem"}}}.

    Returns:
        The value, or None if any segment is missing
    """
    current = tokens
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment in current:
                current = current[segment]
            elif segment.lstrip("-").isdigit() and int(segment) in current:
                current = current[int(segment)]
            else:
                return None
        elif isinstance(current, Sequence) and not isinstance(current, str):
            if not segment.isdigit() or int(segment) >= len(current):
                return None
            current = current[int(segment)]
        else:
            return None
    return current


def resolve_directives(data: Any, tokens: Any) -> Any:
    """Replace !token and !transform placeholders with their values."""
    if isinstance(data, TokenRef):
        return lookup(tokens, data.path)
    if isinstance(data, TransformDirective):
        return transform(data.kind, lookup(tokens, data.tokens), data.only)
    if isinstance(data, dict):
        return {key: resolve_directives(value, tokens) for key, value in data.items()}
    if isinstance(data, list):
        return [resolve_directives(item, tokens) for item in data]
    return data


class ThemeConfigLoader:
    """
    Loads theme configs and token documents from disk.

    A loader is cheap and holds no state besides the optional token
    document location.
    """

    def __init__(self, tokens_path: Path | None = None):
        """
        Initialize the loader.

        Args:
            tokens_path: Design-token document used to resolve YAML tags
        """
        self.tokens_path = tokens_path

    def load(self, path: Path) -> dict[str, Any]:
        """
        Load a theme config.

        Args:
            path: Path to a .yaml, .yml, .json or .py config

        Returns:
            The theme config mapping with all directives resolved

        Raises:
            ValueError: If the file is unsupported or malformed
        """
        suffix = path.suffix.lower()
        logger.debug(f"Loading theme config from {path}")

        if suffix in PYTHON_SUFFIXES:
            data = self._load_module_attribute(path, THEME_ATTRIBUTE)
        elif suffix in YAML_SUFFIXES:
            raw = self._load_yaml(path)
            tokens = None
            if self._has_directives(raw):
                if self.tokens_path is None:
                    logger.warning(ErrorMessages.NO_TOKENS_DOCUMENT.format(path=path))
                tokens = self.load_tokens()
            data = resolve_directives(raw, tokens)
        elif suffix in JSON_SUFFIXES:
            data = self._load_json(path)
        else:
            raise ValueError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=suffix))

        if not isinstance(data, Mapping):
            raise ValueError(ErrorMessages.NOT_A_MAPPING.format(path=path))

        return dict(data)

    def load_tokens(self, path: Path | None = None) -> Any:
        """
        Load a design-token document.

        Args:
            path: Token document, defaults to the loader's tokens_path

        Returns:
            The token data, or None if no document is configured
        """
        path = path or self.tokens_path
        if path is None:
            return None

        suffix = path.suffix.lower()
        logger.debug(f"Loading design tokens from {path}")

        if suffix in PYTHON_SUFFIXES:
            return self._load_module_attribute(path, TOKENS_ATTRIBUTE)
        if suffix in YAML_SUFFIXES:
            return self._load_yaml(path, loader=yaml.SafeLoader)
        if suffix in JSON_SUFFIXES:
            return self._load_json(path)

        raise ValueError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=suffix))

    def _load_yaml(self, path: Path, loader: type[yaml.SafeLoader] = ThemeYamlLoader) -> Any:
        """Load a YAML document."""
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.load(f, Loader=loader)  # noqa: S506 - SafeLoader subclass
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    def _load_json(self, path: Path) -> Any:
        """Load a JSON document."""
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    def _load_module_attribute(self, path: Path, attribute: str) -> Any:
        """
        Execute a Python file into a fresh module and read one attribute.

        Raises:
            ValueError: If the module fails to run or lacks the attribute
        """
        module_name = "_theme_config_" + path.stem.replace(".", "_").replace("-", "_")
        loader = FreshSourceLoader(module_name, str(path))
        spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
        if spec is None or spec.loader is None:
            raise ValueError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=path.suffix))

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise ValueError(ErrorMessages.CONFIG_FAILED.format(path=path, error=e)) from e

        if not hasattr(module, attribute):
            raise ValueError(
                ErrorMessages.MISSING_ATTRIBUTE.format(path=path, attribute=attribute)
            )
        return getattr(module, attribute)

    def _has_directives(self, data: Any) -> bool:
        """Check whether loaded YAML contains any tag placeholders."""
        if isinstance(data, (TokenRef, TransformDirective)):
            return True
        if isinstance(data, dict):
            return any(self._has_directives(value) for value in data.values())
        if isinstance(data, list):
            return any(self._has_directives(item) for item in data)
        return False
