from __future__ import annotations

from typing import TYPE_CHECKING, Any

import commentjson
from lark.exceptions import LarkError
from pydantic import ValidationError

from ..errors import ConfigParseError, ConfigReadError
from ..models.registry import PluginConfig

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_FILE = "config.json"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not valid JSON: {name}")


def parse_json_with_comments(text: str) -> Any:
    """Parse strict JSON that may contain ``//`` and ``#`` comments.

    Raises:
        ValueError: On anything that is not JSON once comments are removed,
            including trailing commas, unquoted keys and NaN/Infinity.
    """
    try:
        return commentjson.loads(text, parse_constant=_reject_constant)
    except (ValueError, LarkError, commentjson.JSONLibraryException) as e:
        raise ValueError(str(e)) from e


def load_json_with_comments(path: Path) -> Any:
    """Read ``path`` as UTF-8 JSON, tolerating comments."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Unable to read config file: {path}", path=path) from e
    try:
        return parse_json_with_comments(text)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}", path=path) from e


def load_plugin_config(directory: Path) -> PluginConfig:
    """Load the config.json of an installed analyser directory."""
    path = directory / CONFIG_FILE
    data = load_json_with_comments(path)
    if not isinstance(data, dict):
        raise ConfigParseError(f"Expected a JSON object in {path}", path=path)
    try:
        return PluginConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid analyser config in {path}: {e}", path=path) from e
