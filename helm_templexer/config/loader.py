"""Configuration file loading (YAML, JSON and TOML)."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import pydantic
import yaml

from ..core.errors import ConfigError
from ..core.models import Config

logger = logging.getLogger(__name__)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_toml(text: str) -> Any:
    return tomllib.loads(text)


_PARSERS = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
    ".toml": _parse_toml,
}


def load_config(path: Path) -> Config:
    """Load and deserialize a configuration file.

    Does not validate the configuration beyond its structure; see
    :func:`helm_templexer.config.validation.validate_config`.

    Args:
        path: Configuration file (.yaml, .yml, .json or .toml)

    Returns:
        Parsed configuration with ``base_dir`` set to the file's directory
    """
    if not path.is_file():
        raise ConfigError(f"File '{path}' does not exist or is not readable")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigError(
            f"Unsupported configuration format {path.suffix!r} for '{path}' "
            f"(supported: {', '.join(sorted(_PARSERS))})"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Failed to parse '{path}': {e}") from e
    except OSError as e:
        raise ConfigError(f"File '{path}' does not exist or is not readable") from e

    try:
        data = parser(text)
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration '{path}' must be a mapping")

    try:
        config = Config.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid configuration '{path}':\n{e}") from e

    logger.debug(f"Loaded {path}: {len(config.deployments)} deployment(s)")
    return config.model_copy(update={"base_dir": path.parent})
