"""Validation of loaded configuration documents."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import ValidationError
from ..core.models import SUPPORTED_SCHEMA_VERSION, Config

logger = logging.getLogger(__name__)


def check_chart(config: Config) -> None:
    """Assert that the chart can be found on disk."""
    if not config.resolve(config.chart).exists():
        raise ValidationError(
            f"Chart '{config.chart}' does not exist or is not readable"
        )


def _check_paths(config: Config, files: list[Path]) -> None:
    for f in files:
        if not config.resolve(f).exists():
            raise ValidationError(f"values file '{f}' does not exist or is not readable")


def check_value_files(config: Config) -> None:
    """Check document value files and those of every non-disabled deployment."""
    _check_paths(config, config.values)
    for deployment in config.deployments:
        if deployment.disabled:
            continue
        _check_paths(config, deployment.values)


def check_schema_version(config: Config) -> None:
    if config.version != SUPPORTED_SCHEMA_VERSION:
        raise ValidationError(
            f"invalid schema version used; only '{SUPPORTED_SCHEMA_VERSION}' is supported"
        )


def check_any_deployment_enabled(config: Config) -> None:
    if all(d.disabled for d in config.deployments):
        raise ValidationError("All deployments are disabled")


def validate_config(config: Config, *, skip_disabled: bool = False) -> None:
    """Validate a loaded configuration.

    Args:
        config: Configuration to validate
        skip_disabled: Do not validate documents with ``enabled: false``

    Raises:
        ValidationError: On the first failed check
    """
    if config.disabled and skip_disabled:
        logger.info("Skipped validation of disabled file")
        return

    check_chart(config)
    check_value_files(config)
    check_schema_version(config)
    check_any_deployment_enabled(config)
