"""Compile configuration documents into execution plans.

The compiler is pure: it turns a :class:`Config` plus command line
overrides into the ``helm`` invocations needed to render every selected
deployment. Nothing is executed here.

Argument order for each deployment is::

    <helm> template <release> <chart> [--namespace=<ns>]
        [--values=<doc value>]* [<doc option>]* [<cli option>]*
        [--values=<deployment value>]* [<deployment option>]*
        [| <pipe>]*

Command line options are part of the shared base and therefore precede
deployment level values and options.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..core.errors import PathConversionError
from ..core.models import (
    MANIFEST_FILE_NAME,
    CliOverrides,
    Config,
    Deployment,
    ExecutionPlan,
    RenderCommand,
)
from .filters import NameFilter

logger = logging.getLogger(__name__)

UPDATE_DEPENDENCIES = "update_dependencies"


def path_to_str(path: Path) -> str:
    """Convert a path to a UTF-8 representable string."""
    value = os.fspath(path)
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathConversionError(path) from e
    return value


@dataclass
class CommandBuilder:
    """Arguments of one ``helm template`` call under construction.

    ``release_name`` is kept apart from the option list and only placed
    into position when the argument list is built.
    """

    helm_bin: str
    release_name: str
    chart: str
    options: list[str] = field(default_factory=list)
    pipes: list[str] = field(default_factory=list)

    def add_values(self, files: list[Path]) -> None:
        self.options.extend(f"--values={path_to_str(f)}" for f in files)

    def add_options(self, options: list[str]) -> None:
        self.options.extend(options)

    def fork(self) -> CommandBuilder:
        return replace(self, options=list(self.options), pipes=list(self.pipes))

    def build(self) -> list[str]:
        return [
            self.helm_bin,
            "template",
            self.release_name,
            self.chart,
            *self.options,
            *(f"| {pipe}" for pipe in self.pipes),
        ]


def _base_builder(config: Config, overrides: CliOverrides, chart: str) -> CommandBuilder:
    builder = CommandBuilder(
        helm_bin=overrides.helm_bin,
        release_name=config.release_name,
        chart=chart,
    )
    if config.namespace is not None:
        builder.add_options([f"--namespace={config.namespace}"])
    builder.add_values(config.values)
    builder.add_options(config.additional_options)
    builder.add_options(overrides.additional_options)
    return builder


def _deployment_command(
    base: CommandBuilder,
    deployment: Deployment,
    output_path: str,
    overrides: CliOverrides,
) -> RenderCommand:
    builder = base.fork()
    builder.add_values(deployment.values)
    builder.add_options(deployment.additional_options)
    if deployment.release_name is not None:
        builder.release_name = deployment.release_name
    builder.pipes.extend(overrides.pipe)

    output_file = (
        Path(output_path) / deployment.name / builder.release_name / MANIFEST_FILE_NAME
    )
    return RenderCommand(output_path=output_file, args=builder.build())


def compile_plan(
    config: Config,
    overrides: CliOverrides | None = None,
    *,
    logger: logging.Logger = logger,
) -> ExecutionPlan:
    """Compile a configuration document into an execution plan.

    Args:
        config: Loaded (and validated) configuration document
        overrides: Command line options; defaults to no overrides
        logger: Logger for diagnostics

    Returns:
        The plan; ``skip`` is set when the document is disabled

    Raises:
        PathConversionError: If chart, output or value paths are not UTF-8
        FilterError: If the name filter is not a valid regular expression
    """
    overrides = overrides or CliOverrides()

    if config.disabled:
        logger.info("Skipping disabled file")
        return ExecutionPlan(skip=True)

    chart = path_to_str(config.chart)
    output_path = path_to_str(config.output_path)
    name_filter = NameFilter(overrides.filter) if overrides.filter is not None else None

    plan = ExecutionPlan(working_dir=config.base_dir)

    if overrides.update_dependencies:
        plan.pre_commands[UPDATE_DEPENDENCIES] = [
            overrides.helm_bin,
            "dependencies",
            "update",
            chart,
        ]

    base = _base_builder(config, overrides, chart)

    for deployment in config.deployments:
        if name_filter is not None and not name_filter(deployment.name):
            logger.info(f"Skipping deployment {deployment.name!r} (filtered)")
            continue

        if deployment.disabled:
            logger.info(f"Skipping disabled deployment {deployment.name!r}")
            continue

        if deployment.name in plan.commands:
            logger.warning(
                f"Duplicate deployment name {deployment.name!r}; "
                "the later definition replaces the earlier one"
            )

        command = _deployment_command(base, deployment, output_path, overrides)
        logger.debug(f"Planned {deployment.name}: {command.command_line}")
        plan.commands[deployment.name] = command

    return plan
