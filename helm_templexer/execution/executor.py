"""Execute compiled plans."""

from __future__ import annotations

import logging
from typing import IO

from ..core.errors import OutputError
from ..core.models import ExecutionPlan, RenderCommand
from .io import reset_dir, resolve_output
from .runner import run_command

logger = logging.getLogger(__name__)


def run_pre_commands(plan: ExecutionPlan, logger: logging.Logger = logger) -> None:
    """Run pre-commands in insertion order, discarding their output."""
    for key, args in plan.pre_commands.items():
        logger.info(f"Running pre-command {key}")
        run_command(" ".join(args), cwd=plan.working_dir)


def render_to_file(
    name: str,
    command: RenderCommand,
    plan: ExecutionPlan,
    logger: logging.Logger = logger,
) -> None:
    """Render one deployment into a freshly recreated output directory."""
    output_file = resolve_output(command.output_path, plan.working_dir)
    reset_dir(output_file.parent)

    try:
        with output_file.open("w", encoding="utf-8") as handle:
            run_command(command.command_line, handle, cwd=plan.working_dir)
    except OSError as e:
        raise OutputError(output_file, str(e)) from e

    logger.info(f"Rendered {name} → {output_file}")


def execute(
    plan: ExecutionPlan,
    *,
    stdout: IO[str] | None = None,
    logger: logging.Logger = logger,
) -> None:
    """Execute a plan; the first failure aborts the run.

    Args:
        plan: Plan compiled from one configuration document
        stdout: Write all rendered output to this stream instead of files
        logger: Logger for progress messages

    Raises:
        CommandFailedError: If a command fails
        OutputError: If output directories or files cannot be written
    """
    if plan.skip:
        logger.debug("Plan is skipped")
        return

    run_pre_commands(plan, logger)

    logger.info(f"Rendering {len(plan.commands)} deployment(s)")
    for name, command in plan.commands.items():
        if stdout is not None:
            logger.debug(f"Rendering {name} to stdout")
            run_command(command.command_line, stdout, cwd=plan.working_dir)
        else:
            render_to_file(name, command, plan, logger)
