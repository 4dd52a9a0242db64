"""Run shell commands and decide whether they succeeded."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import IO

from ..core.errors import CommandFailedError

logger = logging.getLogger(__name__)

# helm logs some invocation errors with this phrase but still exits with 0.
FAILURE_MARKER = "exit status 1"


def is_failure(returncode: int, output: str) -> bool:
    return returncode != 0 or FAILURE_MARKER in output


def run_command(
    command_line: str,
    sink: IO[str] | None = None,
    *,
    cwd: Path | None = None,
) -> str:
    """Run a command line through the shell.

    stderr is merged into stdout and the combined output is captured
    completely before success is decided. Only successful output reaches
    ``sink``.

    Args:
        command_line: Shell command, may contain pipes
        sink: Stream receiving the output on success; ``None`` discards it
        cwd: Working directory for the command

    Returns:
        The captured output

    Raises:
        CommandFailedError: On a non-zero exit code, or when the output
            contains ``exit status 1``, or cannot be started
    """
    logger.debug(f"Running: {command_line}")
    try:
        result = subprocess.run(
            command_line,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            cwd=cwd,
        )
    except OSError as e:
        raise CommandFailedError(command_line, str(e), -1) from e
    output = result.stdout or ""

    if is_failure(result.returncode, output):
        raise CommandFailedError(command_line, output, result.returncode)

    if sink is not None:
        sink.write(output)
    return output
