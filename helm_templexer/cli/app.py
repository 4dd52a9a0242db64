"""Main CLI application."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..config import load_config, validate_config
from ..core.errors import TemplexerError
from ..core.models import CliOverrides
from ..execution import execute
from ..planning import compile_plan
from ..settings import Settings
from .parsers import check_filter, log_level, parse_pipes

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="helm-templexer",
    help="Render Helm charts for multiple environments using explicit config.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log warnings and errors."),
    ] = False,
) -> None:
    """Render Helm charts for multiple environments using explicit config."""
    logging.basicConfig(
        level=log_level(verbose, quiet),
        format=Settings().log_format,
        force=True,
    )


@app.command()
def validate(
    input_files: Annotated[
        list[Path],
        typer.Argument(
            help="Configuration file(s) to validate (supported formats: toml, yaml, json).",
        ),
    ],
    skip_disabled: Annotated[
        bool,
        typer.Option(
            "--skip-disabled",
            "-s",
            help="Skip validation if `enabled` is set to false.",
        ),
    ] = False,
) -> None:
    """Validate given configuration file(s)."""
    try:
        for file in input_files:
            validate_config(load_config(file), skip_disabled=skip_disabled)
            logger.info(f"{file} is valid")
    except TemplexerError as e:
        logger.error(f"Configuration failed validation: {e}")
        raise typer.Exit(code=1) from e


@app.command()
def render(
    input_files: Annotated[
        list[Path],
        typer.Argument(
            help="Configuration file(s) to render deployments for (supported formats: toml, yaml, json).",
        ),
    ],
    additional_options: Annotated[
        list[str],
        typer.Option(
            "--additional-options",
            "-a",
            help="Pass additional options to the underlying 'helm template' call, e.g. '--set-string image.tag=${revision}'. Repeatable.",
            metavar="OPTION",
        ),
    ] = [],
    update_dependencies: Annotated[
        bool,
        typer.Option(
            "--update-dependencies",
            "-u",
            help="Run 'helm dependencies update' before rendering.",
        ),
    ] = False,
    filter_: Annotated[
        str | None,
        typer.Option(
            "--filter",
            "-f",
            help="Only render deployments whose name matches this regular expression.",
            metavar="REGEX",
            callback=check_filter,
        ),
    ] = None,
    pipe: Annotated[
        list[str],
        typer.Option(
            "--pipe",
            "-p",
            help="Pipe rendered output through this shell command. Repeatable, applied in order.",
            metavar="COMMAND",
            callback=parse_pipes,
        ),
    ] = [],
    helm_bin: Annotated[
        str | None,
        typer.Option(
            "--helm-bin",
            "-b",
            help="Helm binary to use (default: 'helm' from PATH, or HELM_TEMPLEXER_HELM_BIN).",
            metavar="PATH",
        ),
    ] = None,
    to_stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Write rendered manifests to stdout instead of the output path.",
        ),
    ] = False,
) -> None:
    """Render deployments for given configuration file(s)."""
    overrides = CliOverrides(
        additional_options=additional_options,
        update_dependencies=update_dependencies,
        filter=filter_,
        pipe=pipe,
        helm_bin=helm_bin or Settings().helm_bin,
    )
    logger.debug(f"Render options: {overrides}")

    try:
        for file in input_files:
            logger.info(f"Rendering {file}")
            config = load_config(file)
            validate_config(config, skip_disabled=True)
            plan = compile_plan(config, overrides)
            execute(plan, stdout=sys.stdout if to_stdout else None)
    except TemplexerError as e:
        logger.error(f"Rendering failed: {e}")
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
