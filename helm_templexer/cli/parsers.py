"""CLI argument parsers and validators."""

from __future__ import annotations

import logging

import typer

from ..core.errors import FilterError
from ..planning.filters import NameFilter


def parse_pipe(value: str) -> str:
    """Parse a --pipe fragment, accepting an optional leading '|'."""
    fragment = value.strip()
    if fragment.startswith("|"):
        fragment = fragment[1:].strip()
    if not fragment:
        raise typer.BadParameter(f"Pipe command must not be empty, got: {value!r}")
    return fragment


def check_filter(value: str | None) -> str | None:
    """Reject filters that are not valid regular expressions."""
    if value is None:
        return None
    try:
        NameFilter(value)
    except FilterError as e:
        raise typer.BadParameter(str(e)) from e
    return value


def log_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def parse_pipes(values: list[str] | None) -> list[str]:
    return [parse_pipe(value) for value in values or []]
