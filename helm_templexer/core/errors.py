"""Exceptions raised while loading, planning and rendering."""

from __future__ import annotations

from pathlib import Path


class TemplexerError(Exception):
    """Base class for all helm-templexer failures."""


class ConfigError(TemplexerError):
    """Raised when a configuration file cannot be read or parsed."""


class ValidationError(TemplexerError):
    """Raised when a loaded configuration fails validation."""


class PathConversionError(TemplexerError):
    """Raised when a path cannot be represented as a UTF-8 string."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path {path!r} cannot be converted to a string")
        self.path = path


class FilterError(TemplexerError):
    """Raised when the deployment filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid filter expression {pattern!r}: {reason}")
        self.pattern = pattern


class CommandFailedError(TemplexerError):
    """Raised when an external command fails or reports a failure."""

    def __init__(self, command: str, output: str, returncode: int) -> None:
        super().__init__(
            f"Command {command!r} failed (exit code {returncode}):\n{output}"
        )
        self.command = command
        self.output = output
        self.returncode = returncode


class OutputError(TemplexerError):
    """Raised when rendered output cannot be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write output to {path}: {reason}")
        self.path = path
