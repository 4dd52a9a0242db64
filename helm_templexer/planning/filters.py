"""Deployment name filtering."""

from __future__ import annotations

import re

from ..core.errors import FilterError


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FilterError(pattern, str(e)) from e


def matches(pattern: str, name: str) -> bool:
    """Return whether ``pattern`` matches anywhere in ``name``.

    The search is unanchored; use ``^``/``$`` in the pattern to anchor it.
    """
    return _compile(pattern).search(name) is not None


class NameFilter:
    """A deployment filter compiled once and applied to many names."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex = _compile(pattern)

    def __call__(self, name: str) -> bool:
        return self._regex.search(name) is not None

    def __repr__(self) -> str:
        return f"NameFilter({self.pattern!r})"
