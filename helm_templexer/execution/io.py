"""Filesystem operations for rendered output."""

from __future__ import annotations

import shutil
from pathlib import Path

from ..core.errors import OutputError


def reset_dir(path: Path) -> None:
    """Remove ``path`` with everything below it and create it again empty.

    Args:
        path: Directory to recreate
    """
    try:
        if path.exists():
            shutil.rmtree(path)
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(path, str(e)) from e


def resolve_output(path: Path, working_dir: Path | None) -> Path:
    if working_dir is None or path.is_absolute():
        return path
    return working_dir / path
