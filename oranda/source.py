"""Helpers for markdown source files."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from .errors import OrandaError
from .paths import diff_paths


def is_markdown(file: str | os.PathLike) -> bool:
    """Whether the file has an ``.md`` extension, in any case."""
    return PurePath(file).suffix.lower() == ".md"


def get_filename_with_dir(file: str | os.PathLike, cwd: str | os.PathLike | None = None) -> Path:
    """Return the file's path relative to ``cwd``, without its extension."""
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as exc:
            raise OrandaError("Unable to read your current working directory.") from exc
    relative = diff_paths(file, cwd)
    path = relative if relative is not None else Path(file)
    return path.with_suffix("") if path.suffix else path