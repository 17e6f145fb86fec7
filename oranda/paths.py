"""Path helpers that keep paths relative to a workspace root."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import PathdiffError

StrPath = str | os.PathLike


def diff_paths(path: StrPath, base: StrPath) -> Path | None:
    """Express ``path`` relative to ``base``; None if that cannot be done."""
    path, base = Path(path), Path(base)
    if path.is_absolute() != base.is_absolute():
        return path if path.is_absolute() else None

    ita = iter(path.parts)
    itb = iter(base.parts)
    comps: list[str] = []
    while True:
        a = next(ita, None)
        b = next(itb, None)
        if a is None and b is None:
            break
        if b is None:
            comps.append(a)
            comps.extend(ita)
            break
        if a is None:
            comps.append("..")
            continue
        if not comps and a == b:
            continue
        if b == ".":
            comps.append(a)
            continue
        if b == "..":
            return None
        comps.append("..")
        comps.extend(".." for _ in itb)
        comps.append(a)
        comps.extend(ita)
        break
    return Path(*comps)


def determine_path(
    root_path: StrPath, member_path: StrPath | None, path: StrPath
) -> Path | None:
    """Resolve ``path`` to a path relative to the workspace root.

    Absolute paths are returned unchanged. Relative paths are joined onto the
    member path (itself relative to the root unless absolute) or the root,
    canonicalised, and diffed against the root. Returns None if the resolved
    path does not exist.
    """
    root = Path(root_path)
    target = Path(path)
    if target.is_absolute():
        return target

    if member_path is not None:
        member = Path(member_path)
        joined = member / target if member.is_absolute() else root / member / target
    else:
        joined = root / target

    try:
        resolved = joined.resolve(strict=True)
    except (OSError, RuntimeError):
        return None

    relative = diff_paths(resolved, root)
    if relative is None:
        raise PathdiffError(root_path=str(root), path=str(resolved))
    return relative