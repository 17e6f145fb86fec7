"""Writing a built site to its output directory."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from .changelog import ChangelogContext
from .errors import DistDirCreationError, OrandaError
from .page import Page

logger = logging.getLogger("oranda")


def clean_dist_dir(dist_path: str | os.PathLike) -> Path:
    """Empty the output directory, creating it if needed, and return its path."""
    dist = Path(dist_path)
    if dist.exists():
        shutil.rmtree(dist)
    try:
        dist.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DistDirCreationError(dist_path=str(dist_path), details=exc) from exc
    return dist


def copy_static(dist_dir: str | os.PathLike, static_path: str | os.PathLike) -> Path:
    """Copy a file or directory into the output directory.

    A directory copied to an output directory that does not exist yet becomes
    that directory; otherwise it is placed inside it under its own name.
    Existing files are overwritten. Returns the path that was written.
    """
    dist = Path(dist_dir)
    source = Path(static_path)
    if not source.exists():
        raise OrandaError(f"Path {source} does not exist and could not be copied.")
    if source.is_dir():
        target = dist / source.name if dist.exists() else dist
        shutil.copytree(source, target, dirs_exist_ok=True)
        return target
    dist.mkdir(parents=True, exist_ok=True)
    target = dist / source.name
    shutil.copy2(source, target)
    return target


def write_pages(pages: Iterable[Page], dist: str | os.PathLike) -> list[Path]:
    """Write every page to disk under ``dist`` and return the written paths."""
    written = []
    for page in pages:
        path = page.output_path(dist)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(page.contents, encoding="utf-8")
        written.append(path)
    return written


def planned_components(
    artifacts: bool, changelog: bool, funding: bool, mdbook: bool
) -> list[str]:
    """Names of the components that will be built, in build order."""
    flags = (
        ("artifacts", artifacts),
        ("changelog", changelog),
        ("funding", funding),
        ("mdbook", mdbook),
    )
    return [name for name, enabled in flags if enabled]


def print_plan(
    artifacts: bool, changelog: bool, funding: bool, mdbook: bool
) -> str | None:
    """Log which components will be built; return the message, if any."""
    components = planned_components(artifacts, changelog, funding, mdbook)
    if not components:
        return None
    message = f"Building components: {', '.join(components)}"
    logger.info(message)
    return message


def changelog_page_names(context: ChangelogContext) -> list[str]:
    """File names of the pages making up the changelog."""
    names = ["changelog.html"]
    if context.has_rss_feed:
        names.append("changelog.rss")
    names.extend(f"changelog/{release.version_tag}.html" for release in context.releases)
    return names