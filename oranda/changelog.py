"""Changelog page context and release version parsing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import semver

from .errors import PackageVersionParse
from .link import build_os_script_path


class WorkspaceKind(enum.Enum):
    """The kind of project a changelog belongs to."""

    RUST = "rust"
    JAVASCRIPT = "javascript"


@dataclass
class ChangelogRelease:
    """One release as shown on the changelog pages."""

    is_prerelease: bool
    version_tag: str
    name: str | None = None
    formatted_date: str | None = None
    body: str = ""


@dataclass
class ChangelogContext:
    """Context for the changelog index page."""

    releases: list[ChangelogRelease] = field(default_factory=list)
    has_prereleases: bool = False
    has_rss_feed: bool = False
    os_script: str = ""


def parse_version(version_str: str, kind: WorkspaceKind | str) -> semver.Version:
    """Parse a release tag, with or without a leading ``v``, as a package version."""
    kind = WorkspaceKind(kind)
    if version_str.startswith("v"):
        version_str = version_str[1:]
    text = version_str
    if kind is WorkspaceKind.JAVASCRIPT:
        # npm versions tolerate surrounding whitespace and a leading "=".
        text = text.strip().lstrip("=").strip()
    try:
        return semver.Version.parse(text)
    except (ValueError, TypeError):
        raise PackageVersionParse(version=version_str) from None


def empty_context(has_rss_feed: bool, path_prefix: str | None) -> ChangelogContext:
    """Context for a changelog with no releases to show."""
    return ChangelogContext(
        releases=[],
        has_prereleases=False,
        has_rss_feed=has_rss_feed,
        os_script=build_os_script_path(path_prefix),
    )