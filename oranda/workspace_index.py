"""Context for the workspace index page."""

from __future__ import annotations

import os
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse

from .errors import OrandaError, PathDoesNotExist
from .markdown import to_html
from .paths import determine_path


@dataclass
class WorkspaceIndexMember:
    """A workspace member as listed on the index page."""

    name: str
    slug: str
    description: str | None = None
    repository: str | None = None
    logo: Path | None = None


@dataclass
class WorkspaceIndexContext:
    """Members of the workspace, split into preferred and other ones."""

    members: list[WorkspaceIndexMember] = field(default_factory=list)
    docs_content: str | None = None
    preferred_members: list[WorkspaceIndexMember] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        members: Iterable[WorkspaceIndexMember],
        preferred_members: Collection[str] = (),
        docs_content: str | None = None,
    ) -> WorkspaceIndexContext:
        """Sort members by preference and render the markdown docs, if given."""
        context = cls()
        for member in members:
            if member.slug in preferred_members:
                context.preferred_members.append(member)
            else:
                context.members.append(member)
        if docs_content is not None:
            context.docs_content = to_html(docs_content)
        return context


def find_logo_path(
    logo_url: str,
    slug: str,
    path_prefix: str | None = None,
    root_path: str | os.PathLike | None = None,
) -> Path:
    """Return where a member's logo ends up, relative to the workspace root."""
    if logo_url.startswith("http"):
        try:
            url_path = urlparse(logo_url).path
        except ValueError as exc:
            raise OrandaError(f"Could not parse logo URL {logo_url}") from exc
        filename = (url_path or "/").replace("/", "_")[1:]
        return Path(path_prefix or "") / slug / filename

    root = Path(root_path) if root_path is not None else Path.cwd()
    path = determine_path(root, slug, logo_url)
    if path is None:
        raise PathDoesNotExist(path=logo_url)
    return path