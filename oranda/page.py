"""Pages of the generated site."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from .markdown import to_html
from .paths import determine_path
from .themes import SyntaxTheme


@dataclass
class Page:
    """A rendered page and the file name it is written under."""

    contents: str
    filename: str

    @staticmethod
    def filename_for(source: str | os.PathLike) -> str:
        """Return the HTML file name for a source file."""
        return f"{PurePath(source).stem}.html"

    def output_path(self, dist: str | os.PathLike) -> Path:
        """Where to write this page, as a "pretty link" for non-index HTML pages."""
        dist = Path(dist)
        name = PurePath(self.filename)
        if name.name != "index.html" and name.suffix == ".html":
            return dist / name.parent / name.stem / "index.html"
        return dist / name


def render_markdown_file(
    source: str | os.PathLike,
    syntax_theme: SyntaxTheme = SyntaxTheme.MaterialTheme,
    cwd: str | os.PathLike | None = None,
) -> str | None:
    """Render a markdown file to HTML, or return None if it does not exist."""
    root = Path(cwd) if cwd is not None else Path.cwd()
    path = determine_path(root, None, source)
    if path is None:
        return None
    contents = (root / path).read_text(encoding="utf-8")
    return to_html(contents, syntax_theme)