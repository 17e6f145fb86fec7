"""Theme selection and path checks for building mdbook documentation."""

from __future__ import annotations

import enum
import os
import re
from pathlib import Path, PurePath

from .errors import MdbookBuildRecursive
from .themes import OrandaTheme

THEME_DIR_NAME = "mdbook_theme"

# index.hbs placeholder that receives the theme selector buttons.
KEY_ORANDA_BUTTONS = "<!--ORANDA-THEME-BUTTONS-->"
# variables.css placeholder that receives the selected theme's css vars.
KEY_ORANDA_VARS = "/*ORANDA-THEME-VARS*/"
KEY_BUTTON_ID = "{{THEME-ID}}"
KEY_BUTTON_NAME = "{{THEME-NAME}}"
THEME_BUTTON_HTML_TEMPLATE = (
    "                            "
    '<li role="none"><button role="menuitem" class="theme" '
    'id="{{THEME-ID}}">{{THEME-NAME}}</button></li>'
)

CLASS_ORANDA_DARK = "oranda-dark"
CLASS_ORANDA_LIGHT = "oranda-light"


class AxomdbookTheme(enum.Enum):
    """A theme that can be injected when building an mdbook."""

    DEFAULT = "default"
    DEFAULT_LIGHT = "default_light"
    AXO_DARK = "axo_dark"
    AXO_LIGHT = "axo_light"
    HACKER = "hacker"
    CUPCAKE = "cupcake"

    @classmethod
    def from_oranda_theme(cls, oranda_theme: OrandaTheme) -> AxomdbookTheme | None:
        """Return the mdbook theme equivalent to an oranda theme."""
        return _FROM_ORANDA.get(oranda_theme)

    def is_dark(self) -> bool:
        """Whether this theme is presented as a dark mode."""
        return self in _DARK_THEMES

    def twin_theme(self) -> AxomdbookTheme | None:
        """The other mode of a two-in-one theme, if there is one."""
        return _TWINS.get(self)

    def css_class(self) -> str:
        """The css class / localStorage value used for this theme."""
        return CLASS_ORANDA_DARK if self.is_dark() else CLASS_ORANDA_LIGHT

    def display_name(self) -> str:
        """The user-facing name of this theme."""
        return _NAMES[self]


_FROM_ORANDA = {
    OrandaTheme.LIGHT: AxomdbookTheme.DEFAULT_LIGHT,
    OrandaTheme.DARK: AxomdbookTheme.DEFAULT,
    OrandaTheme.AXO_DARK: AxomdbookTheme.AXO_DARK,
    OrandaTheme.AXO_LIGHT: AxomdbookTheme.AXO_LIGHT,
    OrandaTheme.HACKER: AxomdbookTheme.HACKER,
    OrandaTheme.CUPCAKE: AxomdbookTheme.CUPCAKE,
}

_DARK_THEMES = frozenset(
    {AxomdbookTheme.DEFAULT, AxomdbookTheme.AXO_DARK, AxomdbookTheme.HACKER}
)

_TWINS = {
    AxomdbookTheme.DEFAULT: AxomdbookTheme.DEFAULT_LIGHT,
    AxomdbookTheme.DEFAULT_LIGHT: AxomdbookTheme.DEFAULT,
    AxomdbookTheme.AXO_DARK: AxomdbookTheme.AXO_LIGHT,
    AxomdbookTheme.AXO_LIGHT: AxomdbookTheme.AXO_DARK,
}

_NAMES = {
    AxomdbookTheme.DEFAULT: "Oranda Dark",
    AxomdbookTheme.DEFAULT_LIGHT: "Oranda Light",
    AxomdbookTheme.AXO_DARK: "Axo Dark",
    AxomdbookTheme.AXO_LIGHT: "Axo Light",
    AxomdbookTheme.HACKER: "Hacker",
    AxomdbookTheme.CUPCAKE: "Cupcake",
}


def custom_theme(theme_enabled: bool, oranda_theme: OrandaTheme) -> AxomdbookTheme | None:
    """The custom theme to set in an mdbook, or None if theming is disabled."""
    if not theme_enabled:
        return None
    return AxomdbookTheme.from_oranda_theme(oranda_theme)


def custom_theme_dir(dist: str | os.PathLike, cwd: str | os.PathLike | None = None) -> Path:
    """The directory where the custom theme files are written."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / dist / THEME_DIR_NAME


def homogenize_path(path: str | os.PathLike) -> str:
    """Make a relative path start with ``./``; other paths are returned as is."""
    text = os.fspath(path)
    if os.path.isabs(text):
        return text
    first = re.split(r"[\\/]", text, maxsplit=1)[0]
    if first == ".":
        return text
    return os.path.join(".", text)


def _theme_button(theme: AxomdbookTheme) -> str:
    # mdbook uses a css class as the id of a theme button.
    return (
        THEME_BUTTON_HTML_TEMPLATE.replace(KEY_BUTTON_ID, theme.css_class()).replace(
            KEY_BUTTON_NAME, theme.display_name()
        )
        + "\n"
    )


def theme_buttons(theme: AxomdbookTheme) -> str:
    """HTML for the theme selector: the theme itself and then its twin, if any."""
    buttons = _theme_button(theme)
    twin = theme.twin_theme()
    if twin is not None:
        buttons += _theme_button(twin)
    return buttons


def check_build_dirs(
    src_path: str | os.PathLike, dest_path: str | os.PathLike
) -> tuple[str, str]:
    """Refuse a book whose output directory lies inside its source directory.

    Returns the homogenized source and destination paths.
    """
    src = homogenize_path(src_path)
    dest = homogenize_path(dest_path)
    src_parts = PurePath(src).parts
    dest_parts = PurePath(dest).parts
    if dest_parts[: len(src_parts)] == src_parts:
        raise MdbookBuildRecursive(src_path=src, dest_path=dest)
    return src, dest