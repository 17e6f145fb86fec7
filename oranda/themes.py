"""Site and syntax highlighting themes."""

from __future__ import annotations

import enum


class OrandaTheme(enum.Enum):
    """Themes for oranda's output."""

    LIGHT = "light"
    DARK = "dark"
    AXO_LIGHT = "axolight"
    AXO_DARK = "axodark"
    HACKER = "hacker"
    CUPCAKE = "cupcake"

    @classmethod
    def parse(cls, name: str) -> OrandaTheme:
        """Look up a theme by its configuration name or alias."""
        key = _THEME_ALIASES.get(name, name)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown theme: {name!r}") from None

    def as_css_classes(self) -> str:
        """Return the css classes this theme lowers to."""
        return _CSS_CLASSES[self]


_THEME_ALIASES = {"axo_light": "axolight", "axo_dark": "axodark"}

_CSS_CLASSES = {
    OrandaTheme.LIGHT: "light",
    OrandaTheme.DARK: "dark",
    OrandaTheme.AXO_LIGHT: "axo",
    OrandaTheme.AXO_DARK: "dark axo",
    OrandaTheme.HACKER: "hacker",
    OrandaTheme.CUPCAKE: "cupcake",
}

DEFAULT_ORANDA_THEME = OrandaTheme.DARK


class SyntaxTheme(enum.Enum):
    """Syntax highlighting themes."""

    AgilaClassicOceanicNext = "AgilaClassicOceanicNext"
    AgilaCobalt = "AgilaCobalt"
    AgilaLightSolarized = "AgilaLightSolarized"
    AgilaMonokaiExtended = "AgilaMonokaiExtended"
    AgilaNeonMonocyanide = "AgilaNeonMonocyanide"
    AgilaOceanicNext = "AgilaOceanicNext"
    AgilaOriginOceanicNext = "AgilaOriginOceanicNext"
    Base16EightiesDark = "Base16EightiesDark"
    Base16MochaDark = "Base16MochaDark"
    Base16OceanDark = "Base16OceanDark"
    Base16OceanLight = "Base16OceanLight"
    Darkmatter = "Darkmatter"
    Dracula = "Dracula"
    GitHubLight = "GitHubLight"
    MaterialTheme = "MaterialTheme"
    MaterialThemeDarker = "MaterialThemeDarker"
    MaterialThemeLighter = "MaterialThemeLighter"
    MaterialThemePalenight = "MaterialThemePalenight"
    NightOwl = "NightOwl"
    OneDark = "OneDark"

    @classmethod
    def parse(cls, name: str) -> SyntaxTheme:
        """Look up a syntax theme by its exact name."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown syntax theme: {name!r}") from None

    def __str__(self) -> str:
        return self.value