from pathlib import Path

import pytest

from oranda.errors import MdbookBuildRecursive
from oranda.mdbook import (
    AxomdbookTheme,
    check_build_dirs,
    custom_theme,
    custom_theme_dir,
    homogenize_path,
    theme_buttons,
)
from oranda.themes import OrandaTheme


@pytest.mark.parametrize(
    "oranda_theme, expected",
    [
        (OrandaTheme.LIGHT, AxomdbookTheme.DEFAULT_LIGHT),
        (OrandaTheme.DARK, AxomdbookTheme.DEFAULT),
        (OrandaTheme.AXO_DARK, AxomdbookTheme.AXO_DARK),
        (OrandaTheme.AXO_LIGHT, AxomdbookTheme.AXO_LIGHT),
        (OrandaTheme.HACKER, AxomdbookTheme.HACKER),
        (OrandaTheme.CUPCAKE, AxomdbookTheme.CUPCAKE),
    ],
)
def test_from_oranda_theme(oranda_theme, expected):
    assert AxomdbookTheme.from_oranda_theme(oranda_theme) is expected


@pytest.mark.parametrize(
    "theme, dark",
    [
        (AxomdbookTheme.DEFAULT, True),
        (AxomdbookTheme.DEFAULT_LIGHT, False),
        (AxomdbookTheme.AXO_DARK, True),
        (AxomdbookTheme.AXO_LIGHT, False),
        (AxomdbookTheme.HACKER, True),
        (AxomdbookTheme.CUPCAKE, False),
    ],
)
def test_darkness(theme, dark):
    assert theme.is_dark() is dark


@pytest.mark.parametrize(
    "theme, twin",
    [
        (AxomdbookTheme.DEFAULT, AxomdbookTheme.DEFAULT_LIGHT),
        (AxomdbookTheme.DEFAULT_LIGHT, AxomdbookTheme.DEFAULT),
        (AxomdbookTheme.AXO_DARK, AxomdbookTheme.AXO_LIGHT),
        (AxomdbookTheme.AXO_LIGHT, AxomdbookTheme.AXO_DARK),
        (AxomdbookTheme.HACKER, None),
        (AxomdbookTheme.CUPCAKE, None),
    ],
)
def test_twin_is_involution_and_opposite(theme, twin):
    result = theme.twin_theme()
    assert result is twin
    if result is not None:
        assert result.twin_theme() is theme
        assert result.is_dark() != theme.is_dark()


def test_css_class_and_names():
    assert AxomdbookTheme.DEFAULT.css_class() == "oranda-dark"
    assert AxomdbookTheme.CUPCAKE.css_class() == "oranda-light"
    assert AxomdbookTheme.DEFAULT.display_name() == "Oranda Dark"
    assert AxomdbookTheme.AXO_LIGHT.display_name() == "Axo Light"


def test_custom_theme_respects_toggle():
    assert custom_theme(False, OrandaTheme.DARK) is None
    assert custom_theme(True, OrandaTheme.HACKER) is AxomdbookTheme.HACKER


def test_custom_theme_dir(tmp_path):
    assert custom_theme_dir("public", tmp_path) == tmp_path / "public" / "mdbook_theme"


def test_homogenize_path():
    assert homogenize_path("book") == "./book"
    assert homogenize_path("./book") == "./book"
    absolute = str(Path("/srv/book").resolve())
    assert homogenize_path(absolute) == absolute


def test_theme_buttons_with_twin():
    html = theme_buttons(AxomdbookTheme.DEFAULT)
    lines = html.splitlines()
    assert len(lines) == 2
    assert 'id="oranda-dark">Oranda Dark</button>' in lines[0]
    assert 'id="oranda-light">Oranda Light</button>' in lines[1]
    assert html.endswith("\n")


def test_theme_buttons_without_twin():
    lines = theme_buttons(AxomdbookTheme.HACKER).splitlines()
    assert len(lines) == 1
    assert ">Hacker</button>" in lines[0]


def test_check_build_dirs_rejects_nested_output():
    with pytest.raises(MdbookBuildRecursive) as info:
        check_build_dirs("src", "src/book")
    assert info.value.src_path == "./src"
    assert info.value.dest_path == "./src/book"


def test_check_build_dirs_rejects_same_dir():
    with pytest.raises(MdbookBuildRecursive):
        check_build_dirs("./docs", "docs")


def test_check_build_dirs_accepts_siblings():
    assert check_build_dirs("src", "book") == ("./src", "./book")


def test_check_build_dirs_is_component_wise():
    assert check_build_dirs("src", "srcbook") == ("./src", "./srcbook")